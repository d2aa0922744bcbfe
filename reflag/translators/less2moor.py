"""
less -> moor flag translation.
"""

from typing import Dict, List, Optional

from reflag.translators.base import Translator


SHORT_FLAGS: Dict[str, List[str]] = {
    # Display options
    "S": ["--wrap=false"],           # chop long lines; moor wraps by default
    "N": ["--no-linenumbers"],
    "F": ["--follow"],

    # Quit behavior
    "e": ["--quit-if-one-screen"],
    "E": ["--quit-if-one-screen"],
    "f": [],                         # force open non-regular files
    "X": ["--no-clear-on-exit"],
    "K": [],                         # exit on Ctrl-C, moor default

    # Search and highlighting, handled interactively by moor
    "i": [],
    "I": [],
    "g": [],
    "G": [],
    "W": [],
    "w": [],
    "s": [],
    "r": [],
    "R": [],                         # ANSI colors, moor default
    "q": [],
    "Q": [],

    "n": [],
    "J": [],

    # Repaint behavior
    "c": [],
    "C": [],
    "d": [],
    "u": [],
    "U": [],

    # Misc
    "V": ["-version"],
    "?": [],
    "m": [],
    "M": [],
    "a": [],
    "A": [],
    "B": [],
    "~": [],
    "L": [],
    "v": [],
}

# Flags that take a value in less. "x" and "#" translate; the rest have no
# moor equivalent and are absorbed together with their value.
VALUE_SHORT_FLAGS = frozenset("tTpPoOkDbhjyzx#")

LONG_FLAGS: Dict[str, List[str]] = {
    "--quit-if-one-screen":  ["--quit-if-one-screen"],
    "--no-init":             ["--no-clear-on-exit"],
    "--chop-long-lines":     ["--wrap=false"],
    "--RAW-CONTROL-CHARS":   [],
    "--raw-control-chars":   [],
    "--squeeze-blank-lines": [],
    "--follow-name":         ["--follow"],
    "--SILENT":              [],
    "--silent":              [],
    "--QUIET":               [],
    "--quiet":               [],
    "--version":             ["-version"],
    "--help":                [],
    "--mouse":               ["-mousemode=scroll"],
    "--MOUSE":               ["-mousemode=scroll"],
    "--no-keypad":           [],
    "--use-color":           [],
    "--tilde":               [],
    "--hilite-unread":       [],
    "--HILITE-UNREAD":       [],
    "--underline-special":   [],
    "--UNDERLINE-SPECIAL":   [],
}

# Long options that take a value, either as --opt=value or --opt value
VALUE_LONG_FLAGS = frozenset([
    "--tabs", "--shift", "--tag", "--tag-file", "--quotes", "--wheel-lines",
    "--window", "--max-forw-scroll", "--line-num-width", "--status-col-width",
])


def _value_long_flag(opt: str, value: str) -> List[str]:
    if opt == "--tabs":
        return ["-tab-size=" + value]
    if opt == "--shift":
        return ["-shift=" + value]
    return []


def _value_short_flag(flag: str, value: Optional[str]) -> List[str]:
    if flag == "x" and value:
        return ["-tab-size=" + value]
    if flag == "#":
        # moor's --shift takes no amount on this path
        return ["--shift"]
    return []


def translate_flags(args: List[str]) -> List[str]:
    """Translate ``less`` arguments to ``moor`` arguments."""
    result: List[str] = []
    files: List[str] = []
    initial_command = None
    in_options = True

    i = 0
    while i < len(args):
        a = args[i]
        i += 1

        # Every -- is dropped, even after options have ended
        if a == "--":
            in_options = False
            continue

        if not in_options:
            files.append(a)
            continue

        # +N jumps to a line; +/pattern and other commands are not supported
        if a.startswith("+"):
            if len(a) > 1 and a[1].isdigit():
                initial_command = a
            continue

        if a.startswith("--"):
            opt, sep, value = a.partition("=")
            if opt in VALUE_LONG_FLAGS:
                if not sep:
                    if i >= len(args):
                        continue
                    value = args[i]
                    i += 1
                result.extend(_value_long_flag(opt, value))
            elif a in LONG_FLAGS:
                result.extend(LONG_FLAGS[a])
            else:
                # Unknown long flag - moor might handle it
                result.append(a)
            continue

        if a.startswith("-") and len(a) > 1:
            cluster = a[1:]
            for j, ch in enumerate(cluster):
                if ch in VALUE_SHORT_FLAGS:
                    value = cluster[j + 1:]
                    if not value and i < len(args):
                        value = args[i]
                        i += 1
                    result.extend(_value_short_flag(ch, value or None))
                    break
                # Unknown flags are silently ignored
                result.extend(SHORT_FLAGS.get(ch, []))
            continue

        files.append(a)

    if initial_command:
        result.append(initial_command)

    return result + files


class LessToMoor(Translator):
    """Translate ``less`` options for the ``moor`` pager."""

    name = "less2moor"
    source_tool = "less"
    target_tool = "moor"

    def translate(self, args: List[str], mode: str = "") -> List[str]:
        return translate_flags(args)

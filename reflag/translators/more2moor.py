"""
more -> moor flag translation.

more has far fewer options than less; most of them describe screen handling
that moor does on its own.
"""

from typing import Dict, List

from reflag.translators.base import Translator


SHORT_FLAGS: Dict[str, List[str]] = {
    "d": [],                          # help prompt on invalid key
    "l": [],                          # do not pause at form feeds
    "f": [],                          # count logical lines
    "p": [],                          # clear screen before display
    "c": [],                          # draw from top of screen
    "s": [],                          # squeeze blank lines
    "u": [],                          # suppress underlining
    "e": ["--quit-if-one-screen"],    # exit at end of file (GNU)
    "V": ["-version"],
}

LONG_FLAGS: Dict[str, List[str]] = {
    "--help":        [],
    "--version":     ["-version"],
    "--exit-on-eof": ["--quit-if-one-screen"],
    "--no-init":     ["--no-clear-on-exit"],
    "--plain":       [],
    "--squeeze":     [],
    "--print-over":  [],
    "--clean-print": [],
    "--logical":     [],
    "--no-pause":    [],
    "--silent":      [],
}


def translate_flags(args: List[str]) -> List[str]:
    """Translate ``more`` arguments to ``moor`` arguments."""
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

        if a.startswith("+"):
            if len(a) > 1 and a[1].isdigit():
                initial_command = a
            continue

        if a.startswith("--"):
            if a in LONG_FLAGS:
                result.extend(LONG_FLAGS[a])
            elif a.startswith("--lines="):
                pass  # screen size, no moor equivalent
            elif a == "--lines":
                i += 1
            else:
                result.append(a)
            continue

        if a.startswith("-") and len(a) > 1:
            if a[1].isdigit():
                continue  # -10: screen size
            if a == "-n":
                i += 1  # -n <lines>
                continue
            for ch in a[1:]:
                result.extend(SHORT_FLAGS.get(ch, []))
            continue

        files.append(a)

    if initial_command:
        result.append(initial_command)

    return result + files


class MoreToMoor(Translator):
    """Translate ``more`` options for the ``moor`` pager."""

    name = "more2moor"
    source_tool = "more"
    target_tool = "moor"

    def translate(self, args: List[str], mode: str = "") -> List[str]:
        return translate_flags(args)

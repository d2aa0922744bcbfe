"""
cat -> bat flag translation.

bat is a pager-capable viewer; to stand in for ``cat`` it must print plainly,
never page, and only colour output when writing to a terminal.
"""

from typing import Dict, List

from reflag.translators.base import Translator


PLAIN_MODE = ["-p", "--paging=never", "--color=auto"]

# cat short flags with a bat equivalent
SHORT_FLAGS: Dict[str, str] = {
    "n": "-n",   # number lines
    "s": "-s",   # squeeze blank lines
    "u": "-u",   # unbuffered (bat ignores it)
    "A": "-A",   # show non-printable characters
    "b": "-n",   # number non-blank lines (bat numbers all)
    "e": "-A",   # -vE
    "E": "-A",   # show line ends
    "t": "-A",   # -vT
    "T": "-A",   # show tabs
    "v": "-A",   # show non-printing
}

# bat flags that take a value; absorbed together with it
VALUE_SHORT_FLAGS = frozenset("lHm")

# bat flags without a value that plain mode overrides or cat lacks
IGNORED_SHORT_FLAGS = frozenset("pdfLrSVh")

LONG_FLAGS: Dict[str, str] = {
    "--number":        "-n",
    "--squeeze-blank": "-s",
    "--show-all":      "-A",
    "--unbuffered":    "-u",
}

# bat-only long flags that take a value
VALUE_LONG_FLAGS = frozenset([
    "--language", "--highlight-line", "--file-name", "--diff-context",
    "--tabs", "--wrap", "--terminal-width", "--color", "--italic-text",
    "--decorations", "--paging", "--pager", "--map-syntax",
    "--ignored-suffix", "--theme", "--theme-light", "--theme-dark", "--style",
    "--line-range", "--squeeze-limit", "--strip-ansi",
    "--nonprintable-notation", "--binary", "--completion",
])

# bat-only long switches
IGNORED_LONG_FLAGS = frozenset([
    "--plain", "--force-colorization", "--diff", "--list-themes",
    "--list-languages", "--chop-long-lines", "--diagnostic",
    "--acknowledgements", "--set-terminal-title", "--help", "--version",
])


def _long_flag(arg: str, next_arg, result: List[str]) -> bool:
    """
    Translate one long option into *result*.

    Returns True when *next_arg* was consumed as the option's value.
    """
    if "=" in arg:
        opt = arg.split("=", 1)[0]
        if opt in LONG_FLAGS:
            result.append(LONG_FLAGS[opt])
        elif opt not in VALUE_LONG_FLAGS:
            # Unknown option, might be a file starting with --
            result.append(arg)
        return False

    if arg in LONG_FLAGS:
        result.append(LONG_FLAGS[arg])
        return False
    if arg in IGNORED_LONG_FLAGS:
        return False
    if arg in VALUE_LONG_FLAGS:
        return next_arg is not None and not next_arg.startswith("-")
    result.append(arg)
    return False


def _short_flags(arg: str, next_arg, result: List[str]) -> bool:
    """
    Translate a short flag cluster such as ``-ns`` into *result*.

    Returns True when *next_arg* was consumed as a flag value.
    """
    cluster = arg[1:]
    for j, ch in enumerate(cluster):
        if ch in SHORT_FLAGS:
            result.append(SHORT_FLAGS[ch])
        elif ch in VALUE_SHORT_FLAGS:
            # Only the last flag of a cluster takes the next token as value
            if j == len(cluster) - 1:
                return next_arg is not None
        elif ch in IGNORED_SHORT_FLAGS:
            continue
        else:
            result.append("-" + ch)
    return False


def translate_flags(args: List[str]) -> List[str]:
    """Translate ``cat`` arguments to ``bat`` arguments."""
    result = list(PLAIN_MODE)

    i = 0
    while i < len(args):
        a = args[i]
        next_arg = args[i + 1] if i + 1 < len(args) else None

        if a == "--":
            # Everything from here on is a file
            result.extend(args[i:])
            break

        consumed = False
        if a.startswith("--"):
            consumed = _long_flag(a, next_arg, result)
        elif a.startswith("-") and len(a) > 1:
            consumed = _short_flags(a, next_arg, result)
        else:
            result.append(a)

        i += 2 if consumed else 1

    return result


class CatToBat(Translator):
    """Make ``bat`` behave like a flat, non-interactive ``cat``."""

    name = "cat2bat"
    source_tool = "cat"
    target_tool = "bat"

    def translate(self, args: List[str], mode: str = "") -> List[str]:
        return translate_flags(args)

"""
ps -> procs flag translation.

procs lists every process by default and filters by bare keywords (user,
pid or command name), so most ps selection options disappear and the
user/pid/command filters become positional arguments.
"""

from typing import List

from reflag.translators.base import Translator


# Letters that make up BSD-style option words such as "aux" or "axjf"
BSD_OPTION_CHARS = frozenset("auxefj")
BSD_OPTION_MAX_LEN = 6

# Short options whose value becomes a procs keyword
FILTER_SHORT_FLAGS = frozenset("uUpCq")

# Short options whose value is discarded
DROPPED_VALUE_SHORT_FLAGS = frozenset("oOtsgG")

FILTER_LONG_FLAGS = frozenset(["--pid", "--user", "--User", "--quick-pid"])

DROPPED_VALUE_LONG_FLAGS = frozenset([
    "--ppid", "--sid", "--format", "--tty", "--cols", "--columns", "--rows",
    "--lines", "--width", "--group", "--Group",
])

TREE_FLAGS = frozenset(["--forest", "-H"])

# ps sort keys with a different procs column name
SORT_KEY_ALIASES = {
    "pcpu": "cpu",
    "pmem": "mem",
}


def is_bsd_style_options(word: str) -> bool:
    """
    Guess whether *word* is a dashless BSD option cluster like ``aux``.

    Only short words drawn entirely from the common BSD letters qualify,
    so ``nginx`` or ``1234`` stay search terms.
    """
    if not word or len(word) > BSD_OPTION_MAX_LEN:
        return False
    return all(c in BSD_OPTION_CHARS for c in word)


def _sort_args(spec: str) -> List[str]:
    """--sort=-mem -> --sortd mem; --sort=cpu / --sort=+cpu -> --sorta cpu."""
    key = spec.split(",", 1)[0]
    direction = "--sorta"
    if key.startswith("-"):
        direction = "--sortd"
        key = key[1:]
    elif key.startswith("+"):
        key = key[1:]
    key = key.lstrip("%")
    if not key:
        return []
    return [direction, SORT_KEY_ALIASES.get(key, key)]


def _filter_values(value: str) -> List[str]:
    return [v for v in value.split(",") if v]


def translate_flags(args: List[str]) -> List[str]:
    """Translate ``ps`` arguments to ``procs`` arguments."""
    options: List[str] = []
    keywords: List[str] = []

    def add_option(*opts):
        for opt in opts:
            if opt == "--tree" and opt in options:
                continue
            options.append(opt)

    rest = list(args)
    if rest and is_bsd_style_options(rest[0]):
        # "ps axjf": f asks for a process tree
        if "f" in rest[0]:
            add_option("--tree")
        rest = rest[1:]

    i = 0
    while i < len(rest):
        a = rest[i]
        i += 1

        if a == "--":
            keywords.extend(rest[i:])
            break

        if a in TREE_FLAGS:
            add_option("--tree")
            continue

        if a.startswith("--"):
            opt, sep, value = a.partition("=")
            takes_value = (opt == "--sort" or opt in FILTER_LONG_FLAGS
                           or opt in DROPPED_VALUE_LONG_FLAGS)
            if takes_value and not sep:
                if i >= len(rest):
                    continue
                value = rest[i]
                i += 1
            if opt == "--sort":
                add_option(*_sort_args(value))
            elif opt in FILTER_LONG_FLAGS:
                keywords.extend(_filter_values(value))
            # anything else has no procs equivalent
            continue

        if a.startswith("-") and len(a) > 1:
            cluster = a[1:]
            for j, ch in enumerate(cluster):
                if ch in FILTER_SHORT_FLAGS or ch in DROPPED_VALUE_SHORT_FLAGS:
                    value = cluster[j + 1:]
                    if not value:
                        if i >= len(rest):
                            break
                        value = rest[i]
                        i += 1
                    if ch in FILTER_SHORT_FLAGS:
                        keywords.extend(_filter_values(value))
                    break
                if ch == "H":
                    add_option("--tree")
                # -e, -A, -f, -l, ... : procs shows everything already
            continue

        # Search term or PID
        keywords.append(a)

    return options + keywords


class PsToProcs(Translator):
    """Translate ``ps`` options for ``procs``."""

    name = "ps2procs"
    source_tool = "ps"
    target_tool = "procs"

    def translate(self, args: List[str], mode: str = "") -> List[str]:
        return translate_flags(args)

"""
du -> dust flag translation.

Note the letter swap between the tools: du's ``-s`` (summarize) is dust's
``-d 0``, while dust's ``-s`` means apparent size.
"""

from typing import Dict, List, Optional

from reflag.translators.base import Translator


SHORT_FLAGS: Dict[str, List[str]] = {
    "s": ["-d", "0"],        # summarize
    "h": [],                 # human-readable is dust's default
    "a": ["-F"],             # all files, not just directories
    "L": ["-L"],             # dereference all symlinks
    "H": ["-L"],             # dereference command-line symlinks
    "P": [],                 # no dereferencing, default
    "x": ["-x"],             # one file system
    "b": ["-o", "b"],
    "k": ["-o", "kb"],
    "m": ["-o", "mb"],
    "g": ["-o", "gb"],       # BSD
    "A": ["-s"],             # apparent size (macOS)
    "c": [],                 # grand total, dust always shows one
    "l": [],                 # count hard links
    "S": [],                 # separate dirs
    "n": [],                 # nodump (BSD)
    "r": [],
    "0": [],
}

# Short flags taking a value, attached (-d2) or separate (-d 2)
VALUE_SHORT_FLAGS: Dict[str, Optional[str]] = {
    "d": "-d",               # max depth
    "I": "-v",               # exclude pattern (BSD)
    "t": "-z",               # threshold
    "B": None,               # block size, no equivalent
}

LONG_FLAGS: Dict[str, List[str]] = {
    "--summarize":        ["-d", "0"],
    "--human-readable":   [],
    "--all":              ["-F"],
    "--dereference":      ["-L"],
    "--dereference-args": ["-L"],
    "--no-dereference":   [],
    "--one-file-system":  ["-x"],
    "--si":               ["-o", "si"],
    "--apparent-size":    ["-s"],
    "--bytes":            ["-s", "-o", "b"],
    "--inodes":           ["-f"],
    "--total":            [],
    "--count-links":      [],
    "--separate-dirs":    [],
    "--null":             [],
    "--time":             [],
}

VALUE_LONG_FLAGS: Dict[str, Optional[str]] = {
    "--max-depth":    "-d",
    "--exclude":      "-v",
    "--threshold":    "-z",
    "--exclude-from": "-X",
    "--block-size":   None,
    "--time-style":   None,
}


def translate_flags(args: List[str]) -> List[str]:
    """Translate ``du`` arguments to ``dust`` arguments."""
    result: List[str] = []
    paths: List[str] = []

    i = 0
    while i < len(args):
        a = args[i]
        i += 1

        if a == "--":
            if args[i:]:
                paths.append("--")
                paths.extend(args[i:])
            break

        if a.startswith("--"):
            opt, sep, value = a.partition("=")
            if opt in VALUE_LONG_FLAGS:
                if not sep:
                    if i >= len(args):
                        continue
                    value = args[i]
                    i += 1
                target = VALUE_LONG_FLAGS[opt]
                if target:
                    result.extend([target, value])
            elif opt in LONG_FLAGS:
                result.extend(LONG_FLAGS[opt])
            else:
                result.append(a)
            continue

        if a.startswith("-") and len(a) > 1:
            cluster = a[1:]
            for j, ch in enumerate(cluster):
                if ch in VALUE_SHORT_FLAGS:
                    value = cluster[j + 1:]
                    if not value:
                        if i >= len(args):
                            break
                        value = args[i]
                        i += 1
                    target = VALUE_SHORT_FLAGS[ch]
                    if target:
                        result.extend([target, value])
                    break
                if ch in SHORT_FLAGS:
                    result.extend(SHORT_FLAGS[ch])
                else:
                    result.append("-" + ch)
            continue

        paths.append(a)

    return result + paths


class DuToDust(Translator):
    """Translate ``du`` options for ``dust``."""

    name = "du2dust"
    source_tool = "du"
    target_tool = "dust"

    def translate(self, args: List[str], mode: str = "") -> List[str]:
        return translate_flags(args)

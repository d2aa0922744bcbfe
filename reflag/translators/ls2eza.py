"""
ls -> eza flag translation.

eza sorts oldest/smallest first where ls sorts newest/largest first, so the
time and size sort flags need an extra ``--reverse`` unless the user already
asked for one.
"""

from typing import Dict, List

from reflag.translators.base import Translator


# Sort flags whose default direction is inverted in eza
REVERSE_NEEDED = frozenset("tScuU")

SHORT_FLAGS: Dict[str, List[str]] = {
    # Display format
    "l": ["-l"],
    "1": ["-1"],
    "C": ["--grid"],
    "x": ["--across"],
    "m": ["--oneline"],            # no comma-separated mode in eza

    # Show/hide entries
    "a": ["-a"],
    "A": ["-A"],
    "d": ["-d"],
    "R": ["--recurse"],

    # Sorting
    "t": ["--sort=modified"],
    "S": ["--sort=size"],
    "c": ["--sort=changed"],
    "u": ["--sort=accessed"],
    "U": ["--sort=created"],       # BSD
    "f": ["--sort=none", "-a"],
    "v": ["--sort=name"],          # natural version sort (approximate)

    # File size display
    "h": [],                       # default in eza
    "k": [],
    "s": ["--blocksize"],

    # Indicators and classification
    "F": ["-F"],
    "p": ["--classify"],

    # Long format options
    "i": ["--inode"],
    "n": ["--numeric"],
    "o": ["-l", "--no-group"],     # BSD
    "g": ["-l", "--no-user"],      # GNU
    "O": ["--flags"],              # BSD/macOS file flags
    "e": [],                       # ACLs
    "T": ["--time-style=full-iso"],  # full timestamp, not tree
    "@": ["--extended"],

    # Symlinks
    "L": ["-X"],
    "H": ["-X"],
    "P": [],                       # default

    "G": [],                       # color is default in eza

    # Non-printable character handling
    "q": [],
    "w": [],
    "b": [],
    "B": [],
}

LONG_FLAGS: Dict[str, List[str]] = {
    "--all":             ["-a"],
    "--almost-all":      ["-A"],
    "--directory":       ["-d"],
    "--recursive":       ["--recurse"],
    "--human-readable":  [],
    "--inode":           ["--inode"],
    "--numeric-uid-gid": ["--numeric"],
    "--classify":        ["-F"],
    "--file-type":       ["--classify"],
    "--dereference":     ["-X"],
    "--no-group":        ["--no-group"],
}

# Long options eza understands with the same spelling
PASSTHROUGH_PREFIXES = ("--color", "--sort=", "--time=")


def _dedupe(flags: List[str]) -> List[str]:
    seen = set()
    result = []
    for f in flags:
        if f not in seen:
            seen.add(f)
            result.append(f)
    return result


def translate_flags(args: List[str]) -> List[str]:
    """Translate ``ls`` arguments to ``eza`` arguments."""
    eza_args: List[str] = []
    paths: List[str] = []
    trailing: List[str] = []
    user_reverse = False
    needs_reverse = False

    for i, a in enumerate(args):
        if a == "--":
            trailing = ["--"] + args[i + 1:]
            break
        if a.startswith("--"):
            if a == "--reverse":
                user_reverse = True
            elif a.startswith(PASSTHROUGH_PREFIXES):
                eza_args.append(a)
            elif a in LONG_FLAGS:
                eza_args.extend(LONG_FLAGS[a])
            else:
                # Unknown long option - let eza decide
                eza_args.append(a)
        elif a.startswith("-") and len(a) > 1:
            for ch in a[1:]:
                if ch == "r":
                    user_reverse = True
                    continue
                if ch in REVERSE_NEEDED:
                    needs_reverse = True
                if ch in SHORT_FLAGS:
                    eza_args.extend(SHORT_FLAGS[ch])
                else:
                    eza_args.append("-" + ch)
        else:
            paths.append(a)

    # ls -lt  -> newest first, eza needs --reverse
    # ls -ltr -> oldest first, eza default
    # ls -r   -> reverse alphabetical, eza needs --reverse
    if needs_reverse != user_reverse:
        eza_args.append("--reverse")

    return _dedupe(eza_args) + paths + trailing


class LsToEza(Translator):
    """Make ``eza`` accept the flags people type for ``ls``."""

    name = "ls2eza"
    source_tool = "ls"
    target_tool = "eza"
    include_in_init = True

    def translate(self, args: List[str], mode: str = "") -> List[str]:
        return translate_flags(args)

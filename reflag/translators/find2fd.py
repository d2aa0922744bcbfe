"""
find -> fd flag translation.

find takes start paths followed by an expression; fd takes options, a
regular-expression pattern and then paths. Output is always ordered as
``[options...] [pattern | "."] [paths...]``, where ``.`` is fd's
match-everything pattern, used when find had no ``-name``/``-regex`` test.

Logical operators are dropped, so ``-not``/``!`` is not honoured and every
test is effectively AND-ed.
"""

import re
from typing import Dict, List, Optional

from reflag.translators.base import Translator


# Characters escaped when a glob character stands for itself
_REGEX_SPECIAL = frozenset(".^$+{}()|*?[]")

# Options that may precede the start paths
GLOBAL_OPTIONS: Dict[str, List[str]] = {
    "-L":      ["-L"],
    "-follow": ["-L"],
    "-H":      ["-H"],
    "-P":      [],
}

# Tests and actions without a value
SIMPLE_PRIMARIES: Dict[str, List[str]] = {
    "-empty":      ["-t", "e"],
    "-executable": ["-t", "x"],
    "-xdev":       ["--one-file-system"],
    "-mount":      ["--one-file-system"],
    "-print0":     ["-0"],
    "-quit":       ["-1"],
    "-ls":         ["-l"],
}

# Primaries whose value is copied behind an fd option
VALUE_PRIMARIES: Dict[str, List[str]] = {
    "-maxdepth":  ["-d"],
    "-mindepth":  ["--min-depth"],
    "-newer":     ["--newer"],
    "-cnewer":    ["--newer"],
    "-anewer":    ["--newer"],
    "-user":      ["--owner"],
    "-uid":       ["--owner"],
    "-path":      ["-p"],
    "-wholename": ["-p"],
    "-ipath":     ["-i", "-p"],
    "-iwholename": ["-i", "-p"],
}

# -mtime and friends: primary -> fd duration unit
TIME_PRIMARIES: Dict[str, str] = {
    "-mtime": "d",
    "-ctime": "d",
    "-atime": "d",
    "-mmin":  "min",
    "-cmin":  "min",
    "-amin":  "min",
}

# Dropped without a value: logical glue and tests fd has no use for
DROPPED_PRIMARIES = frozenset([
    "-a", "-and", "-o", "-or", "-not", "!", "(", ")", ",",
    "-print", "-prune", "-delete", "-depth", "-d", "-daystart", "-noleaf",
    "-ignore_readdir_race", "-noignore_readdir_race", "-nouser", "-nogroup",
    "-true", "-false", "-readable", "-writable", "-nowarn", "-warn",
])

# Dropped together with their value
DROPPED_VALUE_PRIMARIES = frozenset([
    "-perm", "-links", "-inum", "-samefile", "-fstype", "-lname", "-ilname",
    "-used", "-fprint", "-fprint0", "-printf", "-fprintf", "-fls",
    "-context", "-regextype", "-D", "-files0-from",
])

EXEC_PRIMARIES = frozenset(["-exec", "-execdir"])
PROMPT_PRIMARIES = frozenset(["-ok", "-okdir"])


def _escape(text: str) -> str:
    return "".join("\\" + c if c in _REGEX_SPECIAL or c == "\\" else c for c in text)


def glob_to_regex(glob: str) -> str:
    """
    Convert a find ``-name`` glob into an fd regular expression.

    A leading ``*`` before a literal suffix becomes an end anchor
    (``*.tar.gz`` -> ``\\.tar\\.gz$``); otherwise ``*`` and ``?`` match
    within a single path component and bracket expressions are kept, with
    ``[!...]`` negation rewritten as ``[^...]``.
    """
    rest = glob[1:]
    if glob.startswith("*") and rest and not any(c in "*?[\\" for c in rest):
        return _escape(rest) + "$"

    out = []
    i = 0
    while i < len(glob):
        c = glob[i]
        if c == "*":
            out.append("[^/]*")
        elif c == "?":
            out.append("[^/]")
        elif c == "[":
            # A ']' directly after '[' or '[!' is part of the set
            start = i + 1
            if start < len(glob) and glob[start] == "!":
                start += 1
            if start < len(glob) and glob[start] == "]":
                start += 1
            end = glob.find("]", start)
            if end == -1:
                out.append("\\[")
            else:
                body = glob[i + 1:end]
                if body.startswith("!"):
                    body = "^" + body[1:]
                out.append("[" + body + "]")
                i = end
        elif c == "\\" and i + 1 < len(glob):
            i += 1
            out.append(_escape(glob[i]))
        else:
            out.append(_escape(c))
        i += 1
    return "".join(out)


def _time_filter(value: str, unit: str) -> List[str]:
    """-mtime -7 -> --changed-within 7d, -mtime +30 -> --changed-before 30d."""
    if value.startswith("+"):
        return ["--changed-before", value[1:] + unit]
    # -N and a bare N (exactly N units ago) both mean "recently"
    return ["--changed-within", value.lstrip("-") + unit]


_SIZE_RE = re.compile(r"^([+-]?)(\d+)([a-zA-Z]?)$")


def _convert_size(value: str) -> str:
    """
    Convert a find ``-size`` value to fd syntax.

    find counts bare numbers in 512-byte blocks and uses ``c`` for bytes;
    every other unit is understood by fd as written.
    """
    m = _SIZE_RE.match(value)
    if not m:
        return value
    sign, number, unit = m.groups()
    if unit == "":
        return f"{sign}{int(number) * 512}b"
    if unit == "c":
        return f"{sign}{number}b"
    return value


def _exec_args(args: List[str], i: int):
    """
    Collect an -exec command starting at *args[i]*.

    Returns ``(command_tokens, terminator, next_index)``.
    """
    command = []
    while i < len(args):
        tok = args[i]
        i += 1
        if tok == ";" or (tok == "+" and command and command[-1] == "{}"):
            return command, tok, i
        command.append(tok)
    return command, None, i


def translate_flags(args: List[str]) -> List[str]:
    """Translate ``find`` arguments to ``fd`` arguments."""
    options: List[str] = []
    paths: List[str] = []
    pattern: Optional[str] = None

    def take_value(idx: int) -> Optional[str]:
        return args[idx] if idx < len(args) else None

    i = 0
    while i < len(args):
        a = args[i]
        i += 1

        if a in GLOBAL_OPTIONS:
            options.extend(GLOBAL_OPTIONS[a])
            continue

        if a in ("-name", "-iname", "-regex", "-iregex"):
            value = take_value(i)
            if value is None:
                continue
            i += 1
            if a.startswith("-i") and "-i" not in options:
                options.append("-i")
            pattern = glob_to_regex(value) if a.endswith("name") else value
            continue

        if a == "-type" or a == "-xtype":
            value = take_value(i)
            if value is None:
                continue
            i += 1
            for kind in value.split(","):
                if kind:
                    options.extend(["-t", kind])
            continue

        if a in TIME_PRIMARIES:
            value = take_value(i)
            if value is None:
                continue
            i += 1
            options.extend(_time_filter(value, TIME_PRIMARIES[a]))
            continue

        if a == "-size":
            value = take_value(i)
            if value is None:
                continue
            i += 1
            options.extend(["-S", _convert_size(value)])
            continue

        if a in ("-group", "-gid"):
            value = take_value(i)
            if value is None:
                continue
            i += 1
            options.extend(["--owner", ":" + value])
            continue

        if a in VALUE_PRIMARIES:
            value = take_value(i)
            if value is None:
                continue
            i += 1
            for opt in VALUE_PRIMARIES[a]:
                if opt == "-i" and "-i" in options:
                    continue
                options.append(opt)
            options.append(value)
            continue

        if a in SIMPLE_PRIMARIES:
            options.extend(SIMPLE_PRIMARIES[a])
            continue

        if a in EXEC_PRIMARIES:
            command, terminator, i = _exec_args(args, i)
            if command:
                options.append("-X" if terminator == "+" else "-x")
                options.extend(command)
                options.append(";")
            continue

        if a in PROMPT_PRIMARIES:
            _, _, i = _exec_args(args, i)
            continue

        if a in DROPPED_VALUE_PRIMARIES:
            i += 1
            continue

        if a in DROPPED_PRIMARIES or a.startswith("-"):
            # Unknown tests are dropped best-effort
            continue

        paths.append(a)

    # fd searches the current directory by default
    if all(p == "." for p in paths):
        paths = []

    if pattern is not None:
        return options + [pattern] + paths
    if paths:
        return options + ["."] + paths
    return options


class FindToFd(Translator):
    """Translate ``find`` expressions into ``fd`` options."""

    name = "find2fd"
    source_tool = "find"
    target_tool = "fd"

    def translate(self, args: List[str], mode: str = "") -> List[str]:
        return translate_flags(args)

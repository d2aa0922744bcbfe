"""
Tests for find -> fd translation.
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from reflag.translators.find2fd import FindToFd, glob_to_regex, translate_flags


TRANSLATE_CASES = [
    # Paths
    (["."], []),
    (["/tmp"], [".", "/tmp"]),
    (["src", "lib"], [".", "src", "lib"]),
    ([], []),
    (["/Users/ove/.local"], [".", "/Users/ove/.local"]),

    # Name patterns
    ([".", "-name", "*.txt"], ["\\.txt$"]),
    ([".", "-name", "*.go"], ["\\.go$"]),
    ([".", "-name", "Makefile"], ["Makefile"]),
    ([".", "-iname", "*.TXT"], ["-i", "\\.TXT$"]),
    ([".", "-iname", "readme*"], ["-i", "readme[^/]*"]),
    ([".", "-name", "*.tar.gz"], ["\\.tar\\.gz$"]),
    ([".", "-regex", ".*\\.go$"], [".*\\.go$"]),
    ([".", "-iregex", ".*\\.GO$"], ["-i", ".*\\.GO$"]),
    ([".", "-path", "*/test/*"], ["-p", "*/test/*"]),
    ([".", "-path", "*/test/*", "-name", "*.go"], ["-p", "*/test/*", "\\.go$"]),

    # Types and depth
    ([".", "-type", "f"], ["-t", "f"]),
    ([".", "-type", "d"], ["-t", "d"]),
    ([".", "-type", "l"], ["-t", "l"]),
    ([".", "-maxdepth", "2"], ["-d", "2"]),
    ([".", "-mindepth", "1"], ["--min-depth", "1"]),
    ([".", "-mindepth", "1", "-maxdepth", "3"], ["--min-depth", "1", "-d", "3"]),
    ([".", "-type", "f", "-name", "*.go"], ["-t", "f", "\\.go$"]),
    ([".", "-maxdepth", "2", "-name", "*.txt"], ["-d", "2", "\\.txt$"]),
    ([".", "-type", "f", "-name", "*.go", "-maxdepth", "3"], ["-t", "f", "-d", "3", "\\.go$"]),
    (["src", "-type", "f"], ["-t", "f", ".", "src"]),
    ([".", "-maxdepth", "1", "-type", "f"], ["-d", "1", "-t", "f"]),
    ([".", "-empty"], ["-t", "e"]),
    ([".", "-executable"], ["-t", "x"]),
    ([".", "-empty", "-type", "f"], ["-t", "e", "-t", "f"]),

    # Actions
    ([".", "-name", "*.txt", "-print0"], ["-0", "\\.txt$"]),
    ([".", "-name", "*.txt", "-print"], ["\\.txt$"]),
    ([".", "-name", "*.go", "-quit"], ["-1", "\\.go$"]),
    ([".", "-type", "f", "-name", "*.txt", "-print0"], ["-t", "f", "-0", "\\.txt$"]),

    # Symlinks
    (["-L", ".", "-name", "*.txt"], ["-L", "\\.txt$"]),
    (["-follow", ".", "-name", "*.txt"], ["-L", "\\.txt$"]),
    (["-L", ".", "-type", "l"], ["-L", "-t", "l"]),
    (["-H", ".", "-name", "*.sh"], ["-H", "\\.sh$"]),

    # Time, size and ownership
    ([".", "-mtime", "-7"], ["--changed-within", "7d"]),
    ([".", "-mtime", "+30"], ["--changed-before", "30d"]),
    ([".", "-mmin", "-60"], ["--changed-within", "60min"]),
    ([".", "-amin", "-30"], ["--changed-within", "30min"]),
    ([".", "-ctime", "-1"], ["--changed-within", "1d"]),
    ([".", "-size", "+1M"], ["-S", "+1M"]),
    ([".", "-newer", "reference.txt"], ["--newer", "reference.txt"]),
    ([".", "-user", "root"], ["--owner", "root"]),
    ([".", "-group", "wheel"], ["--owner", ":wheel"]),
    ([".", "-group", "staff", "-type", "f"], ["--owner", ":staff", "-t", "f"]),
    ([".", "-xdev"], ["--one-file-system"]),
    ([".", "-xdev", "-type", "f"], ["--one-file-system", "-t", "f"]),
    ([".", "-mount", "-name", "*.bak"], ["--one-file-system", "\\.bak$"]),

    # Logical operators are dropped
    ([".", "-type", "f", "-a", "-name", "*.go"], ["-t", "f", "\\.go$"]),
    ([".", "(", "-name", "*.go", ")"], ["\\.go$"]),
    ([".", "-not", "-name", "*.txt"], ["\\.txt$"]),

    # Real-world combinations
    (["/var/log", "-name", "*.log", "-mtime", "-1"], ["--changed-within", "1d", "\\.log$", "/var/log"]),
    ([".", "-type", "f", "-size", "+100M"], ["-t", "f", "-S", "+100M"]),
    ([".", "-type", "f", "-name", "*.log", "-mtime", "+7"],
     ["-t", "f", "--changed-before", "7d", "\\.log$"]),
    (["/tmp", "/var/tmp", "-type", "f"], ["-t", "f", ".", "/tmp", "/var/tmp"]),
    (["/Users/ove", "-name", ".bashrc"], ["\\.bashrc", "/Users/ove"]),
    ([".", "-type", "d", "-name", "node_modules"], ["-t", "d", "node_modules"]),
    (["/home", "-user", "root", "-type", "f"], ["--owner", "root", "-t", "f", ".", "/home"]),
    ([".", "-mindepth", "2", "-maxdepth", "4", "-type", "f"],
     ["--min-depth", "2", "-d", "4", "-t", "f"]),
    (["project/", "-name", "*.js", "-type", "f"], ["-t", "f", "\\.js$", "project/"]),
    ([".", "-name", "*.go", "-newer", "go.mod"], ["--newer", "go.mod", "\\.go$"]),
    (["/etc", "-type", "f", "-size", "+1k"], ["-t", "f", "-S", "+1k", ".", "/etc"]),
]


def test_translate_flags():
    """Test expression translation."""
    for args, expected in TRANSLATE_CASES:
        assert translate_flags(args) == expected, args


def test_extended_primaries():
    """Primaries beyond the common set."""
    cases = [
        ([".", "-type", "f,d"], ["-t", "f", "-t", "d"]),
        ([".", "-mtime", "3"], ["--changed-within", "3d"]),
        ([".", "-atime", "+2"], ["--changed-before", "2d"]),
        ([".", "-cmin", "-5"], ["--changed-within", "5min"]),
        ([".", "-cnewer", "ref"], ["--newer", "ref"]),
        ([".", "-uid", "0"], ["--owner", "0"]),
        ([".", "-gid", "20"], ["--owner", ":20"]),
        ([".", "-ls"], ["-l"]),
        ([".", "-ipath", "*/Docs/*"], ["-i", "-p", "*/Docs/*"]),
        ([".", "-iname", "a*", "-ipath", "b"], ["-i", "-p", "b", "a[^/]*"]),
        ([".", "-perm", "644", "-type", "f"], ["-t", "f"]),
        ([".", "-frobnicate", "-type", "f"], ["-t", "f"]),
        ([".", "-name"], []),
    ]
    for args, expected in cases:
        assert translate_flags(args) == expected, args


def test_size_units():
    """find byte and block sizes become fd byte sizes."""
    assert translate_flags([".", "-size", "100c"]) == ["-S", "100b"]
    assert translate_flags([".", "-size", "+10"]) == ["-S", "+5120b"]
    assert translate_flags([".", "-size", "-2k"]) == ["-S", "-2k"]


def test_exec():
    """-exec runs per result, -exec ... + runs batched, -ok is dropped."""
    assert translate_flags([".", "-name", "*.tmp", "-exec", "rm", "{}", ";"]) == [
        "-x", "rm", "{}", ";", "\\.tmp$",
    ]
    assert translate_flags([".", "-type", "f", "-exec", "wc", "-l", "{}", "+"]) == [
        "-t", "f", "-X", "wc", "-l", "{}", ";",
    ]
    assert translate_flags([".", "-execdir", "ls", "{}", ";", "-type", "d"]) == [
        "-x", "ls", "{}", ";", "-t", "d",
    ]
    assert translate_flags([".", "-ok", "rm", "{}", ";", "-type", "f"]) == ["-t", "f"]


def test_glob_to_regex():
    """Test glob conversion."""
    cases = [
        ("*.go", "\\.go$"),
        ("*.tar.gz", "\\.tar\\.gz$"),
        ("Makefile", "Makefile"),
        ("readme*", "readme[^/]*"),
        ("file?.txt", "file[^/]\\.txt"),
        ("[!a]*.c", "[^a][^/]*\\.c"),
        ("[abc].py", "[abc]\\.py"),
        ("a\\*b", "a\\*b"),
        ("*", "[^/]*"),
        ("[oops", "\\[oops"),
    ]
    for glob, expected in cases:
        assert glob_to_regex(glob) == expected, glob


def test_translator_identity():
    """Test translator metadata."""
    t = FindToFd()
    assert (t.name, t.source_tool, t.target_tool) == ("find2fd", "find", "fd")

"""
Tests for less -> moor translation.
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from reflag.translators.less2moor import LessToMoor, translate_flags


def test_translate_flags():
    """Test flag mapping."""
    cases = [
        (["-S"], ["--wrap=false"]),
        (["-N"], ["--no-linenumbers"]),
        (["-F"], ["--follow"]),
        (["-X"], ["--no-clear-on-exit"]),
        (["-e"], ["--quit-if-one-screen"]),
        (["-E"], ["--quit-if-one-screen"]),
        (["-SX"], ["--wrap=false", "--no-clear-on-exit"]),
        (["-SXr"], ["--wrap=false", "--no-clear-on-exit"]),
        (["--quit-if-one-screen"], ["--quit-if-one-screen"]),
        (["--no-init"], ["--no-clear-on-exit"]),
        (["--chop-long-lines"], ["--wrap=false"]),
        (["--mouse"], ["-mousemode=scroll"]),
        (["-V"], ["-version"]),
        (["--version"], ["-version"]),
        (["-r"], []),
        (["-R"], []),
        (["-q"], []),
        (["-Q"], []),
        (["-s"], []),
        (["-rRqs"], []),
        ([], []),
    ]
    for args, expected in cases:
        assert translate_flags(args) == expected, args


def test_value_flags():
    """Tab size and shift values, attached or separate."""
    cases = [
        (["-x4"], ["-tab-size=4"]),
        (["-x", "8", "file.txt"], ["-tab-size=8", "file.txt"]),
        (["--tabs=4"], ["-tab-size=4"]),
        (["--tabs", "2"], ["-tab-size=2"]),
        (["--shift=8"], ["-shift=8"]),
        (["--shift", "3"], ["-shift=3"]),
        # -#N loses its amount, --shift=N keeps it
        (["-#16"], ["--shift"]),
        (["-p", "pattern", "file.txt"], ["file.txt"]),
        (["-Sj5", "file.txt"], ["--wrap=false", "file.txt"]),
        (["--window=10", "file.txt"], ["file.txt"]),
        (["--tag", "main", "file.txt"], ["file.txt"]),
    ]
    for args, expected in cases:
        assert translate_flags(args) == expected, args


def test_files_and_initial_command():
    """+N is kept and placed before the files; other + commands are dropped."""
    cases = [
        (["+123"], ["+123"]),
        (["+50", "file.txt"], ["+50", "file.txt"]),
        (["file.txt"], ["file.txt"]),
        (["file1.txt", "file2.txt"], ["file1.txt", "file2.txt"]),
        (["-S", "file.txt"], ["--wrap=false", "file.txt"]),
        (["-SX", "file1.txt", "file2.txt"],
         ["--wrap=false", "--no-clear-on-exit", "file1.txt", "file2.txt"]),
        (["-SXF", "+100", "file.txt"],
         ["--wrap=false", "--no-clear-on-exit", "--follow", "+100", "file.txt"]),
        (["-S", "--quit-if-one-screen", "file.txt"],
         ["--wrap=false", "--quit-if-one-screen", "file.txt"]),
        (["file1.txt", "file2.txt", "file3.txt"], ["file1.txt", "file2.txt", "file3.txt"]),
        (["+/needle", "file.txt"], ["file.txt"]),
        (["file.txt", "+10"], ["+10", "file.txt"]),
    ]
    for args, expected in cases:
        assert translate_flags(args) == expected, args


def test_end_of_options():
    """Arguments after -- are files even when they look like flags."""
    assert translate_flags(["-S", "--", "-file.txt"]) == ["--wrap=false", "-file.txt"]
    assert translate_flags(["--", "+5"]) == ["+5"]
    assert translate_flags(["--", "a.txt", "--", "b.txt"]) == ["a.txt", "b.txt"]


def test_unknown_flags():
    """Unknown short flags vanish; unknown long flags pass through."""
    assert translate_flags(["-Z", "file.txt"]) == ["file.txt"]
    assert translate_flags(["--frobnicate"]) == ["--frobnicate"]


def test_translator_identity():
    """Test translator metadata."""
    t = LessToMoor()
    assert (t.name, t.source_tool, t.target_tool) == ("less2moor", "less", "moor")

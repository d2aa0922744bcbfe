"""
Syntax highlighting for printed command lines.

Colour codes the translated command reflag prints:

  Program name                bold cyan
  Flags   (-l, --sort=size)   grey
  Quoted  ('...')             green
  Numbers                     purple

Uses Pygments for lexing and 256-colour terminal formatting.
"""

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexer import RegexLexer, bygroups
from pygments.style import Style as PygmentsStyle
from pygments.token import (
    Token,
    String,
    Name,
    Number,
)


# ---------------------------------------------------------------------------
# Lexer for a single rendered command line
# ---------------------------------------------------------------------------

class CommandLineLexer(RegexLexer):
    """
    Lexer for the one-line commands produced by ``render_command``.

    The first word is the target program; after that only flags, the
    single-quoted words emitted by ``shell_quote`` and bare numbers get a
    colour of their own.
    """

    name = "ReflagCommand"
    aliases = ["reflagcommand"]

    tokens = {
        "root": [
            (r"(\S+)(\s*)", bygroups(Name.Builtin, Token.Text), "args"),
        ],
        "args": [
            # 'it'"'"'s' style quoting from shell_quote
            (r"'[^']*'(?:\"'\"'[^']*')*", String.Single),

            # Long flags, with or without =value, and single-dash moor flags
            (r"--?[A-Za-z][\w-]*(=\S*)?(?=\s|$)", Name.Tag),
            # Short flags and clusters: -l  -0  -la
            (r"-[A-Za-z0-9#@]+(?=\s|$)", Name.Tag),

            (r"[+-]?\d+(?=\s|$)", Number.Integer),

            (r"\S+", Token.Text),
            (r"\s+", Token.Text),
        ],
    }


# ---------------------------------------------------------------------------
# Colour palette (Monokai-inspired, readable on dark backgrounds)
# ---------------------------------------------------------------------------

class ReflagStyle(PygmentsStyle):
    """Pygments colour theme for printed commands."""

    default_style = ""
    styles = {
        Token.Text:      "",                  # terminal default
        Name.Builtin:    "#00d7d7 bold",      # program
        Name.Tag:        "#888888",           # flags
        String.Single:   "#a6e22e",           # green
        Number.Integer:  "#ae81ff",           # purple
    }


_LEXER = CommandLineLexer()
_FORMATTER = Terminal256Formatter(style=ReflagStyle)


def highlight_command(line: str) -> str:
    """Return *line* wrapped in ANSI colour escapes (no trailing newline)."""
    return highlight(line, _LEXER, _FORMATTER).rstrip("\n")

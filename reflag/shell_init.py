"""
Shell alias generation for ``reflag init``.

The output is meant to be evaluated by the user's shell, e.g.::

    eval "$(reflag init zsh)"
    reflag init fish | source
"""

from typing import List, Optional, Tuple

from reflag.dispatch import ReflagError, UnknownTranslatorError, shell_quote, suggest
from reflag.registry import PreprocessorRegistry, TranslatorRegistry


SHELLS = ("bash", "zsh", "fish")
DEFAULT_SHELL = "bash"


def parse_init_args(args: List[str]) -> Tuple[str, Optional[List[str]]]:
    """
    Split ``reflag init`` arguments into a shell name and translator filters.

    Returns:
        ``(shell, filters)``; filters is None when no names were given
    """
    shell = DEFAULT_SHELL
    filters = []
    for arg in args:
        if arg in SHELLS:
            shell = arg
        else:
            filters.append(arg)
    return shell, (filters or None)


def _alias_line(shell: str, alias: str, command: str) -> str:
    if shell == "fish":
        return f"alias {alias} {shell_quote(command)}"
    return f"alias {alias}={shell_quote(command)}"


def generate_init(shell: str, translators: TranslatorRegistry,
                  preprocessors: PreprocessorRegistry,
                  filters: Optional[List[str]] = None,
                  program: str = "reflag") -> str:
    """
    Build alias definitions for *shell*.

    Each selected translator aliases its source tool to
    ``<program> --exec <name>``; every preprocessor tool gets
    ``<program> --exec <tool>``. With *filters*, only the named translators
    and preprocessor tools are emitted.

    Raises:
        ReflagError: if *shell* is not supported
        UnknownTranslatorError: if a filter names nothing registered
    """
    if shell not in SHELLS:
        raise ReflagError(f"Unsupported shell: {shell} (choose from {', '.join(SHELLS)})")

    if filters is not None:
        for name in filters:
            if translators.get_by_name(name) is None and preprocessors.get(name) is None:
                raise UnknownTranslatorError(name, suggest(name, translators, preprocessors))
        wanted = set(filters)
        selected = [t for t in translators if t.name in wanted]
        tools = [tool for tool in preprocessors.list() if tool in wanted]
    else:
        selected = [t for t in translators if t.include_in_init]
        tools = preprocessors.list()

    lines = [f"# reflag aliases for {shell}"]
    for translator in selected:
        lines.append(_alias_line(shell, translator.source_tool,
                                 f"{program} --exec {translator.name}"))
    for tool in tools:
        lines.append(_alias_line(shell, tool, f"{program} --exec {tool}"))
    return "\n".join(lines) + "\n"

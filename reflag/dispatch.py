"""
Dispatch layer: pick the translator for an invocation, run the
preprocess/translate pipeline, and print or execute the result.
"""

import subprocess
from dataclasses import dataclass
from typing import List, Optional, Tuple

from thefuzz import process as fuzzy

from reflag.console import debug
from reflag.preprocessors import Preprocessor
from reflag.registry import PreprocessorRegistry, TranslatorRegistry
from reflag.translators import Translator


# Characters that force single-quoting on the rendered command line
SHELL_SPECIAL = frozenset(" \t\n\"'\\$`!")

SUGGESTION_THRESHOLD = 70


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class ReflagError(Exception):
    """Base class for errors reported to the user by the CLI."""


class UnknownTranslatorError(ReflagError):
    """No translator or preprocessor matches the requested name or pair."""

    def __init__(self, spec: str, suggestions: Optional[List[str]] = None):
        self.spec = spec
        self.suggestions = suggestions or []
        message = f"Unknown translator: {spec}"
        if self.suggestions:
            message += f" (did you mean {', '.join(self.suggestions)}?)"
        super().__init__(message)


class TargetNotFoundError(ReflagError):
    """The replacement binary is not installed or not on PATH."""

    def __init__(self, target: str):
        self.target = target
        super().__init__(f"Command not found: {target}")


# ---------------------------------------------------------------------------
# Shell rendering
# ---------------------------------------------------------------------------

def shell_quote(s: str) -> str:
    """Single-quote *s* if the shell would otherwise interpret it."""
    if any(c in SHELL_SPECIAL for c in s):
        return "'" + s.replace("'", "'\"'\"'") + "'"
    return s


def render_command(target: str, args: List[str]) -> str:
    """Build the command line ``target arg1 arg2 ...`` with quoting."""
    return " ".join([target] + [shell_quote(a) for a in args])


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------

def detect_from_binary_name(name: str) -> Tuple[str, str, bool]:
    """
    Split a ``<source>2<target>`` program name such as ``ls2eza``.

    Returns:
        ``(source, target, True)`` on success, ``("", "", False)`` otherwise
    """
    source, sep, target = name.partition("2")
    if not sep or not source or not target:
        return "", "", False
    return source, target, True


@dataclass
class Resolution:
    """What to run for one invocation."""

    source_tool: str
    target_tool: str
    translator: Optional[Translator] = None
    preprocessor: Optional[Preprocessor] = None

    @property
    def label(self) -> str:
        if self.translator:
            return self.translator.name
        return self.source_tool


def suggest(spec: str, translators: TranslatorRegistry,
            preprocessors: PreprocessorRegistry, limit: int = 3) -> List[str]:
    """Return known names that look like a typo of *spec*."""
    choices = translators.list() + preprocessors.list()
    matches = fuzzy.extract(spec, choices, limit=limit)
    return [name for name, score in matches if score >= SUGGESTION_THRESHOLD]


def resolve(spec: str, translators: TranslatorRegistry,
            preprocessors: PreprocessorRegistry) -> Resolution:
    """
    Resolve a translator spec from the command line.

    Accepted forms, in order: a translator name (``ls2eza``), a tool pair
    (``ls:eza`` or ``ls2eza``-style), or the name of a tool that only has a
    preprocessor (``dig``).

    Raises:
        UnknownTranslatorError: if nothing matches
    """
    translator = translators.get_by_name(spec)

    if translator is None:
        if ":" in spec:
            source, _, target = spec.partition(":")
            ok = bool(source and target)
        else:
            source, target, ok = detect_from_binary_name(spec)
        if ok:
            translator = translators.get(source, target)

    if translator is not None:
        return Resolution(
            source_tool=translator.source_tool,
            target_tool=translator.target_tool,
            translator=translator,
            preprocessor=preprocessors.get(translator.source_tool),
        )

    preprocessor = preprocessors.get(spec)
    if preprocessor is not None:
        return Resolution(source_tool=spec, target_tool=spec, preprocessor=preprocessor)

    raise UnknownTranslatorError(spec, suggest(spec, translators, preprocessors))


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

def run_pipeline(resolution: Resolution, args: List[str], mode: str = "") -> List[str]:
    """Preprocess then translate *args* for the resolved tool pair."""
    result = list(args)
    if resolution.preprocessor:
        result = resolution.preprocessor.preprocess(result)
        debug(f"preprocessed ({resolution.source_tool}): {result}")
    if resolution.translator:
        result = resolution.translator.translate(result, mode)
        debug(f"translated ({resolution.translator.name}): {result}")
    return result


def execute(target: str, args: List[str]) -> int:
    """
    Run *target* with *args*, inheriting stdin/stdout/stderr.

    Returns:
        The target's exit status

    Raises:
        TargetNotFoundError: if *target* cannot be executed
    """
    debug(f"exec: {render_command(target, args)}")
    try:
        completed = subprocess.run([target] + list(args))
    except FileNotFoundError:
        raise TargetNotFoundError(target)
    return completed.returncode

"""
Lookup tables for translators and preprocessors.

Registries are plain objects built once at start-up by ``build_registries``
and handed to the dispatcher; nothing registers itself on import.
"""

import threading
from typing import Dict, Iterator, List, Optional, Tuple

from reflag.preprocessors import ALL_PREPROCESSORS, Preprocessor
from reflag.translators import ALL_TRANSLATORS, Translator


class TranslatorRegistry:
    """Translators keyed by name and by (source, target) tool pair."""

    def __init__(self):
        self._lock = threading.Lock()
        self._by_name: Dict[str, Translator] = {}
        self._by_pair: Dict[Tuple[str, str], Translator] = {}

    def register(self, translator: Translator):
        """Add *translator*; a later registration for the same key wins."""
        with self._lock:
            self._by_name[translator.name] = translator
            self._by_pair[(translator.source_tool, translator.target_tool)] = translator

    def get(self, source: str, target: str) -> Optional[Translator]:
        """Return the translator for a tool pair, or None."""
        with self._lock:
            return self._by_pair.get((source, target))

    def get_by_name(self, name: str) -> Optional[Translator]:
        """Return the translator called *name*, or None."""
        with self._lock:
            return self._by_name.get(name)

    def for_source(self, source: str) -> List[Translator]:
        """Return every translator that accepts *source*'s arguments."""
        with self._lock:
            return [t for t in self._by_name.values() if t.source_tool == source]

    def list(self) -> List[str]:
        """Return all registered translator names, sorted."""
        with self._lock:
            return sorted(self._by_name)

    def __iter__(self) -> Iterator[Translator]:
        with self._lock:
            translators = [self._by_name[name] for name in sorted(self._by_name)]
        return iter(translators)

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_name)


class PreprocessorRegistry:
    """Preprocessors keyed by the tool they apply to."""

    def __init__(self):
        self._lock = threading.Lock()
        self._by_tool: Dict[str, Preprocessor] = {}

    def register(self, preprocessor: Preprocessor):
        with self._lock:
            self._by_tool[preprocessor.tool_name] = preprocessor

    def get(self, tool_name: str) -> Optional[Preprocessor]:
        with self._lock:
            return self._by_tool.get(tool_name)

    def list(self) -> List[str]:
        """Return all tool names with a preprocessor, sorted."""
        with self._lock:
            return sorted(self._by_tool)

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_tool)

    def format_table(self) -> str:
        """
        Render a ``TOOL  FEATURE`` table of registered preprocessors.

        Returns:
            The table as a string, one row per tool, without a trailing newline
        """
        with self._lock:
            rows = [(name, self._by_tool[name].description) for name in sorted(self._by_tool)]
        return format_table(("TOOL", "FEATURE"), rows)


def format_table(header: Tuple[str, ...], rows: List[Tuple[str, ...]]) -> str:
    """Left-align *rows* under *header* with two spaces between columns."""
    all_rows = [header] + list(rows)
    widths = [max(len(row[col]) for row in all_rows) for col in range(len(header))]
    lines = []
    for row in all_rows:
        cells = [cell.ljust(width) for cell, width in zip(row[:-1], widths)]
        lines.append("  ".join(cells + [row[-1]]))
    return "\n".join(lines)


def build_registries() -> Tuple[TranslatorRegistry, PreprocessorRegistry]:
    """Instantiate and register every built-in translator and preprocessor."""
    translators = TranslatorRegistry()
    for constructor in ALL_TRANSLATORS:
        translators.register(constructor())

    preprocessors = PreprocessorRegistry()
    for constructor in ALL_PREPROCESSORS:
        preprocessors.register(constructor())

    return translators, preprocessors

"""
Translator interface shared by every tool-pair module.
"""

from abc import ABC, abstractmethod
from typing import List


class Translator(ABC):
    """Abstract base class for all tool-pair translators."""

    #: Unique identifier, by convention ``"<source>2<target>"``
    name: str = ""
    #: Tool whose argument grammar is accepted
    source_tool: str = ""
    #: Replacement binary the translated arguments are meant for
    target_tool: str = ""
    #: Whether ``reflag init`` offers this pair as a default alias
    include_in_init: bool = False

    @abstractmethod
    def translate(self, args: List[str], mode: str = "") -> List[str]:
        """
        Translate source-tool arguments to target-tool arguments.

        Args:
            args: Arguments as the user typed them for ``source_tool``
            mode: Opaque hint from the dispatcher ("print" or "exec")

        Returns:
            A new argument list for ``target_tool``. Never raises.
        """
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"

"""
Argument preprocessors for reflag.

A preprocessor rewrites a tool's arguments before any translator sees them,
e.g. turning ``https://example.com/page`` into ``example.com`` for ``dig``.
"""

from abc import ABC, abstractmethod
from functools import partial
from typing import List

from reflag.preprocessors.urlparse import process_args


class Preprocessor(ABC):
    """Abstract base class for all preprocessors."""

    #: Name of the tool whose arguments this preprocessor rewrites
    tool_name: str = ""
    #: One-line summary shown by ``reflag --list``
    description: str = ""

    @abstractmethod
    def preprocess(self, args: List[str]) -> List[str]:
        """
        Rewrite *args* before translation.

        Args:
            args: Arguments as typed by the user

        Returns:
            A new argument list; flags are never removed.
        """
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.tool_name}>"


class HostnamePreprocessor(Preprocessor):
    """Reduce URL arguments to their hostname for network diagnostic tools."""

    description = "Extract hostname from URLs"

    def __init__(self, tool_name: str):
        self.tool_name = tool_name

    def preprocess(self, args: List[str]) -> List[str]:
        return process_args(args)


# Network tools that take a hostname as their positional argument
HOSTNAME_TOOLS = ("dig", "nslookup", "host", "ping", "ping6", "traceroute", "mtr", "whois")


# Constructors called once by reflag.registry.build_registries()
ALL_PREPROCESSORS = tuple(partial(HostnamePreprocessor, tool) for tool in HOSTNAME_TOOLS)

__all__ = ["Preprocessor", "HostnamePreprocessor", "HOSTNAME_TOOLS", "ALL_PREPROCESSORS"]

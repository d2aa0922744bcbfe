"""
Flag translators for reflag.

Each translator rewrites the argument list of a classic UNIX tool into the
argument list of a modern replacement.
"""

from reflag.translators.base import Translator
from reflag.translators.ls2eza import LsToEza
from reflag.translators.cat2bat import CatToBat
from reflag.translators.less2moor import LessToMoor
from reflag.translators.more2moor import MoreToMoor
from reflag.translators.find2fd import FindToFd
from reflag.translators.du2dust import DuToDust
from reflag.translators.ps2procs import PsToProcs

# Constructors called once by reflag.registry.build_registries()
ALL_TRANSLATORS = (
    LsToEza,
    CatToBat,
    LessToMoor,
    MoreToMoor,
    FindToFd,
    DuToDust,
    PsToProcs,
)

__all__ = [
    "Translator",
    "ALL_TRANSLATORS",
    "LsToEza",
    "CatToBat",
    "LessToMoor",
    "MoreToMoor",
    "FindToFd",
    "DuToDust",
    "PsToProcs",
]

"""
reflag - run modern CLI replacements with the flags you already know.

Translates the arguments of classic UNIX tools into those of their modern
counterparts:
- ls -> eza, cat -> bat, less/more -> moor
- find -> fd, du -> dust, ps -> procs
- URL arguments to dig, ping, whois, ... reduced to the hostname
"""

__version__ = "0.1.0"
__author__ = "reflag Contributors"

from reflag.registry import build_registries, TranslatorRegistry, PreprocessorRegistry
from reflag.dispatch import resolve, run_pipeline, shell_quote

__all__ = [
    "build_registries",
    "TranslatorRegistry",
    "PreprocessorRegistry",
    "resolve",
    "run_pipeline",
    "shell_quote",
]

"""Formatters package for namegen terminal output.

Usage:
    output = OutputFormatter(no_color=False)
    output.print_names(names)
"""

from .output import NO_DESCRIPTION, OutputFormatter
from .symbols import Symbols, SymbolsFormatter

__all__ = [
    "NO_DESCRIPTION",
    "OutputFormatter",
    "Symbols",
    "SymbolsFormatter",
]

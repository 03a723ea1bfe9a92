"""Symbol definitions with emoji/ASCII fallbacks.

Usage:
    symbols = SymbolsFormatter()
    print(symbols.Sparkles)  # Returns "✨" or "*" depending on support
    print(symbols.Cross)     # Returns "❌" or "x"
"""

import platform
import sys
from dataclasses import dataclass
from functools import cached_property


@dataclass(frozen=True)
class Symbol:
    """A symbol with emoji and ASCII fallback."""

    emoji: str
    ascii: str


class Symbols:
    """Symbol definitions as class attributes."""

    # Status indicators
    Cross = Symbol("❌", "x")
    Warning = Symbol("⚠️", "!")

    # Objects
    Book = Symbol("📚", ">")
    Folder = Symbol("📂", ">")
    Scroll = Symbol("📜", ">")
    Person = Symbol("🧝", "@")
    Castle = Symbol("🏰", "#")
    Sparkles = Symbol("✨", "*")


class SymbolsFormatter:
    """Provides symbols with automatic emoji/ASCII fallback based on terminal support.

    Emoji is disabled when no_color=True or when the terminal doesn't support it.
    """

    def __init__(self, no_color: bool = False):
        self._no_color = no_color

    @cached_property
    def supports_emoji(self) -> bool:
        """Detect if terminal supports emoji display."""
        if self._no_color:
            return False

        if platform.system() == "Windows":
            return False

        if not hasattr(sys.stdout, 'encoding') or sys.stdout.encoding is None:
            return False

        encoding = sys.stdout.encoding.lower()
        emoji_encodings = ['utf-8', 'utf8', 'utf-16', 'utf16']

        return any(enc in encoding for enc in emoji_encodings)

    def get(self, symbol: Symbol) -> str:
        """Resolve a symbol to emoji or ASCII based on support."""
        return symbol.emoji if self.supports_emoji else symbol.ascii

    @property
    def Cross(self) -> str:
        return self.get(Symbols.Cross)

    @property
    def Warning(self) -> str:
        return self.get(Symbols.Warning)

    @property
    def Book(self) -> str:
        return self.get(Symbols.Book)

    @property
    def Folder(self) -> str:
        return self.get(Symbols.Folder)

    @property
    def Scroll(self) -> str:
        return self.get(Symbols.Scroll)

    @property
    def Person(self) -> str:
        return self.get(Symbols.Person)

    @property
    def Castle(self) -> str:
        return self.get(Symbols.Castle)

    @property
    def Sparkles(self) -> str:
        return self.get(Symbols.Sparkles)

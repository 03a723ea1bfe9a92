"""Discovery of available categories and generators across data roots."""

from pathlib import Path
from typing import Optional

from .config import NamegenConfig


class Catalog:
    """Index of `<category>/<generator>.json` datasets under the data roots."""

    def __init__(self, config: Optional[NamegenConfig] = None):
        self.config = config or NamegenConfig.from_env()

    def _existing_roots(self) -> list[Path]:
        return [root for root in self.config.data_dirs if root.is_dir()]

    def categories(self) -> list[str]:
        """Sorted category names found in any root."""
        found: set[str] = set()
        for root in self._existing_roots():
            found.update(p.name for p in root.iterdir() if p.is_dir() and not p.name.startswith("."))
        return sorted(found)

    def generators(self, category: str) -> list[str]:
        """Sorted generator names within a category, across roots."""
        found: set[str] = set()
        for root in self._existing_roots():
            category_dir = root / category
            if category_dir.is_dir():
                found.update(p.stem for p in category_dir.glob("*.json") if p.is_file())
        return sorted(found)

    def entries(self) -> list[tuple[str, str]]:
        """All (category, generator) pairs."""
        return [
            (category, generator)
            for category in self.categories()
            for generator in self.generators(category)
        ]

    def has(self, category: str, generator: str) -> bool:
        return generator in self.generators(category)

"""Asynchronous loading of datasets from data roots."""

import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

from .config import NamegenConfig
from .models import CharacterNameData, NameData
from .parser import parse_name_data

logger = logging.getLogger(__name__)


class DatasetNotFoundError(FileNotFoundError):
    """Raised when no data root holds the requested dataset."""

    def __init__(self, category: str, generator: str, searched: list[Path]):
        self.category = category
        self.generator = generator
        self.searched = searched
        roots = ", ".join(str(p) for p in searched) or "<none>"
        super().__init__(f"No dataset for {category}/{generator} (searched: {roots})")


class NameDataLoader:
    """Loads `<category>/<generator>.json` datasets from configured roots."""

    def __init__(self, config: Optional[NamegenConfig] = None):
        self.config = config or NamegenConfig.from_env()

    def candidate_paths(self, category: str, generator: str) -> list[Path]:
        """Paths tried for a dataset, in search order."""
        return [root / category / f"{generator}.json" for root in self.config.data_dirs]

    def resolve_path(self, category: str, generator: str) -> Path:
        """Find the first data root holding the dataset.

        Raises:
            DatasetNotFoundError: If no root has it
        """
        candidates = self.candidate_paths(category, generator)
        for path in candidates:
            if path.is_file():
                return path
            logger.debug("Dataset not at %s, trying next root", path)
        raise DatasetNotFoundError(category, generator, candidates)

    def _read(self, category: str, generator: str) -> NameData:
        path = self.resolve_path(category, generator)
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
        return parse_name_data(raw)

    async def load_strict(self, category: str, generator: str) -> NameData:
        """Load a dataset, raising on any failure.

        Raises:
            DatasetNotFoundError: If no root has the dataset
            json.JSONDecodeError: If the file is not valid JSON
            NameDataFormatError: If the document has an invalid shape
            ValueError: If the document exceeds the decoder limits
            RecursionError: If the document nests too deeply
        """
        logger.debug("Loading name data for %s/%s", category, generator)
        data = await asyncio.to_thread(self._read, category, generator)
        logger.debug("Loaded name data for %s/%s", category, generator)
        return data

    async def load(self, category: str, generator: str) -> NameData:
        """Load a dataset, falling back to an empty character dataset.

        Failures are logged, never raised. The fallback is character-shaped
        even when the generator is a location generator.
        """
        try:
            return await self.load_strict(category, generator)
        except (OSError, ValueError, RecursionError) as e:
            logger.error("Failed to load name data for %s/%s: %s", category, generator, e, exc_info=True)
            return CharacterNameData.empty()


async def load_name_data(
    category: str,
    generator: str,
    config: Optional[NamegenConfig] = None,
) -> NameData:
    """Load the dataset for a generator, never raising.

    Args:
        category: Category folder name (e.g. 'fantasy')
        generator: Generator name (e.g. 'elven-ranger')
        config: Data roots to search (defaults to NamegenConfig.from_env())

    Returns:
        The parsed dataset, or an empty CharacterNameData on failure
    """
    return await NameDataLoader(config).load(category, generator)

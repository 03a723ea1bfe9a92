"""Deserialization of dataset JSON documents into NameData."""

from collections.abc import Mapping
from typing import Any

from .models import CharacterNameData, LocationNameData, NameData, NameEntry
from .types import CHARACTER_KEYS, PoolKey


class NameDataFormatError(ValueError):
    """Raised when a dataset document does not match either dataset shape."""


def has_character_shape(raw: Mapping[str, Any]) -> bool:
    """Check the structural rule: all of male, female and lastNames present."""
    return all(key in raw for key in CHARACTER_KEYS)


def _parse_entry(value: Any, pool_name: str, index: int) -> NameEntry:
    if not isinstance(value, Mapping):
        raise NameDataFormatError(
            f"Entry {index} in pool '{pool_name}' must be an object, got {type(value).__name__}"
        )

    name = value.get("name")
    if not isinstance(name, str) or name == "":
        raise NameDataFormatError(
            f"Entry {index} in pool '{pool_name}' must have a non-empty string 'name'"
        )

    description = value.get("description", "")
    if not isinstance(description, str):
        raise NameDataFormatError(
            f"Entry {index} ('{name}') in pool '{pool_name}' has a non-string description"
        )

    return NameEntry(name=name, description=description)


def parse_pool(values: Any, pool_name: str) -> tuple[NameEntry, ...]:
    """Parse a list of entry objects into a pool.

    Args:
        values: Raw JSON list
        pool_name: Pool key, used in error messages

    Returns:
        Tuple of NameEntry in source order

    Raises:
        NameDataFormatError: If the pool or any entry is malformed
    """
    if not isinstance(values, list):
        raise NameDataFormatError(
            f"Pool '{pool_name}' must be a list, got {type(values).__name__}"
        )
    return tuple(_parse_entry(value, pool_name, i) for i, value in enumerate(values))


def parse_name_data(raw: Any) -> NameData:
    """Build a NameData variant from a decoded JSON document.

    The character/location decision is made here, once. A document holding
    male, female and lastNames is character data; anything else is location
    data, with every list-valued key becoming a pool.

    Raises:
        NameDataFormatError: If the document is not an object or a pool is malformed
    """
    if not isinstance(raw, Mapping):
        raise NameDataFormatError(
            f"Dataset must be a JSON object, got {type(raw).__name__}"
        )

    if has_character_shape(raw):
        return CharacterNameData(
            male=parse_pool(raw[PoolKey.MALE.value], PoolKey.MALE.value),
            female=parse_pool(raw[PoolKey.FEMALE.value], PoolKey.FEMALE.value),
            last_names=parse_pool(raw[PoolKey.LAST_NAMES.value], PoolKey.LAST_NAMES.value),
        )

    pools = {
        key: parse_pool(value, key)
        for key, value in raw.items()
        if isinstance(value, list)
    }
    return LocationNameData(pools=pools)

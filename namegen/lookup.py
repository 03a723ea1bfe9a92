"""Reverse lookup from a generated name to its description."""

from collections.abc import Iterable
from typing import Optional

from .discriminator import is_character_name_data
from .models import NameData, NameEntry


def _find(pool: Iterable[NameEntry], name: str) -> Optional[NameEntry]:
    # first match in pool order wins when names repeat
    return next((entry for entry in pool if entry.name == name), None)


def get_name_description(data: NameData, name: str) -> Optional[str]:
    """Get the description for a generated name.

    For character data the name is split on its first space. Both parts
    found gives "<first>. <last>."; a single found part gives that part's
    description alone. For location data every pool is scanned in order for
    the full name.

    Args:
        data: Dataset the name was generated from
        name: Generated name

    Returns:
        The description, or None if nothing matches
    """
    if is_character_name_data(data):
        first_part, _, last_part = name.partition(" ")

        first_entry = _find((*data.male, *data.female), first_part)
        last_entry = _find(data.last_names, last_part)

        if first_entry and last_entry:
            return f"{first_entry.description}. {last_entry.description}."
        if first_entry:
            return first_entry.description
        if last_entry:
            return last_entry.description
        return None

    for pool in data.pools.values():
        entry = _find(pool, name)
        if entry:
            return entry.description
    return None

"""Character/location discrimination for NameData values."""

from collections.abc import Mapping
from typing import Any

from .models import CharacterNameData, LocationNameData
from .parser import has_character_shape


def is_character_name_data(data: Any) -> bool:
    """Check if data is a character dataset.

    Parsed datasets are decided by their variant type. Raw JSON mappings are
    decided structurally: male, female and lastNames must all be present.
    """
    if isinstance(data, CharacterNameData):
        return True
    if isinstance(data, LocationNameData):
        return False
    if isinstance(data, Mapping):
        return has_character_shape(data)
    return False


def is_location_name_data(data: Any) -> bool:
    """Check if data is a location dataset."""
    return not is_character_name_data(data)

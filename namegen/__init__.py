"""namegen - themed name generators over static name datasets."""

from .catalog import Catalog
from .config import NamegenConfig
from .discriminator import is_character_name_data, is_location_name_data
from .loader import DatasetNotFoundError, NameDataLoader, load_name_data
from .lookup import get_name_description
from .models import CharacterNameData, LocationNameData, NameData, NameEntry
from .parser import NameDataFormatError, parse_name_data
from .sampler import generate_character_names, generate_location_names, generate_names
from .types import Gender, PoolKey

__version__ = "0.1.0"
__all__ = [
    "Catalog",
    "CharacterNameData",
    "DatasetNotFoundError",
    "Gender",
    "LocationNameData",
    "NameData",
    "NameDataFormatError",
    "NameDataLoader",
    "NameEntry",
    "NamegenConfig",
    "PoolKey",
    "generate_character_names",
    "generate_location_names",
    "generate_names",
    "get_name_description",
    "is_character_name_data",
    "is_location_name_data",
    "load_name_data",
    "parse_name_data",
]

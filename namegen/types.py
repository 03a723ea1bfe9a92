"""Type definitions for namegen datasets."""

from enum import Enum


class Gender(Enum):
    """First-name pools of a character dataset."""

    MALE = "male"
    FEMALE = "female"

    @classmethod
    def from_string(cls, gender_str: str) -> "Gender":
        """Parse a gender from string.

        Args:
            gender_str: Gender string (case-insensitive)

        Returns:
            Gender enum value

        Raises:
            ValueError: If gender string is not valid
        """
        normalized = gender_str.lower().strip()
        try:
            return cls(normalized)
        except ValueError:
            valid = ", ".join(g.value for g in cls)
            raise ValueError(f"Invalid gender '{gender_str}'. Valid genders: {valid}")


class PoolKey(str, Enum):
    """Well-known pool keys in dataset JSON documents."""

    MALE = "male"
    FEMALE = "female"
    LAST_NAMES = "lastNames"
    CITY_NAMES = "cityNames"
    DISTRICT_NAMES = "districtNames"
    LANDMARK_NAMES = "landmarkNames"
    REGION_NAMES = "regionNames"


CHARACTER_KEYS: tuple[str, ...] = (
    PoolKey.MALE.value,
    PoolKey.FEMALE.value,
    PoolKey.LAST_NAMES.value,
)

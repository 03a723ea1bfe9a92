"""Dataset model classes for namegen."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional, Union

from .types import Gender, PoolKey


@dataclass(frozen=True)
class NameEntry:
    """A single pre-written name and its description."""

    name: str
    """Display identifier, never empty"""

    description: str = ""
    """Free text, may be empty"""

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class CharacterNameData:
    """Personal names: gendered first-name pools plus a last-name pool."""

    male: tuple[NameEntry, ...] = ()
    female: tuple[NameEntry, ...] = ()
    last_names: tuple[NameEntry, ...] = ()

    @classmethod
    def empty(cls) -> "CharacterNameData":
        """Dataset with three empty pools."""
        return cls(male=(), female=(), last_names=())

    def first_names(self, gender: Gender) -> tuple[NameEntry, ...]:
        """Get the first-name pool for a gender."""
        return self.male if gender is Gender.MALE else self.female

    @property
    def pools(self) -> dict[str, tuple[NameEntry, ...]]:
        """Pools keyed the way they appear in dataset JSON."""
        return {
            PoolKey.MALE.value: self.male,
            PoolKey.FEMALE.value: self.female,
            PoolKey.LAST_NAMES.value: self.last_names,
        }


@dataclass(frozen=True)
class LocationNameData:
    """Place names grouped into any number of keyed pools.

    Pool keys are open-ended. The usual ones are cityNames, districtNames,
    landmarkNames and regionNames, but datasets also carry keys such as
    reindeerNames. Key order follows the source document.
    """

    pools: Mapping[str, tuple[NameEntry, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # read-only view over a private copy
        pools = {key: tuple(entries) for key, entries in self.pools.items()}
        object.__setattr__(self, "pools", MappingProxyType(pools))

    def __hash__(self) -> int:
        return hash(tuple(self.pools.items()))

    def get_pool(self, name_type: str) -> Optional[tuple[NameEntry, ...]]:
        """Get a pool by key, or None if the dataset does not define it."""
        return self.pools.get(name_type)

    @property
    def pool_names(self) -> list[str]:
        return list(self.pools.keys())

    @property
    def city_names(self) -> Optional[tuple[NameEntry, ...]]:
        return self.get_pool(PoolKey.CITY_NAMES.value)

    @property
    def district_names(self) -> Optional[tuple[NameEntry, ...]]:
        return self.get_pool(PoolKey.DISTRICT_NAMES.value)

    @property
    def landmark_names(self) -> Optional[tuple[NameEntry, ...]]:
        return self.get_pool(PoolKey.LANDMARK_NAMES.value)

    @property
    def region_names(self) -> Optional[tuple[NameEntry, ...]]:
        return self.get_pool(PoolKey.REGION_NAMES.value)


NameData = Union[CharacterNameData, LocationNameData]

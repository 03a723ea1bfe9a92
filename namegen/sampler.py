"""Random name sampling over loaded datasets.

All draws are uniform and with replacement, so a result may repeat a name.
Requests that cannot be satisfied (empty pools, options that do not match the
dataset kind) yield an empty list instead of raising.
"""

import logging
import random
from collections.abc import Sequence
from typing import Optional, Union

from .discriminator import is_character_name_data, is_location_name_data
from .models import CharacterNameData, LocationNameData, NameData, NameEntry
from .types import Gender, PoolKey

logger = logging.getLogger(__name__)


def _draw(pool: Sequence[NameEntry], rng) -> NameEntry:
    return pool[rng.randrange(len(pool))]


def generate_character_names(
    data: CharacterNameData,
    gender: Union[Gender, str],
    count: int,
    rng: Optional[random.Random] = None,
) -> list[str]:
    """Generate full "First Last" names.

    Args:
        data: Character dataset
        gender: Which first-name pool to draw from
        count: Number of names to generate
        rng: Random source (defaults to the module-level generator)

    Returns:
        List of `count` names, or an empty list if the first-name pool or the
        last-name pool is empty

    Raises:
        ValueError: If gender is not a valid gender string
    """
    if not isinstance(gender, Gender):
        gender = Gender.from_string(gender)
    rng = rng or random

    first_names = data.first_names(gender)
    if not first_names or not data.last_names:
        logger.debug(
            "No %s first names (%d) or last names (%d), nothing to generate",
            gender.value,
            len(first_names),
            len(data.last_names),
        )
        return []

    names = [
        f"{_draw(first_names, rng).name} {_draw(data.last_names, rng).name}"
        for _ in range(count)
    ]
    logger.debug("Generated %d %s character names", len(names), gender.value)
    return names


def generate_location_names(
    data: LocationNameData,
    name_type: Union[PoolKey, str],
    count: int,
    rng: Optional[random.Random] = None,
) -> list[str]:
    """Generate names from a single location pool.

    Returns:
        List of `count` names, or an empty list if the pool is absent or empty
    """
    if isinstance(name_type, PoolKey):
        name_type = name_type.value
    rng = rng or random

    pool = data.get_pool(name_type)
    if not pool:
        logger.debug("No names available for pool '%s', nothing to generate", name_type)
        return []

    names = [_draw(pool, rng).name for _ in range(count)]
    logger.debug("Generated %d names from pool '%s'", len(names), name_type)
    return names


def generate_names(
    data: NameData,
    count: int,
    gender: Union[Gender, str, None] = None,
    name_type: Union[PoolKey, str, None] = None,
    rng: Optional[random.Random] = None,
) -> list[str]:
    """Generate names, dispatching on the dataset kind.

    Character data needs `gender`, location data needs `name_type`. Any other
    combination generates nothing.
    """
    if is_character_name_data(data) and gender:
        if not isinstance(gender, Gender):
            try:
                gender = Gender.from_string(gender)
            except ValueError as e:
                logger.warning("%s", e)
                return []
        return generate_character_names(data, gender, count, rng=rng)

    if is_location_name_data(data) and name_type:
        return generate_location_names(data, name_type, count, rng=rng)

    logger.debug(
        "Cannot generate names for %s with gender=%r name_type=%r",
        type(data).__name__,
        gender,
        name_type,
    )
    return []

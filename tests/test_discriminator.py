import pytest

from namegen.discriminator import is_character_name_data, is_location_name_data
from namegen.models import CharacterNameData, LocationNameData


def test_parsed_variants_are_classified_by_type(character_data, location_data):
    assert is_character_name_data(character_data)
    assert not is_location_name_data(character_data)
    assert is_location_name_data(location_data)
    assert not is_character_name_data(location_data)


def test_empty_character_data_is_still_character_data():
    assert is_character_name_data(CharacterNameData.empty())


def test_location_data_with_character_named_pools_is_location():
    data = LocationNameData(pools={"male": (), "female": (), "lastNames": ()})

    assert is_location_name_data(data)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ({"male": [], "female": [], "lastNames": []}, True),
        ({"male": [], "female": [], "lastNames": [], "cityNames": []}, True),
        ({"male": [], "female": []}, False),
        ({"female": [], "lastNames": []}, False),
        ({"cityNames": []}, False),
        ({}, False),
    ],
)
def test_raw_mappings_use_structural_rule(raw, expected):
    assert is_character_name_data(raw) is expected


@pytest.mark.parametrize(
    "data",
    [
        CharacterNameData.empty(),
        LocationNameData(),
        {"male": [], "female": [], "lastNames": []},
        {"cityNames": []},
        None,
    ],
)
def test_location_is_negation_of_character(data):
    assert is_character_name_data(data) is (not is_location_name_data(data))


def test_classification_is_stable(character_data):
    results = {is_character_name_data(character_data) for _ in range(20)}

    assert results == {True}

"""Pytest configuration and shared fixtures."""

import json
import random
from pathlib import Path

import pytest

from namegen.config import NamegenConfig
from namegen.models import CharacterNameData, LocationNameData, NameEntry


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so draws are repeatable within a test."""
    return random.Random(1234)


@pytest.fixture
def character_data() -> CharacterNameData:
    return CharacterNameData(
        male=(
            NameEntry("Aran", "Swift."),
            NameEntry("Borin", "Stout."),
        ),
        female=(
            NameEntry("Cyra", "Bright."),
            NameEntry("Aran", "Shadowed."),
        ),
        last_names=(
            NameEntry("Oakheart", "Strong."),
            NameEntry("Ashvale", "Grey."),
        ),
    )


@pytest.fixture
def location_data() -> LocationNameData:
    return LocationNameData(
        pools={
            "cityNames": (
                NameEntry("Mirepool", "A swamp town."),
                NameEntry("Highcrag", "A mountain keep."),
            ),
            "districtNames": (
                NameEntry("Lantern Row", "Where the lamplighters live."),
                NameEntry("Mirepool", "A district named after the town."),
            ),
            "landmarkNames": (),
        }
    )


def _write_json(path: Path, payload) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload), encoding="utf-8")


@pytest.fixture
def data_root(tmp_path: Path) -> Path:
    """A data root with healthy and broken datasets.

    Layout:
        fantasy/elf.json          character dataset
        fantasy/town.json         location dataset
        broken/not-json.json      invalid JSON
        broken/bad-shape.json     character keys with a non-list pool
    """
    root = tmp_path / "data"
    _write_json(root / "fantasy" / "elf.json", {
        "male": [{"name": "Aran", "description": "Swift."}],
        "female": [{"name": "Lira", "description": "Graceful."}],
        "lastNames": [{"name": "Oakheart", "description": "Strong."}],
    })
    _write_json(root / "fantasy" / "town.json", {
        "cityNames": [{"name": "Mirepool", "description": "A swamp town."}],
        "regionNames": [{"name": "The Fens", "description": "Wet lowlands."}],
    })
    (root / "broken").mkdir(parents=True)
    (root / "broken" / "not-json.json").write_text("{ not json", encoding="utf-8")
    _write_json(root / "broken" / "bad-shape.json", {
        "male": "Aran",
        "female": [],
        "lastNames": [],
    })
    return root


@pytest.fixture
def config(data_root: Path) -> NamegenConfig:
    """Config searching only the test data root."""
    return NamegenConfig(data_dirs=(data_root,))

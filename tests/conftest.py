"""Shared fixtures for Food Finder tests."""

import shutil
from pathlib import Path

import pytest

from food_finder.services.registry import RestaurantRegistry

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def test_file(tmp_path):
    """Copy the fixture restaurant file somewhere writable."""
    path = tmp_path / "restaurants_test.txt"
    shutil.copy(FIXTURES_DIR / "restaurants_test.txt", path)
    return path


@pytest.fixture
def registry():
    """Create an empty registry."""
    return RestaurantRegistry()

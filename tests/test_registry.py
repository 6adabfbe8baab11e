"""Tests for the restaurant registry."""

from food_finder.models import Restaurant
from food_finder.services.registry import RestaurantRegistry
from food_finder.services.restaurant_file import RestaurantFile


class TestLoadFile:
    """Tests for RestaurantRegistry.load_file."""

    def test_starts_without_file(self):
        """Test that a new registry has no file."""
        assert RestaurantRegistry().file is None

    def test_none_path_clears_file(self, registry, test_file, capsys):
        """Test that a None path leaves no file loaded."""
        registry.load_file(test_file)
        registry.load_file(None)
        capsys.readouterr()

        assert registry.file is None

    def test_usable_path_sets_file(self, registry, test_file):
        """Test that a usable path sets a usable RestaurantFile."""
        registry.load_file(test_file)

        assert registry.file is not None
        assert type(registry.file) is RestaurantFile
        assert registry.file.usable

    def test_none_path_outputs_message(self, registry, capsys):
        """Test that a None path prints a 'not usable' notice."""
        registry.load_file(None)

        assert "not usable" in capsys.readouterr().out

    def test_usable_path_outputs_nothing(self, registry, test_file, capsys):
        """Test that a usable path prints nothing to stdout."""
        registry.load_file(test_file)

        assert capsys.readouterr().out == ""

    def test_unusable_path_still_sets_file(self, registry, tmp_path, capsys):
        """Test that a missing file is still loaded, just not usable."""
        registry.load_file(tmp_path / "missing.txt")

        assert registry.file is not None
        assert not registry.file.usable
        assert capsys.readouterr().out == ""

    def test_registries_are_independent(self, test_file, capsys):
        """Test that each registry keeps its own file."""
        first = RestaurantRegistry()
        second = RestaurantRegistry()

        first.load_file(test_file)
        second.load_file(None)
        capsys.readouterr()

        assert first.file is not None
        assert second.file is None


class TestAll:
    """Tests for RestaurantRegistry.all."""

    def test_returns_restaurants(self, registry, test_file):
        """Test that all returns a list of Restaurant objects."""
        registry.load_file(test_file)
        restaurants = registry.all()

        assert isinstance(restaurants, list)
        assert len(restaurants) == len(registry.all()) == 3
        assert isinstance(restaurants[0], Restaurant)
        assert restaurants[0].name == "Crescent"

    def test_empty_without_file(self, registry, test_file, capsys):
        """Test that all returns an empty list after loading None."""
        registry.load_file(test_file)
        registry.load_file(None)
        capsys.readouterr()

        assert registry.all() == []

    def test_empty_for_unusable_file(self, registry, tmp_path):
        """Test that an unusable file lists nothing."""
        registry.load_file(tmp_path / "missing.txt")

        assert registry.all() == []

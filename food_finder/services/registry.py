"""Registry holding the currently loaded restaurant file."""

import logging
from pathlib import Path

from food_finder.models import Restaurant
from food_finder.services.restaurant_file import RestaurantFile

logger = logging.getLogger(__name__)


class RestaurantRegistry:
    """Holds the active restaurant file and lists the restaurants in it.

    A registry starts with no file. ``load_file`` is the only way to change
    which file is active; having a file does not mean the file is usable.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._file: RestaurantFile | None = None

    @property
    def file(self) -> RestaurantFile | None:
        """The active restaurant file, or None if none is loaded."""
        return self._file

    def load_file(self, filepath: str | Path | None) -> None:
        """Make the file at ``filepath`` the active restaurant file.

        A None path clears the active file and prints a notice instead.

        Args:
            filepath: Path of the restaurant file, or None
        """
        if filepath is None:
            self._file = None
            print("Restaurant file path is not usable.")
            return

        self._file = RestaurantFile(filepath)
        if self._file.usable:
            logger.debug(f"Loaded restaurant file {self._file.filepath}")
        else:
            logger.warning(f"Loaded restaurant file {self._file.filepath} is not usable")

    def all(self) -> list[Restaurant]:
        """Get every restaurant in the active file.

        Returns:
            List of restaurants, empty if no file is loaded
        """
        if self._file is None:
            return []
        return list(self._file.restaurants())

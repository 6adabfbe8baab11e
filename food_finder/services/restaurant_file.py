"""Tab-delimited text file storage for restaurants."""

import logging
import os
from pathlib import Path

from food_finder.models import Restaurant

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "\t"


def _clean(value: str | None) -> str:
    """Flatten a field so it fits on a single tab-delimited line."""
    if value is None:
        return ""
    return str(value).replace("\t", " ").replace("\r", " ").replace("\n", " ")


class RestaurantFile:
    """Reads and appends restaurants to a flat text file.

    Each line holds one restaurant as ``name<TAB>cuisine<TAB>price``.
    """

    def __init__(self, filepath: str | Path) -> None:
        """Initialize the file store.

        Args:
            filepath: Path of the backing file (it need not exist yet)
        """
        self.filepath = Path(filepath)

    def __repr__(self) -> str:
        return f"RestaurantFile({str(self.filepath)!r})"

    @property
    def usable(self) -> bool:
        """Whether the file exists and can be both read and written."""
        return (
            self.filepath.is_file()
            and os.access(self.filepath, os.R_OK)
            and os.access(self.filepath, os.W_OK)
        )

    def create(self) -> bool:
        """Create an empty restaurant file if one doesn't exist.

        Returns:
            True if the file is usable afterwards
        """
        if self.filepath.exists():
            return self.usable

        try:
            self.filepath.parent.mkdir(parents=True, exist_ok=True)
            self.filepath.touch()
        except OSError:
            logger.exception(f"Could not create restaurant file {self.filepath}")
            return False

        logger.info(f"Created restaurant file {self.filepath}")
        return self.usable

    def restaurants(self) -> list[Restaurant]:
        """Load every restaurant stored in the file.

        Returns:
            Restaurants in file order, or an empty list if the file isn't
            usable or can't be decoded
        """
        if not self.usable:
            logger.warning(f"Restaurant file {self.filepath} is not usable")
            return []

        restaurants = []
        try:
            with self.filepath.open(encoding="utf-8") as f:
                for line_number, line in enumerate(f, start=1):
                    line = line.rstrip("\r\n")
                    if not line.strip():
                        continue

                    columns = line.split(FIELD_SEPARATOR)
                    if len(columns) > 3:
                        logger.warning(
                            f"Skipping malformed line {line_number} in {self.filepath}"
                        )
                        continue

                    fields = dict(zip(("name", "cuisine", "price"), columns))
                    restaurants.append(Restaurant(**fields))
        except (OSError, UnicodeDecodeError):
            logger.exception(f"Could not read restaurant file {self.filepath}")
            return []

        logger.debug(f"Loaded {len(restaurants)} restaurants from {self.filepath}")
        return restaurants

    def append(self, restaurant: Restaurant) -> bool:
        """Append one restaurant to the end of the file.

        Args:
            restaurant: Restaurant to write

        Returns:
            True if the line was written
        """
        if not self.usable:
            logger.warning(f"Restaurant file {self.filepath} is not usable")
            return False

        line = FIELD_SEPARATOR.join(
            _clean(value)
            for value in (restaurant.name, restaurant.cuisine, restaurant.price)
        )
        try:
            with self.filepath.open("a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError:
            logger.exception(f"Could not write to restaurant file {self.filepath}")
            return False

        logger.info(f"Saved restaurant {restaurant.name!r} to {self.filepath}")
        return True

"""Restaurant data model."""

import logging
import math
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from food_finder.services.registry import RestaurantRegistry

logger = logging.getLogger(__name__)


def parse_price(price: str | None) -> float | None:
    """Parse a price string into a finite number, or None if it isn't one."""
    if price is None:
        return None
    try:
        value = float(price)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def _is_blank(value: str | None) -> bool:
    return value is None or not str(value).strip()


class Restaurant(BaseModel):
    """Restaurant information.

    Fields are freely mutable; validity is only checked by ``is_valid`` and
    enforced by ``save``.
    """

    name: str | None = Field(default="", description="Restaurant name")
    cuisine: str | None = Field(default="unknown", description="Type of cuisine")
    price: str | None = Field(default=None, description="Average price, as text")

    def is_valid(self) -> bool:
        """Check whether the restaurant can be saved.

        Returns:
            True if name and cuisine are non-blank and price is a positive number
        """
        if _is_blank(self.name) or _is_blank(self.cuisine):
            return False

        price = parse_price(self.price)
        return price is not None and price > 0

    @property
    def formatted_price(self) -> str:
        """Price as a currency string, or an empty string if it isn't numeric."""
        price = parse_price(self.price)
        if price is None:
            return ""
        return f"${price:,.2f}"

    def save(self, registry: "RestaurantRegistry") -> bool:
        """Append this restaurant to the registry's active file.

        Args:
            registry: Registry holding the active restaurant file

        Returns:
            Result of the file append, or False if there is no usable file
            or the restaurant is not valid
        """
        restaurant_file = registry.file
        if restaurant_file is None or not restaurant_file.usable:
            logger.warning("Cannot save restaurant: no usable restaurant file loaded")
            return False

        if not self.is_valid():
            logger.info(f"Not saving invalid restaurant: {self.name!r}")
            return False

        return restaurant_file.append(self)

"""Storage services for the Food Finder system."""

from food_finder.services.registry import RestaurantRegistry
from food_finder.services.restaurant_file import RestaurantFile

__all__ = ["RestaurantFile", "RestaurantRegistry"]

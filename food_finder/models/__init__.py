"""Data models for the Food Finder system."""

from food_finder.models.restaurant import Restaurant

__all__ = ["Restaurant"]

"""Command-line interface for Food Finder - an interactive restaurant guide."""

import logging
import sys
from pathlib import Path

from food_finder.config import get_config, setup_logging
from food_finder.models import Restaurant
from food_finder.models.restaurant import parse_price
from food_finder.services.registry import RestaurantRegistry
from food_finder.services.restaurant_file import RestaurantFile

logger = logging.getLogger(__name__)

ACTIONS = ["list", "add", "quit"]
SORT_KEYS = ["name", "cuisine", "price"]


def _sort_key(sort_order: str):
    if sort_order == "price":
        # Restaurants without a finite numeric price sort last
        def by_price(restaurant: Restaurant) -> tuple[bool, float]:
            price = parse_price(restaurant.price)
            if price is None:
                return (True, 0.0)
            return (False, price)

        return by_price

    return lambda restaurant: (getattr(restaurant, sort_order) or "").lower()


class Guide:
    """Interactive restaurant guide."""

    def __init__(self, path: str | Path | None = None) -> None:
        """Initialize the guide.

        Args:
            path: Restaurant file path (defaults to the configured file)
        """
        self.config = get_config()
        setup_logging(self.config)

        if path is None:
            path = self.config.restaurants_file
        self.path = Path(path)
        self.registry = RestaurantRegistry()

    def prepare(self) -> bool:
        """Load the restaurant file, creating it if needed.

        Returns:
            True if a usable restaurant file is loaded
        """
        self.registry.load_file(self.path)
        if self.registry.file.usable:
            print("Found restaurant file.")
            return True

        if RestaurantFile(self.path).create():
            self.registry.load_file(self.path)
            print("Created restaurant file.")
            return True

        print("Exiting.\n")
        return False

    def run(self) -> None:
        """Run the guide until the user quits."""
        self._introduction()

        while True:
            try:
                action, args = self._get_action()
            except (EOFError, KeyboardInterrupt):
                print()
                break

            if action == "quit":
                break

            try:
                self.do_action(action, args)
            except Exception as e:
                logger.error(f"Unexpected error: {e}", exc_info=True)
                print(f"\n⚠ An unexpected error occurred: {e}")

        self._conclusion()

    def do_action(self, action: str, args: list[str] | None = None) -> None:
        """Perform a single guide action.

        Args:
            action: One of ACTIONS
            args: Extra words typed after the action
        """
        args = args or []
        if action == "list":
            self.list_restaurants(args)
        elif action == "add":
            self.add_restaurant()
        else:
            print("\nI don't understand that command.")
            print(f"Actions: {', '.join(ACTIONS)}\n")

    def list_restaurants(self, args: list[str] | None = None) -> None:
        """Print every restaurant, sorted by name, cuisine or price."""
        sort_order = args[0].lower() if args else "name"
        if sort_order not in SORT_KEYS:
            sort_order = "name"

        self._output_action_header("Listing restaurants")
        print(f"Sorted by {sort_order}. Try 'list cuisine' or 'list price'.\n")

        restaurants = sorted(self.registry.all(), key=_sort_key(sort_order))
        self._output_restaurant_table(restaurants)

    def add_restaurant(self) -> None:
        """Prompt for a new restaurant and save it."""
        self._output_action_header("Add a restaurant")

        restaurant = Restaurant(
            name=input("Restaurant name: ").strip(),
            cuisine=input("Cuisine type: ").strip(),
            price=input("Average price: ").strip(),
        )

        if restaurant.save(self.registry):
            print("\nRestaurant Added\n")
        else:
            print("\nSave Error: Restaurant not added\n")

    def _get_action(self) -> tuple[str, list[str]]:
        while True:
            print(f"Actions: {', '.join(ACTIONS)}")
            words = input("> ").strip().lower().split()
            if words and words[0] in ACTIONS:
                return words[0], words[1:]
            print("\nI don't understand that command.\n")

    def _introduction(self) -> None:
        print("\n" + "=" * 60)
        print("FOOD FINDER")
        print("=" * 60)
        print("This is an interactive guide to help you find the food you crave.\n")

    def _conclusion(self) -> None:
        print("\n" + "=" * 60)
        print("Goodbye and Bon Appetit!")
        print("=" * 60 + "\n")

    @staticmethod
    def _output_action_header(text: str) -> None:
        print(f"\n{text.upper().center(60)}\n")

    @staticmethod
    def _output_restaurant_table(restaurants: list[Restaurant]) -> None:
        print(" " + "Name".ljust(30) + " " + "Cuisine".ljust(20) + " " + "Price".rjust(6))
        print("-" * 60)
        for restaurant in restaurants:
            print(
                " "
                + (restaurant.name or "").ljust(30)
                + " "
                + (restaurant.cuisine or "").ljust(20)
                + " "
                + restaurant.formatted_price.rjust(6)
            )
        if not restaurants:
            print("No listings found")
        print("-" * 60)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        # Validate configuration by attempting to load it
        get_config()
    except Exception as e:
        print(f"Configuration error: {e}")
        sys.exit(1)

    guide = Guide(sys.argv[1] if len(sys.argv) > 1 else None)
    if not guide.prepare():
        sys.exit(1)
    guide.run()


if __name__ == "__main__":
    main()

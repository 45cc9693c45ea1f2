"""Interactive text menu over the catalog tree.

A thin adapter: it reads and validates input, calls the Category
operations and prints what they return. All catalog logic lives in
``hypermarket.catalog``.
"""

from decimal import Decimal
from enum import IntEnum

import structlog
from rich.console import Console
from rich.prompt import Prompt

from hypermarket.catalog import Category, RenderOptions
from hypermarket.domain.exceptions import InputError, InvalidChoiceError
from hypermarket.domain.money import parse_price
from hypermarket.infrastructure.config import Settings

logger = structlog.get_logger()


class MenuChoice(IntEnum):
    """Menu options, numbered as shown to the user."""

    ADD_PRODUCT = 1
    DELETE_PRODUCT = 2
    UPDATE_PRODUCT = 3
    SEARCH_PRODUCT = 4
    SORT_PRODUCTS = 5
    DISPLAY_ALL_PRODUCTS = 6
    CALCULATE_TOTAL_PRICE = 7
    DISPLAY_CATEGORY_HIERARCHY = 8
    EXIT = 9

    @property
    def label(self) -> str:
        """Human-readable label (e.g. 'Add Product')."""
        return self.name.replace("_", " ").title()


def parse_choice(raw: str, upper: int) -> int:
    """Parse a 1-based numbered selection.

    Args:
        raw: Text entered by the user.
        upper: Highest valid option.

    Returns:
        The selected number.

    Raises:
        InvalidChoiceError: If the text is not a number in 1..upper.
    """
    try:
        value = int(raw.strip())
    except ValueError as err:
        raise InvalidChoiceError(raw, upper) from err
    if not 1 <= value <= upper:
        raise InvalidChoiceError(raw, upper)
    return value


class CatalogMenu:
    """Read-dispatch loop for the catalog.

    Example usage:
        market = Hypermarket()
        market.initialize_sample_data()
        CatalogMenu(market.root_category, Console(), settings).run()
    """

    def __init__(self, root: Category, console: Console, settings: Settings) -> None:
        """Initialize the menu.

        Args:
            root: Root of the catalog tree.
            console: Console used for all input and output.
            settings: Presentation settings.
        """
        self.root = root
        self.console = console
        self.settings = settings
        self.options = RenderOptions(
            indent_width=settings.indent_width,
            currency_symbol=settings.currency_symbol,
        )
        self._handlers = {
            MenuChoice.ADD_PRODUCT: self.add_product,
            MenuChoice.DELETE_PRODUCT: self.delete_product,
            MenuChoice.UPDATE_PRODUCT: self.update_product,
            MenuChoice.SEARCH_PRODUCT: self.search_product,
            MenuChoice.SORT_PRODUCTS: self.sort_products,
            MenuChoice.DISPLAY_ALL_PRODUCTS: self.display_all_products,
            MenuChoice.CALCULATE_TOTAL_PRICE: self.calculate_total_price,
            MenuChoice.DISPLAY_CATEGORY_HIERARCHY: self.display_hierarchy,
        }

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        """Show the banner and process choices until Exit or end of input."""
        try:
            self.show_welcome()
            self.ask("")
            while self.step():
                pass
        except (EOFError, KeyboardInterrupt):
            self.console.print()
        logger.info("Menu closed")

    def step(self) -> bool:
        """Show the menu and handle one choice.

        Returns:
            False when the user chose Exit, True otherwise.
        """
        self.show_menu()
        raw = self.ask("Enter your choice (1-9)")

        try:
            value = int(raw.strip())
        except ValueError:
            self.say("Invalid input. Please enter a number (1-9).")
            return True
        try:
            choice = MenuChoice(value)
        except ValueError:
            self.say("Invalid choice. Please enter a valid option.")
            return True

        if choice is MenuChoice.EXIT:
            return False

        logger.debug("Menu choice", choice=choice.label)
        try:
            self._handlers[choice]()
        except InputError as exc:
            logger.debug("Rejected input", error=exc.message, **exc.details)
        return True

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def add_product(self) -> None:
        """Read a new product and add it to a chosen category."""
        name = self.ask("Enter product name")
        price = self._ask_price("Enter product price")
        description = self.ask("Enter product description")

        self.say("Select a category to add the product to:")
        category = self._choose_category()
        category.add_product(name, price, description)
        self.say(f"Product '{name}' added to '{category.name}' category successfully.")

    def delete_product(self) -> None:
        """Remove the first product with the entered name anywhere in the tree."""
        name = self.ask("Enter product name to delete")
        if self.root.remove_product(name):
            self.say(f"Product '{name}' deleted successfully.")
        else:
            self.say(f"Product '{name}' not found.")

    def update_product(self) -> None:
        """Overwrite price and description of a product in a chosen category."""
        name = self.ask("Enter product name to update")
        price = self._ask_price("Enter new price")
        description = self.ask("Enter new description")

        self.say("Select the category that holds the product:")
        category = self._choose_category()
        if category.update_product(name, price, description):
            self.say(f"Product '{name}' updated successfully.")
        else:
            self.say(f"Product '{name}' not found in '{category.name}'.")

    def search_product(self) -> None:
        """Look a product up by name anywhere in the tree."""
        name = self.ask("Enter product name to search")
        product = self.root.search_product(name)
        if product is None:
            self.say(f"Product '{name}' not found.")
            return
        self.say(
            f"Product found: {product.name}, "
            f"Price: {self.options.price(product.price)}, "
            f"Description: {product.description}"
        )

    def sort_products(self) -> None:
        """Sort every category's products by name."""
        self.root.sort_products()
        self.say("Products sorted.")

    def display_all_products(self) -> None:
        """Print every product grouped under its category."""
        self.say("\nAll Products:")
        for line in self.root.render_all_products(options=self.options):
            self.say(line)

    def calculate_total_price(self) -> None:
        """Print the total price of the whole catalog."""
        total = self.root.calculate_total_price()
        self.say(
            f"Total Price of All Products in {self.root.name} Category: "
            f"{self.options.price(total)}"
        )

    def display_hierarchy(self) -> None:
        """Print the category tree with totals and products."""
        self.say("\nCategory Hierarchy:")
        for line in self.root.display_hierarchy(options=self.options):
            self.say(line)

    # ------------------------------------------------------------------
    # Console helpers
    # ------------------------------------------------------------------

    def show_welcome(self) -> None:
        """Print the welcome banner centred on the screen width."""
        width = self.settings.screen_width or self.console.width
        message = self.settings.welcome_message
        padding = max((width - len(message)) // 2, 0)
        self.say(" " * padding + message)

    def show_menu(self) -> None:
        """Print the numbered menu."""
        self.say("\nMenu:")
        for choice in MenuChoice:
            self.say(f"{choice.value}. {choice.label}")

    def ask(self, prompt: str) -> str:
        """Read one line of input."""
        return Prompt.ask(prompt, console=self.console) if prompt else self.console.input()

    def say(self, text: str) -> None:
        """Print text verbatim, without markup or highlighting."""
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def _ask_price(self, prompt: str) -> Decimal:
        raw = self.ask(prompt)
        try:
            return parse_price(raw)
        except InputError:
            self.say("Invalid price. Please enter a valid decimal number.")
            raise

    def _choose_category(self) -> Category:
        categories = [category for _, category in self.root.iter_categories()]
        for number, (depth, category) in enumerate(self.root.iter_categories(), start=1):
            self.say(f"{self.options.indent(depth)}{number}. {category.name}")

        raw = self.ask("Category number")
        try:
            number = parse_choice(raw, len(categories))
        except InvalidChoiceError:
            self.say("Invalid category selection.")
            raise
        return categories[number - 1]

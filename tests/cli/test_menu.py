"""Tests for the interactive catalog menu."""

import io
from collections.abc import Callable
from decimal import Decimal

import pytest
from rich.console import Console

from hypermarket.catalog import Category
from hypermarket.cli import CatalogMenu, MenuChoice, parse_choice
from hypermarket.domain import InvalidChoiceError
from hypermarket.infrastructure.config import Settings


@pytest.fixture
def console() -> Console:
    """Create a console that records output in memory."""
    return Console(file=io.StringIO(), width=80, color_system=None, force_terminal=False)


@pytest.fixture
def settings() -> Settings:
    """Create settings independent of the environment."""
    return Settings(_env_file=None, screen_width=40, currency_symbol="$", indent_width=4)


@pytest.fixture
def feed(monkeypatch: pytest.MonkeyPatch) -> Callable[..., None]:
    """Queue lines of user input; EOF once they run out."""

    def _feed(*lines: str) -> None:
        queue = iter(lines)

        def fake_input(prompt: str = "") -> str:
            try:
                return next(queue)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", fake_input)

    return _feed


def output(console: Console) -> str:
    """Get everything written to the console."""
    return console.file.getvalue()


def make_menu(root: Category, console: Console, settings: Settings) -> CatalogMenu:
    """Create a menu over ``root``."""
    return CatalogMenu(root, console, settings)


class TestParseChoice:
    """Tests for parse_choice."""

    def test_valid(self) -> None:
        """Numbers in range are returned."""
        assert parse_choice(" 3 ", 5) == 3

    @pytest.mark.parametrize("raw", ["0", "6", "x", ""])
    def test_invalid(self, raw: str) -> None:
        """Out-of-range or non-numeric text raises InvalidChoiceError."""
        with pytest.raises(InvalidChoiceError):
            parse_choice(raw, 5)


class TestMenuChoice:
    """Tests for MenuChoice."""

    def test_labels(self) -> None:
        """Labels read like the menu entries."""
        assert MenuChoice.ADD_PRODUCT.label == "Add Product"
        assert MenuChoice.DISPLAY_CATEGORY_HIERARCHY.label == "Display Category Hierarchy"

    def test_numbering(self) -> None:
        """Options are numbered 1 to 9."""
        assert [c.value for c in MenuChoice] == list(range(1, 10))


class TestMenuLoop:
    """Tests for the read-dispatch loop."""

    def test_welcome_is_centred(self, feed, console, settings) -> None:
        """The banner is centred on the configured width."""
        feed("", "9")
        make_menu(Category("Root"), console, settings).run()
        message = settings.welcome_message
        padding = (40 - len(message)) // 2
        assert output(console).startswith(" " * padding + message + "\n")

    def test_exit(self, feed, console, settings) -> None:
        """Choosing 9 ends the loop after one menu."""
        feed("", "9")
        make_menu(Category("Root"), console, settings).run()
        text = output(console)
        assert text.count("Menu:") == 1
        assert "9. Exit" in text

    def test_end_of_input_exits(self, feed, console, settings) -> None:
        """Running out of input ends the loop without an error."""
        feed("")
        make_menu(Category("Root"), console, settings).run()
        assert "Menu:" in output(console)

    def test_non_numeric_choice(self, feed, console, settings) -> None:
        """Text instead of a number is reported and the menu repeats."""
        feed("", "abc", "9")
        make_menu(Category("Root"), console, settings).run()
        text = output(console)
        assert "Invalid input. Please enter a number (1-9)." in text
        assert text.count("Menu:") == 2

    def test_out_of_range_choice(self, feed, console, settings) -> None:
        """Numbers outside 1-9 are reported."""
        feed("", "12", "9")
        make_menu(Category("Root"), console, settings).run()
        assert "Invalid choice. Please enter a valid option." in output(console)


class TestMenuActions:
    """Tests for the individual menu actions."""

    def test_add_product(self, feed, console, settings, market) -> None:
        """A product is added to the chosen category."""
        # categories: 1 Root, 2 Fruits, 3 Electronics, ...
        feed("", "1", "Cherry", "3.25", "Sweet", "2", "9")
        make_menu(market.root_category, console, settings).run()

        fruits = market.root_category.subcategories[0]
        assert [p.name for p in fruits.products] == ["Apple", "Banana", "Cherry"]
        assert fruits.products[-1].price == Decimal("3.25")
        assert "Product 'Cherry' added to 'Fruits' category successfully." in output(console)

    def test_add_lists_categories_indented(self, feed, console, settings, market) -> None:
        """The category chooser lists the tree depth-first."""
        feed("", "1", "Cherry", "3.25", "Sweet", "1", "9")
        make_menu(market.root_category, console, settings).run()
        text = output(console)
        assert "1. Root\n" in text
        assert "    2. Fruits\n" in text
        assert "    8. Household\n" in text

    def test_add_invalid_price(self, feed, console, settings, market) -> None:
        """An invalid price aborts the action and the loop continues."""
        feed("", "1", "Cherry", "cheap", "9")
        make_menu(market.root_category, console, settings).run()
        text = output(console)
        assert "Invalid price. Please enter a valid decimal number." in text
        assert text.count("Menu:") == 2
        assert market.root_category.search_product("Cherry") is None

    def test_add_negative_price(self, feed, console, settings, market) -> None:
        """Negative prices are rejected."""
        feed("", "1", "Cherry", "-1", "9")
        make_menu(market.root_category, console, settings).run()
        assert "Invalid price. Please enter a valid decimal number." in output(console)
        assert market.root_category.search_product("Cherry") is None

    def test_add_oversized_price(self, feed, console, settings, market) -> None:
        """Prices beyond the supported range are rejected and the session goes on."""
        feed("", "1", "Yacht", "100000000000000000000000000000", "7", "9")
        make_menu(market.root_category, console, settings).run()
        text = output(console)
        assert "Invalid price. Please enter a valid decimal number." in text
        assert "Total Price of All Products in Root Category: $333.88" in text
        assert market.root_category.search_product("Yacht") is None

    def test_add_invalid_category(self, feed, console, settings, market) -> None:
        """An out-of-range category selection adds nothing."""
        feed("", "1", "Cherry", "3", "Sweet", "99", "9")
        make_menu(market.root_category, console, settings).run()
        assert "Invalid category selection." in output(console)
        assert market.root_category.count_products() == 8

    def test_delete_product(self, feed, console, settings, market) -> None:
        """Deleting removes the product from the tree."""
        feed("", "2", "banana", "9")
        make_menu(market.root_category, console, settings).run()
        assert "Product 'banana' deleted successfully." in output(console)
        assert market.root_category.search_product("Banana") is None

    def test_delete_missing(self, feed, console, settings, market) -> None:
        """Deleting an unknown name reports it."""
        feed("", "2", "Durian", "9")
        make_menu(market.root_category, console, settings).run()
        assert "Product 'Durian' not found." in output(console)

    def test_update_in_chosen_category(self, feed, console, settings, market) -> None:
        """Update applies to the product in the chosen category."""
        feed("", "3", "apple", "2.50", "Green Apple", "2", "9")
        make_menu(market.root_category, console, settings).run()

        product = market.root_category.search_product("Apple")
        assert product is not None
        assert product.price == Decimal("2.50")
        assert product.description == "Green Apple"
        assert "Product 'apple' updated successfully." in output(console)

    def test_update_wrong_category(self, feed, console, settings, market) -> None:
        """Update does not look below the chosen category."""
        feed("", "3", "Apple", "2.50", "Green Apple", "1", "9")
        make_menu(market.root_category, console, settings).run()

        assert "Product 'Apple' not found in 'Root'." in output(console)
        product = market.root_category.search_product("Apple")
        assert product is not None
        assert product.price == Decimal("1.20")

    def test_search_found(self, feed, console, settings, market) -> None:
        """Search prints the product with a formatted price."""
        feed("", "4", "television", "9")
        make_menu(market.root_category, console, settings).run()
        assert "Product found: Television, Price: $299.99, Description: HD TV" in output(console)

    def test_search_missing(self, feed, console, settings, market) -> None:
        """Search reports unknown names."""
        feed("", "4", "Durian", "9")
        make_menu(market.root_category, console, settings).run()
        assert "Product 'Durian' not found." in output(console)

    def test_sort(self, feed, console, settings) -> None:
        """Sorting reorders products and confirms."""
        root = Category("Root")
        for name in ["Banana", "apple", "Cherry"]:
            root.add_product(name, Decimal("1"), "")
        feed("", "5", "9")
        make_menu(root, console, settings).run()
        assert [p.name for p in root.products] == ["apple", "Banana", "Cherry"]
        assert "Products sorted." in output(console)

    def test_display_all_products(self, feed, console, settings, market) -> None:
        """All products are listed under their categories."""
        feed("", "6", "9")
        make_menu(market.root_category, console, settings).run()
        text = output(console)
        assert "All Products:" in text
        assert "Fruits (Total Price: $1.70)\n" in text
        assert "    - Apple, Price: $1.20, Description: Red Apple\n" in text

    def test_total_price(self, feed, console, settings, market) -> None:
        """The catalog total is printed."""
        feed("", "7", "9")
        make_menu(market.root_category, console, settings).run()
        assert "Total Price of All Products in Root Category: $333.88" in output(console)

    def test_display_hierarchy(self, feed, console, settings, market) -> None:
        """The hierarchy starts with the root heading."""
        feed("", "8", "9")
        make_menu(market.root_category, console, settings).run()
        text = output(console)
        assert "Category Hierarchy:\nRoot (Total Price: $333.88)\n" in text
        assert "    Household (Total Price: $18.99)\n" in text

    def test_markup_in_names_is_literal(self, feed, console, settings) -> None:
        """Names that look like console markup are printed as typed."""
        root = Category("Root")
        feed("", "1", "[bold]Tea[/bold]", "1", "Green", "1", "4", "[bold]tea[/bold]", "9")
        make_menu(root, console, settings).run()
        assert "Product found: [bold]Tea[/bold], Price: $1.00" in output(console)

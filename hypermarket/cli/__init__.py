"""Interactive command-line menu."""

from hypermarket.cli.menu import CatalogMenu, MenuChoice, parse_choice

__all__ = ["CatalogMenu", "MenuChoice", "parse_choice"]

"""Catalog value holders.

Defines the Product leaf stored inside a Category.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(eq=False)
class Product:
    """A product owned by exactly one category.

    Products compare by identity: two entries with the same name are
    still distinct products.

    Attributes:
        name: Product name, matched case-insensitively by catalog lookups.
        price: Non-negative price in major currency units.
        description: Free-form description.
    """

    name: str
    price: Decimal
    description: str = ""

    def matches(self, name: str) -> bool:
        """Check whether this product answers to ``name``.

        Args:
            name: Name to compare, in any letter case.

        Returns:
            True if the names are equal ignoring case.
        """
        return self.name.casefold() == name.casefold()

    def sort_key(self) -> str:
        """Key for case-insensitive ordering by name."""
        return self.name.casefold()

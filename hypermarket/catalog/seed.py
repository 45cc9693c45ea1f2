"""Hypermarket bootstrap with sample catalog data.

Builds the root category and, on request, a small fixed grocery catalog
so that the menu has something to work with on first start.
"""

from decimal import Decimal

import structlog

from hypermarket.catalog.taxonomy import Category

logger = structlog.get_logger()


ROOT_CATEGORY_NAME = "Root"

# (category, [(product, price, description), ...]) in attachment order
SAMPLE_CATALOG: list[tuple[str, list[tuple[str, str, str]]]] = [
    ("Fruits", [("Apple", "1.20", "Red Apple"), ("Banana", "0.50", "Yellow Banana")]),
    ("Electronics", [("Television", "299.99", "HD TV")]),
    ("Vegetables", [("Roca", "0.5", "Green Roca")]),
    ("Dairies", [("Dina Farm's Milk", "7", "Full Fat Milk")]),
    ("Snacks", [("Oreo", "1.7", "Biscuit")]),
    ("Drinks", [("RedBull", "4", "Energy Drink")]),
    ("Household", [("Tide", "18.99", "Detergent")]),
]


class Hypermarket:
    """Owner of the catalog tree for one session.

    Example usage:
        market = Hypermarket()
        market.initialize_sample_data()
        print(market.root_category.calculate_total_price())  # 333.88
    """

    def __init__(self, root_name: str = ROOT_CATEGORY_NAME) -> None:
        """Create an empty catalog.

        Args:
            root_name: Name of the root category.
        """
        self.root_category = Category(root_name)

    def initialize_sample_data(self) -> None:
        """Attach the sample categories and products under the root."""
        for category_name, products in SAMPLE_CATALOG:
            category = Category(category_name)
            for name, price, description in products:
                category.add_product(name, Decimal(price), description)
            self.root_category.add_subcategory(category)

        logger.info(
            "Sample data loaded",
            categories=len(SAMPLE_CATALOG),
            products=self.root_category.count_products(),
        )

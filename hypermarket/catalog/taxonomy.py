"""Category tree for the hypermarket catalog.

A category owns an ordered list of products and an ordered list of child
categories, forming a rooted tree:

    Root
    ├── Fruits
    │   ├── Apple
    │   └── Banana
    └── Electronics
        └── Television

Every operation works on the subtree rooted at the receiver and walks it
depth-first: a category's own products come before its subcategories, and
subcategories are visited in insertion order. Name comparisons ignore case.

Lookups that find nothing return ``None`` or ``False``; they never raise.

Mutations emit structlog debug events. Call
``hypermarket.infrastructure.logging.configure_logging`` before use so that
they go to stderr through stdlib logging; structlog's unconfigured default
prints to stdout.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from decimal import Decimal

import structlog

from hypermarket.catalog.models import Product
from hypermarket.catalog.rendering import RenderOptions, hierarchy_lines, product_lines
from hypermarket.domain.money import ZERO, exact_context

logger = structlog.get_logger()


@dataclass(eq=False)
class Category:
    """A named node of the catalog tree.

    Categories compare by identity. The tree must stay acyclic and every
    category must have at most one parent; ``add_subcategory`` trusts the
    caller on both counts.

    Operations recurse once per level of the tree, so the depth of a tree
    is bounded by the interpreter recursion limit (``sys.getrecursionlimit``);
    deeper trees raise ``RecursionError``.

    Attributes:
        name: Category name (not required to be unique).
        products: Products directly in this category, in insertion order.
        subcategories: Child categories, in insertion order.
    """

    name: str
    products: list[Product] = field(default_factory=list, repr=False)
    subcategories: list["Category"] = field(default_factory=list, repr=False)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_product(self, name: str, price: Decimal, description: str) -> Product:
        """Append a new product to this category.

        Duplicate names are allowed and produce separate entries.

        Args:
            name: Product name.
            price: Non-negative price.
            description: Product description.

        Returns:
            The product that was added.
        """
        product = Product(name=name, price=price, description=description)
        self.products.append(product)
        logger.debug("Product added", product=name, category=self.name)
        return product

    def add_subcategory(self, category: "Category") -> None:
        """Attach an existing category as the last child of this one.

        Args:
            category: Detached category to attach. Must not already have a
                parent and must not be an ancestor of this category.
        """
        self.subcategories.append(category)

    def remove_product(self, name: str) -> bool:
        """Remove the first product named ``name`` from this subtree.

        This category's own products are checked first, then each
        subcategory in order. Only one product is removed even when the
        name occurs several times.

        Args:
            name: Product name, in any letter case.

        Returns:
            True if a product was removed, False if none matched.
        """
        removed = self._remove_product(name)
        if not removed:
            logger.debug("Product not found for removal", product=name, category=self.name)
        return removed

    def _remove_product(self, name: str) -> bool:
        for index, product in enumerate(self.products):
            if product.matches(name):
                del self.products[index]
                logger.debug("Product removed", product=product.name, category=self.name)
                return True

        return any(sub._remove_product(name) for sub in self.subcategories)

    def update_product(self, name: str, new_price: Decimal, new_description: str) -> bool:
        """Overwrite price and description of a product in this category.

        Only this category's own products are searched; subcategories are
        not. Callers pick the exact category first.

        Args:
            name: Product name, in any letter case.
            new_price: Replacement price.
            new_description: Replacement description.

        Returns:
            True if a product was updated, False if none matched.
        """
        product = self.find_own_product(name)
        if product is None:
            logger.debug("Product not found for update", product=name, category=self.name)
            return False

        product.price = new_price
        product.description = new_description
        logger.debug("Product updated", product=product.name, category=self.name)
        return True

    def sort_products(self) -> None:
        """Sort products by name, ignoring case, throughout this subtree.

        The sort is stable. The order of subcategories is left untouched.
        """
        self.products.sort(key=Product.sort_key)
        for sub in self.subcategories:
            sub.sort_products()
        logger.debug("Products sorted", category=self.name)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_own_product(self, name: str) -> Product | None:
        """Get the first product directly in this category named ``name``.

        Args:
            name: Product name, in any letter case.

        Returns:
            Product if found, None otherwise.
        """
        return next((p for p in self.products if p.matches(name)), None)

    def search_product(self, name: str) -> Product | None:
        """Find the first product named ``name`` in this subtree.

        Args:
            name: Product name, in any letter case.

        Returns:
            Product if found, None otherwise.
        """
        product = self.find_own_product(name)
        if product is not None:
            return product

        for sub in self.subcategories:
            product = sub.search_product(name)
            if product is not None:
                return product
        return None

    def calculate_total_price(self) -> Decimal:
        """Sum the prices of every product in this subtree.

        Computed on each call, without rounding.

        Returns:
            Exact decimal total.
        """
        with exact_context():
            total = sum((p.price for p in self.products), ZERO)
            for sub in self.subcategories:
                total += sub.calculate_total_price()
        return total

    def count_products(self) -> int:
        """Count the products in this subtree."""
        return len(self.products) + sum(sub.count_products() for sub in self.subcategories)

    def iter_categories(self, depth: int = 0) -> Iterator[tuple[int, "Category"]]:
        """Walk this subtree depth-first, starting with this category.

        Args:
            depth: Depth reported for this category.

        Yields:
            Tuples of (depth, category).
        """
        yield depth, self
        for sub in self.subcategories:
            yield from sub.iter_categories(depth + 1)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def display_hierarchy(
        self,
        depth: int = 0,
        options: RenderOptions | None = None,
    ) -> Iterator[str]:
        """Render this category, its products and its subcategories.

        Args:
            depth: Indentation level of this category's line.
            options: Indentation and currency settings.

        Returns:
            A new lazy iterator of text lines.
        """
        return hierarchy_lines(self, depth, options or RenderOptions())

    def render_all_products(
        self,
        depth: int = 0,
        options: RenderOptions | None = None,
    ) -> Iterator[str]:
        """Render every product in this subtree under its category heading.

        Unlike ``display_hierarchy`` no heading is emitted for this category.

        Args:
            depth: Indentation level of this category's products.
            options: Indentation and currency settings.

        Returns:
            A new lazy iterator of text lines.
        """
        return product_lines(self, depth, options or RenderOptions())

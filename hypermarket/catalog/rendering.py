"""Text rendering of the category tree.

Renderers are generators: they produce lines lazily, do not touch the
tree, and leave printing to the caller. Calling a renderer again starts a
fresh traversal.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from hypermarket.domain.money import format_price

if TYPE_CHECKING:
    from hypermarket.catalog.models import Product
    from hypermarket.catalog.taxonomy import Category


@dataclass(frozen=True)
class RenderOptions:
    """Presentation settings for rendered lines.

    Attributes:
        indent_width: Spaces per depth level.
        currency_symbol: Symbol prefixed to prices.
    """

    indent_width: int = 4
    currency_symbol: str = "$"

    def indent(self, depth: int) -> str:
        """Get the indentation prefix for ``depth``."""
        return " " * (depth * self.indent_width)

    def price(self, amount: Decimal) -> str:
        """Format ``amount`` as currency."""
        return format_price(amount, self.currency_symbol)


def category_line(category: "Category", depth: int, options: RenderOptions) -> str:
    """Format a category heading with its subtree total."""
    total = options.price(category.calculate_total_price())
    return f"{options.indent(depth)}{category.name} (Total Price: {total})"


def product_line(product: "Product", depth: int, options: RenderOptions) -> str:
    """Format a single product entry."""
    return (
        f"{options.indent(depth)}- {product.name}, "
        f"Price: {options.price(product.price)}, "
        f"Description: {product.description}"
    )


def hierarchy_lines(category: "Category", depth: int, options: RenderOptions) -> Iterator[str]:
    """Yield the heading, products and nested subcategories of ``category``.

    Args:
        category: Category to render.
        depth: Indentation level of the heading.
        options: Presentation settings.

    Yields:
        Text lines in depth-first, child order.
    """
    yield category_line(category, depth, options)
    for product in category.products:
        yield product_line(product, depth, options)
    for sub in category.subcategories:
        yield from hierarchy_lines(sub, depth + 1, options)


def product_lines(category: "Category", depth: int, options: RenderOptions) -> Iterator[str]:
    """Yield the products of ``category``, then each subcategory section.

    Each subcategory section is its heading at ``depth`` followed by its
    own contents at ``depth + 1``.

    Args:
        category: Category whose contents are rendered.
        depth: Indentation level of the category's products.
        options: Presentation settings.

    Yields:
        Text lines in depth-first, child order.
    """
    for product in category.products:
        yield product_line(product, depth, options)
    for sub in category.subcategories:
        yield category_line(sub, depth, options)
        yield from product_lines(sub, depth + 1, options)

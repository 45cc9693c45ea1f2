"""Product Catalog.

Provides the category tree, its products, text rendering and the sample
data bootstrap.
"""

from hypermarket.catalog.models import Product
from hypermarket.catalog.rendering import RenderOptions
from hypermarket.catalog.seed import ROOT_CATEGORY_NAME, SAMPLE_CATALOG, Hypermarket
from hypermarket.catalog.taxonomy import Category

__all__ = [
    # Tree
    "Category",
    "Product",
    # Rendering
    "RenderOptions",
    # Bootstrap
    "Hypermarket",
    "ROOT_CATEGORY_NAME",
    "SAMPLE_CATALOG",
]

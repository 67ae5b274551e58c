"""
Product catalog domain service.

Read-only access to products: full listing and case-insensitive
name search, both delegated to the product repository.
"""

from dataclasses import dataclass

from .models import Product
from .ports import ProductRepository


@dataclass
class ProductCatalog:
    """Domain service for product lookup."""

    repository: ProductRepository

    def list_products(self) -> list[Product]:
        """Return every product."""
        return self.repository.find_all()

    def search(self, name: str) -> list[Product]:
        """
        Search products by name substring, ignoring case.

        A blank search term returns the full listing.
        """
        term = name.strip()
        if not term:
            return self.list_products()
        return self.repository.find_by_name_containing_ignore_case(term)

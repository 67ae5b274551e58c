"""
Unit tests for ProductCatalog domain service.
"""

from unittest.mock import Mock

from src.adapters.repository.memory import InMemoryProductRepository
from src.domain.catalog import ProductCatalog
from src.domain.models import Product


class TestSearch:
    """Tests for ProductCatalog.search()."""

    def test_search_delegates_to_repository(self) -> None:
        repo = Mock()
        repo.find_by_name_containing_ignore_case.return_value = [Product(id=1, name="Lamp")]
        catalog = ProductCatalog(repository=repo)

        result = catalog.search("lam")

        repo.find_by_name_containing_ignore_case.assert_called_once_with("lam")
        assert result == [Product(id=1, name="Lamp")]

    def test_search_strips_term(self) -> None:
        repo = Mock()
        repo.find_by_name_containing_ignore_case.return_value = []
        catalog = ProductCatalog(repository=repo)

        catalog.search("  lam  ")

        repo.find_by_name_containing_ignore_case.assert_called_once_with("lam")

    def test_blank_search_lists_everything(self) -> None:
        repo = Mock()
        repo.find_all.return_value = []
        catalog = ProductCatalog(repository=repo)

        catalog.search("   ")

        repo.find_all.assert_called_once_with()
        repo.find_by_name_containing_ignore_case.assert_not_called()

    def test_search_against_in_memory_store(
        self, product_repository: InMemoryProductRepository
    ) -> None:
        product_repository.save(Product(name="Desk Lamp"))
        product_repository.save(Product(name="Office Chair"))
        catalog = ProductCatalog(repository=product_repository)

        assert [p.name for p in catalog.search("LAMP")] == ["Desk Lamp"]


class TestListProducts:
    """Tests for ProductCatalog.list_products()."""

    def test_list_products_returns_all(self, product_repository: InMemoryProductRepository) -> None:
        product_repository.save(Product(name="Desk Lamp"))
        product_repository.save(Product(name="Office Chair"))
        catalog = ProductCatalog(repository=product_repository)

        assert len(catalog.list_products()) == 2

"""Repository adapters - Database and in-memory implementations."""

from .memory import InMemoryProductRepository, InMemoryUserRepository, seed_products
from .postgres import PostgresProductRepository, PostgresUserRepository, run_migrations

__all__ = [
    "InMemoryProductRepository",
    "InMemoryUserRepository",
    "PostgresProductRepository",
    "PostgresUserRepository",
    "run_migrations",
    "seed_products",
]

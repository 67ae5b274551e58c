"""
In-memory repository adapters - Implement the repository protocols.

Used by the "memory" storage backend and by tests. Records are copied on
the way in and out so callers never share state with the store. A single
lock per store makes the uniqueness check and the write in save() atomic,
mirroring the unique constraints of the PostgreSQL schema.
"""

import threading
from dataclasses import replace
from decimal import Decimal
from itertools import count

from src.domain.exceptions import DuplicateEmail, DuplicateUsername
from src.domain.models import Product, User


class InMemoryUserRepository:
    """
    Implements UserRepository protocol with a dict keyed by id.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._ids = count(1)
        self._lock = threading.Lock()

    def find_by_username(self, username: str) -> User | None:
        with self._lock:
            for user in self._users.values():
                if user.username == username:
                    return replace(user)
        return None

    def exists_by_username(self, username: str) -> bool:
        with self._lock:
            return any(user.username == username for user in self._users.values())

    def exists_by_email(self, email: str) -> bool:
        with self._lock:
            return any(user.email == email for user in self._users.values())

    def save(self, user: User) -> User:
        """
        Insert or update a user atomically.

        Raises:
            DuplicateUsername: If another user holds the username
            DuplicateEmail: If another user holds the email
        """
        with self._lock:
            for other in self._users.values():
                if other.id == user.id:
                    continue
                if other.username == user.username:
                    raise DuplicateUsername(user.username)
                if other.email == user.email:
                    raise DuplicateEmail(user.email)

            stored = replace(user)
            if stored.id is None:
                stored.id = next(self._ids)
            self._users[stored.id] = stored
            return replace(stored)

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)


class InMemoryProductRepository:
    """Implements ProductRepository protocol with a dict keyed by id."""

    def __init__(self) -> None:
        self._products: dict[int, Product] = {}
        self._ids = count(1)
        self._lock = threading.Lock()

    def find_by_name_containing_ignore_case(self, name: str) -> list[Product]:
        needle = name.lower()
        with self._lock:
            return [
                replace(product)
                for _, product in sorted(self._products.items())
                if needle in product.name.lower()
            ]

    def find_all(self) -> list[Product]:
        with self._lock:
            return [replace(product) for _, product in sorted(self._products.items())]

    def save(self, product: Product) -> Product:
        with self._lock:
            stored = replace(product)
            if stored.id is None:
                stored.id = next(self._ids)
            self._products[stored.id] = stored
            return replace(stored)


# Starter catalog for the memory backend, which has no other way to add products
SAMPLE_PRODUCTS = (
    Product(name="Wireless Mouse", description="Ergonomic 2.4 GHz mouse", price=Decimal("24.99")),
    Product(name="Mechanical Keyboard", description="Tenkeyless, brown switches", price=Decimal("89.00")),
    Product(name="USB-C Hub", description="7-in-1 with HDMI and card reader", price=Decimal("39.50")),
    Product(name="27\" Monitor", description="1440p IPS panel", price=Decimal("279.00")),
    Product(name="Laptop Stand", description="Adjustable aluminium stand", price=Decimal("32.00")),
    Product(name="Noise-Cancelling Headphones", description="Over-ear, 30h battery", price=Decimal("149.99")),
)


def seed_products(repository: InMemoryProductRepository) -> None:
    """Load SAMPLE_PRODUCTS into an in-memory product store."""
    for product in SAMPLE_PRODUCTS:
        repository.save(product)

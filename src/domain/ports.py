"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from typing import Protocol

from .models import Product, User


class UserRepository(Protocol):
    """Port interface for user persistence."""

    def find_by_username(self, username: str) -> User | None:
        """Return the user with this exact username, or None."""
        ...

    def exists_by_username(self, username: str) -> bool:
        """Return True if a user with this username exists."""
        ...

    def exists_by_email(self, email: str) -> bool:
        """Return True if a user with this email exists."""
        ...

    def save(self, user: User) -> User:
        """
        Insert or update a user.

        Assigns an identifier when ``user.id`` is None, otherwise updates
        the existing record. Implementations must enforce username and
        email uniqueness themselves, independently of any service-level
        check.

        Args:
            user: Record to persist (password already hashed)

        Returns:
            The persisted record, including its identifier

        Raises:
            DuplicateUsername: If another user already holds the username
            DuplicateEmail: If another user already holds the email
        """
        ...


class ProductRepository(Protocol):
    """Port interface for product persistence."""

    def find_by_name_containing_ignore_case(self, name: str) -> list[Product]:
        """
        Case-insensitive substring search on product name.

        Args:
            name: Substring to look for

        Returns:
            Matching products ordered by id
        """
        ...

    def find_all(self) -> list[Product]:
        """Return every product ordered by id."""
        ...

    def save(self, product: Product) -> Product:
        """Insert or update a product, assigning an id if absent."""
        ...


class PasswordHasher(Protocol):
    """Port interface for one-way credential hashing."""

    def hash(self, plaintext: str) -> str:
        """Return a salted one-way hash of the plaintext credential."""
        ...

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Return True if the plaintext matches the stored hash."""
        ...

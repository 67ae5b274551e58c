"""
Domain records - Plain data carriers for users and products.

These are the records that flow between the services and the store
adapters. They carry no persistence mapping; adapters translate rows
to and from these dataclasses.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass
class User:
    """
    A user record.

    ``id`` is None until the store assigns it on first save. ``password``
    holds the plaintext only while the record is an unpersisted candidate;
    persisted records always carry the hash.
    """

    username: str
    email: str
    password: str
    id: int | None = None


@dataclass
class Product:
    """A catalog product."""

    name: str
    description: str | None = None
    price: Decimal | None = None
    image_url: str | None = None
    id: int | None = None

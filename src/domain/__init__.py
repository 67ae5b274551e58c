"""
Domain layer - Pure business logic with zero framework imports.

This package contains the registration and catalog logic. It defines its
own port interfaces for infrastructure abstraction, so adapters can be
swapped without touching the services.
"""

from .catalog import ProductCatalog
from .exceptions import (
    DuplicateEmail,
    DuplicateUsername,
    IncompleteCandidate,
    RegistrationError,
)
from .models import Product, User
from .ports import PasswordHasher, ProductRepository, UserRepository
from .registration import RegistrationService

__all__ = [
    "DuplicateEmail",
    "DuplicateUsername",
    "IncompleteCandidate",
    "PasswordHasher",
    "Product",
    "ProductCatalog",
    "ProductRepository",
    "RegistrationError",
    "RegistrationService",
    "User",
    "UserRepository",
]

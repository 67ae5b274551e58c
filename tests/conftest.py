"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- In-memory repositories
- A fast bcrypt hasher
- A registration service wired to both
"""

import pytest

from src.adapters.hashing import BcryptPasswordHasher
from src.adapters.repository.memory import InMemoryProductRepository, InMemoryUserRepository
from src.domain.registration import RegistrationService

# Lowest cost bcrypt accepts; keeps hashing fast in tests
FAST_ROUNDS = 4


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    """Empty in-memory user store."""
    return InMemoryUserRepository()


@pytest.fixture
def product_repository() -> InMemoryProductRepository:
    """Empty in-memory product store."""
    return InMemoryProductRepository()


@pytest.fixture
def hasher() -> BcryptPasswordHasher:
    """bcrypt hasher at minimum cost."""
    return BcryptPasswordHasher(rounds=FAST_ROUNDS)


@pytest.fixture
def service(
    user_repository: InMemoryUserRepository, hasher: BcryptPasswordHasher
) -> RegistrationService:
    """Registration service over the in-memory store."""
    return RegistrationService(repository=user_repository, hasher=hasher)

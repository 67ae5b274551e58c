"""
Shared fixtures for adversarial tests.

Provides a registration service over the in-memory store, whose save()
enforces uniqueness the same way the database constraints do.
"""

import pytest

from src.adapters.hashing import BcryptPasswordHasher
from src.adapters.repository.memory import InMemoryUserRepository
from src.domain.registration import RegistrationService

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial


@pytest.fixture
def repository() -> InMemoryUserRepository:
    """Create an empty store for each test."""
    return InMemoryUserRepository()


@pytest.fixture
def service(repository: InMemoryUserRepository) -> RegistrationService:
    """Registration service at minimum bcrypt cost."""
    return RegistrationService(repository=repository, hasher=BcryptPasswordHasher(rounds=4))

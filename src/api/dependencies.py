"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Depends, Request

from src.adapters.hashing import BcryptPasswordHasher
from src.config.settings import Settings, get_settings
from src.domain.catalog import ProductCatalog
from src.domain.ports import ProductRepository, UserRepository
from src.domain.registration import RegistrationService


def get_user_repository(request: Request) -> UserRepository:
    """
    Get user repository from app state.

    The repository is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.user_repository


def get_product_repository(request: Request) -> ProductRepository:
    """Get product repository from app state."""
    return request.app.state.product_repository


def get_password_hasher(settings: Settings = Depends(get_settings)) -> BcryptPasswordHasher:
    """Create bcrypt hasher with the configured cost factor."""
    return BcryptPasswordHasher(rounds=settings.bcrypt_cost)


def get_registration_service(
    repository: UserRepository = Depends(get_user_repository),
    hasher: BcryptPasswordHasher = Depends(get_password_hasher),
    settings: Settings = Depends(get_settings),
) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the user repository and password hasher for the domain service.
    """
    return RegistrationService(
        repository=repository,
        hasher=hasher,
        require_complete=settings.require_complete_registration,
    )


def get_product_catalog(
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductCatalog:
    """Create product catalog service."""
    return ProductCatalog(repository=repository)

"""
API v1 routes.

Defines REST endpoints for user registration, user lookup and the product catalog.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.api.dependencies import (
    get_product_catalog,
    get_registration_service,
    get_user_repository,
)
from src.api.models import ErrorResponse, ProductResponse, RegisterRequest, UserResponse
from src.domain.catalog import ProductCatalog
from src.domain.exceptions import DuplicateEmail, DuplicateUsername, IncompleteCandidate
from src.domain.models import User
from src.domain.ports import UserRepository
from src.domain.registration import RegistrationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["v1"])


@router.post(
    "/auth/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"model": ErrorResponse, "description": "Username or email already registered"},
        422: {"description": "Validation error"},
    },
    summary="Register a new user",
    description="Create a user account. Username and email must both be unused. "
    "The password is stored as a bcrypt hash.",
)
async def register(
    request_data: RegisterRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> UserResponse:
    """
    Register a new user.

    - **username**: Unique username
    - **email**: Valid, unused email address
    - **password**: Password (minimum 8 characters)

    Returns the created user without its credential.
    """
    candidate = User(
        username=request_data.username,
        email=request_data.email,
        password=request_data.password,
    )
    try:
        user = service.register(candidate)
    except DuplicateUsername:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username is already taken!",
        ) from None
    except DuplicateEmail:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email is already in use!",
        ) from None
    except IncompleteCandidate as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from None
    return UserResponse.model_validate(user)


@router.get(
    "/users/{username}",
    response_model=UserResponse,
    responses={404: {"model": ErrorResponse, "description": "User not found"}},
    summary="Look up a user by username",
)
async def get_user(
    username: str,
    repository: UserRepository = Depends(get_user_repository),
) -> UserResponse:
    """Return the public profile of a registered user."""
    user = repository.find_by_username(username)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return UserResponse.model_validate(user)


@router.get(
    "/products",
    response_model=list[ProductResponse],
    summary="List all products",
)
async def list_products(
    catalog: ProductCatalog = Depends(get_product_catalog),
) -> list[ProductResponse]:
    """Return every product in the catalog."""
    return [ProductResponse.model_validate(p) for p in catalog.list_products()]


@router.get(
    "/products/search",
    response_model=list[ProductResponse],
    summary="Search products by name",
    description="Case-insensitive substring match on product name. "
    "A blank term returns all products.",
)
async def search_products(
    name: str = Query("", max_length=255, description="Substring to match in product names"),
    catalog: ProductCatalog = Depends(get_product_catalog),
) -> list[ProductResponse]:
    """Search the catalog by product name."""
    products = catalog.search(name)
    logger.debug("Product search %r matched %d product(s)", name, len(products))
    return [ProductResponse.model_validate(p) for p in products]

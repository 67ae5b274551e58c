"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from src.adapters.hashing import MAX_PASSWORD_BYTES


class RegisterRequest(BaseModel):
    """Request model for user registration."""

    username: str = Field(..., min_length=1, max_length=255, description="Unique username")
    email: EmailStr
    password: str = Field(
        ...,
        min_length=8,
        description=f"User password (min 8 characters, max {MAX_PASSWORD_BYTES} bytes UTF-8)",
    )

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        """bcrypt only reads the first 72 bytes; longer passwords are rejected."""
        if len(v.encode()) > MAX_PASSWORD_BYTES:
            raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes when UTF-8 encoded")
        return v


class UserResponse(BaseModel):
    """Public view of a user. Never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str


class ProductResponse(BaseModel):
    """Response model for a catalog product."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
    price: Decimal | None = None
    image_url: str | None = None


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str

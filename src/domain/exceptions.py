"""
Domain exceptions - Semantic error types for registration.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class DuplicateUsername(RegistrationError):
    """Username is already taken by an existing user."""

    def __init__(self, username: str) -> None:
        super().__init__(username)
        self.username = username


class DuplicateEmail(RegistrationError):
    """Email is already in use by an existing user."""

    def __init__(self, email: str) -> None:
        super().__init__(email)
        self.email = email


class IncompleteCandidate(RegistrationError):
    """A required candidate field is empty."""

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} must not be empty")
        self.field = field

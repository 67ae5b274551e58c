"""
Registration domain service - Uniqueness checks and credential hashing.

This module contains the core business logic for user registration.

Registration Flow (validate-then-commit)
========================================

1. Username must not already exist   -> DuplicateUsername
2. Email must not already exist      -> DuplicateEmail
3. Plaintext password replaced by its hash
4. Candidate persisted through the repository (exactly one write)

Both rejections happen before any write. The checks above are best-effort:
two concurrent registrations can both pass them. The repository's own
uniqueness constraint is the authoritative guard and raises the same
exceptions from save() when it loses such a race.
"""

import logging
from dataclasses import dataclass

from .exceptions import DuplicateEmail, DuplicateUsername, IncompleteCandidate
from .models import User
from .ports import PasswordHasher, UserRepository

logger = logging.getLogger(__name__)


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    When ``require_complete`` is set, candidates with an empty username,
    email or password are rejected before the repository is touched.
    """

    repository: UserRepository
    hasher: PasswordHasher
    require_complete: bool = False

    def register(self, candidate: User) -> User:
        """
        Register a new user.

        Args:
            candidate: Unpersisted user carrying the plaintext password.
                Its password field is replaced by the hash in place.

        Returns:
            The persisted user with its assigned id and hashed password

        Raises:
            IncompleteCandidate: If require_complete is set and a field is empty
            DuplicateUsername: If the username is already taken
            DuplicateEmail: If the email is already in use
        """
        if self.require_complete:
            self._check_complete(candidate)

        if self.repository.exists_by_username(candidate.username):
            logger.info("Registration rejected: username %s already taken", candidate.username)
            raise DuplicateUsername(candidate.username)

        if self.repository.exists_by_email(candidate.email):
            logger.info("Registration rejected: email already in use for %s", candidate.username)
            raise DuplicateEmail(candidate.email)

        candidate.password = self.hasher.hash(candidate.password)

        user = self.repository.save(candidate)
        logger.info("Registered user %s (id=%s)", user.username, user.id)
        return user

    def _check_complete(self, candidate: User) -> None:
        """Raise IncompleteCandidate for the first blank required field."""
        for field in ("username", "email", "password"):
            value = getattr(candidate, field)
            if value is None or not value.strip():
                raise IncompleteCandidate(field)

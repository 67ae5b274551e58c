"""Hashing adapters - Credential hasher implementations."""

from .bcrypt_hasher import MAX_PASSWORD_BYTES, BcryptPasswordHasher

__all__ = ["MAX_PASSWORD_BYTES", "BcryptPasswordHasher"]

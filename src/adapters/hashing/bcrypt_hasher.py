"""
bcrypt hasher adapter - Implements PasswordHasher protocol.

Hashes are salted per call, so hashing the same password twice yields
different strings; verify() is the only way to compare.
"""

import bcrypt

# bcrypt.gensalt() rejects anything outside 4..31
MIN_ROUNDS = 4
MAX_ROUNDS = 31

# bcrypt ignores (4.x) or rejects (5.x) input past this many bytes
MAX_PASSWORD_BYTES = 72


class BcryptPasswordHasher:
    """
    Implements PasswordHasher protocol via bcrypt.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, rounds: int = 10) -> None:
        """
        Initialize hasher with a bcrypt work factor.

        Args:
            rounds: bcrypt cost factor (4-31)

        Raises:
            ValueError: If rounds is out of bcrypt's accepted range
        """
        if not MIN_ROUNDS <= rounds <= MAX_ROUNDS:
            raise ValueError(f"bcrypt rounds must be between {MIN_ROUNDS} and {MAX_ROUNDS}, got {rounds}")
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, plaintext: str) -> str:
        """
        Hash the password with a fresh salt.

        Raises:
            ValueError: If the password is longer than MAX_PASSWORD_BYTES once encoded
        """
        encoded = plaintext.encode()
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes, got {len(encoded)}")
        return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self._rounds)).decode()

    def verify(self, plaintext: str, hashed: str) -> bool:
        """
        Constant-time comparison of a password against a stored hash.

        Oversized passwords can never have been hashed, so they never match.
        """
        encoded = plaintext.encode()
        if len(encoded) > MAX_PASSWORD_BYTES:
            return False
        return bcrypt.checkpw(encoded, hashed.encode())

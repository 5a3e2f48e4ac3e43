"""
Password hashing with bcrypt.

Each hash gets a fresh salt; the salt and cost are embedded in the digest,
so verification needs nothing but the digest itself. The async variants
run bcrypt on the default thread pool so request handling is not blocked.
"""

import asyncio
import logging

import bcrypt

from .exceptions import PasswordHashError

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 10


class PasswordHasher:
    """One-way adaptive password hashing."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, plaintext: str) -> str:
        """Hash a password with a fresh salt."""
        try:
            salt = bcrypt.gensalt(rounds=self._rounds)
            return bcrypt.hashpw(plaintext.encode("utf-8"), salt).decode("utf-8")
        except (ValueError, MemoryError) as e:
            logger.error(f"Password hashing failed: {type(e).__name__}")
            raise PasswordHashError() from e

    def verify(self, plaintext: str, digest: str) -> bool:
        """Check a password against a digest in constant time."""
        if not plaintext or not digest:
            return False
        try:
            return bcrypt.checkpw(plaintext.encode("utf-8"), digest.encode("utf-8"))
        except ValueError:
            # Malformed digest or over-long password
            return False

    async def hash_async(self, plaintext: str) -> str:
        return await asyncio.to_thread(self.hash, plaintext)

    async def verify_async(self, plaintext: str, digest: str) -> bool:
        return await asyncio.to_thread(self.verify, plaintext, digest)

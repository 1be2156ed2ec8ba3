"""
Password hashing with argon2id.

Each hash embeds its own random salt and cost parameters, so nothing
besides the hash string needs to be stored. Hashing and verifying are
deliberately expensive; the async wrappers run them in a worker thread so
the event loop keeps serving other requests.
"""

import asyncio

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

from shared.config import Settings

# Verified against when the email is unknown, so both signin failure
# paths cost the same.
_TIMING_DUMMY_PASSWORD = "bastion-timing-dummy"


class PasswordService:
    """Argon2id password hashing and verification."""

    def __init__(
        self,
        time_cost: int = 3,
        memory_cost: int = 65536,
        parallelism: int = 4,
    ):
        self._hasher = PasswordHasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
        )
        self._dummy_hash = self._hasher.hash(_TIMING_DUMMY_PASSWORD)

    @classmethod
    def from_settings(cls, settings: Settings) -> "PasswordService":
        return cls(
            time_cost=settings.argon2_time_cost,
            memory_cost=settings.argon2_memory_cost,
            parallelism=settings.argon2_parallelism,
        )

    def hash(self, plain_password: str) -> str:
        """Hash a plain-text password for storage."""
        return self._hasher.hash(plain_password)

    def verify(self, hashed: str, plain_password: str) -> bool:
        """Check a plain password against a stored hash (constant-time compare)."""
        try:
            return self._hasher.verify(hashed, plain_password)
        except (VerificationError, InvalidHashError):
            return False

    async def hash_password(self, plain_password: str) -> str:
        return await asyncio.to_thread(self.hash, plain_password)

    async def verify_password(self, hashed: str, plain_password: str) -> bool:
        return await asyncio.to_thread(self.verify, hashed, plain_password)

    async def burn_verification(self, plain_password: str) -> None:
        """Do the work of a failed verification without a real hash."""
        await asyncio.to_thread(self.verify, self._dummy_hash, plain_password)

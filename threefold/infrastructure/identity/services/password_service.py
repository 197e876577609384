"""Argon2 password hashing with an application-wide pepper."""

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError


class PepperedPasswordHasher:
    """
    Hash and verify passwords with pwdlib's recommended algorithm.

    The pepper is appended to every password before hashing and is never
    stored in the database.
    """

    def __init__(self, pepper: str = "") -> None:
        self.pepper = pepper
        self._hasher = PasswordHash.recommended()
        # Verified against for unknown emails so both paths cost one hash
        self._dummy_hash = self._hasher.hash("threefold-unknown-account")

    def hash_password(self, plain_password: str) -> str:
        return self._hasher.hash(plain_password + self.pepper)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        try:
            return self._hasher.verify(plain_password + self.pepper, hashed_password)
        except UnknownHashError:
            return False

    def get_dummy_hash(self) -> str:
        return self._dummy_hash

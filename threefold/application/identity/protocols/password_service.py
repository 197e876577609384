from typing import Protocol


class PasswordServiceProtocol(Protocol):
    def hash_password(self, plain_password: str) -> str: ...

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """False for a wrong password or a hash this service cannot read."""
        ...

    def get_dummy_hash(self) -> str:
        """A valid hash to verify against when the account does not exist."""
        ...

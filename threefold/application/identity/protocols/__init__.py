from .password_service import PasswordServiceProtocol
from .premium_status_cache import PremiumStatusCacheProtocol
from .token_service import TokenPair, TokenServiceProtocol
from .user_repository import UserRepositoryProtocol

__all__ = [
    "PasswordServiceProtocol",
    "PremiumStatusCacheProtocol",
    "TokenPair",
    "TokenServiceProtocol",
    "UserRepositoryProtocol",
]

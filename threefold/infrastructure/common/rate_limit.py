"""Per-IP request limits for unauthenticated endpoints."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from threefold.config import get_settings

limiter = Limiter(
    key_func=get_remote_address,
    enabled=get_settings().ENVIRONMENT != "test",
)

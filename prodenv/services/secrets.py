"""Secure token generation for placeholder values."""
from __future__ import annotations

import secrets
from enum import Enum

from prodenv.config import get_settings


class TokenKind(str, Enum):
    API_KEY = "api-key"
    PASSWORD = "password"


def token_bytes_for(kind: TokenKind) -> int:
    """Return how many random bytes back a token of the given kind."""
    settings = get_settings()
    if kind is TokenKind.API_KEY:
        return settings.API_KEY_BYTES
    return settings.PASSWORD_BYTES


def generate_secret(kind: TokenKind) -> str:
    """Generate a URL-safe token without ``=`` padding.

    ``secrets.token_urlsafe`` draws from the OS CSPRNG and strips padding, so the
    result can be embedded unquoted in a ``KEY=VALUE`` line.
    """
    return secrets.token_urlsafe(token_bytes_for(TokenKind(kind)))

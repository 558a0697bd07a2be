"""Token issuing and verification."""

from auth.errors import (
    ConfigurationError,
    ExpiredTokenError,
    InvalidTokenError,
    PayloadConstructionError,
    TokenError,
)
from auth.factory import TokenType, create_token_maker, issue_access_token
from auth.jwt import JWTMaker
from auth.maker import Maker
from auth.paseto import PasetoMaker
from auth.schemas import Payload, new_payload

__all__ = [
    "ConfigurationError",
    "ExpiredTokenError",
    "InvalidTokenError",
    "JWTMaker",
    "Maker",
    "PasetoMaker",
    "Payload",
    "PayloadConstructionError",
    "TokenError",
    "TokenType",
    "create_token_maker",
    "issue_access_token",
    "new_payload",
]

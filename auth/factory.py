"""Build the configured token maker."""

import enum
import logging

import config
from auth.jwt import JWTMaker
from auth.maker import Maker
from auth.paseto import PasetoMaker
from auth.schemas import Payload

logger = logging.getLogger(__name__)


class TokenType(str, enum.Enum):
    """Supported token formats."""

    JWT = "jwt"
    PASETO = "paseto"


def create_token_maker(settings: config.Settings | None = None) -> Maker:
    """
    Create the token maker selected by configuration.

    Args:
        settings: Settings to read TOKEN_TYPE and TOKEN_SYMMETRIC_KEY from
            (default: global settings)

    Returns:
        JWTMaker or PasetoMaker

    Raises:
        ConfigurationError: If the key does not fit the selected format
    """
    settings = settings or config.settings
    token_type = TokenType(settings.TOKEN_TYPE)

    if token_type is TokenType.JWT:
        maker: Maker = JWTMaker(settings.TOKEN_SYMMETRIC_KEY)
    else:
        maker = PasetoMaker(settings.TOKEN_SYMMETRIC_KEY)

    logger.info("Using %s token maker", token_type.value)
    return maker


def issue_access_token(
    maker: Maker,
    username: str,
    role: str,
    settings: config.Settings | None = None,
) -> tuple[str, Payload]:
    """Create an access token valid for ACCESS_TOKEN_DURATION."""
    settings = settings or config.settings
    return maker.create_token(username, role, settings.ACCESS_TOKEN_DURATION)

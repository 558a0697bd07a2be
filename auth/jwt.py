"""JWT token creation and validation."""

import logging
from datetime import timedelta

from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTError
from pydantic import ValidationError

from auth.errors import ConfigurationError, ExpiredTokenError, InvalidTokenError
from auth.schemas import Payload, new_payload

logger = logging.getLogger(__name__)

MIN_SECRET_KEY_SIZE = 32
ALGORITHM = "HS256"


class JWTMaker:
    """
    JSON Web Token maker.

    Claims are readable by anyone holding the token; an HS256 signature
    protects them from modification.
    """

    def __init__(self, secret_key: str):
        if len(secret_key.encode("utf-8")) < MIN_SECRET_KEY_SIZE:
            raise ConfigurationError(
                f"invalid key size: must be at least {MIN_SECRET_KEY_SIZE} bytes"
            )
        self._secret_key = secret_key

    def create_token(self, username: str, role: str, duration: timedelta) -> tuple[str, Payload]:
        """
        Create a signed token for a username and role.

        Args:
            username: Identity asserted by the token
            role: Role of the identity
            duration: Validity window starting now

        Returns:
            Encoded JWT string and the payload it carries

        Raises:
            PayloadConstructionError: If the payload cannot be built
        """
        payload = new_payload(username, role, duration)

        claims = payload.to_claims()
        # Registered claims so standard JWT parsers can check the window too
        claims["iat"] = int(payload.issued_at.timestamp())
        claims["exp"] = int(payload.expired_at.timestamp())

        token = jwt.encode(claims, self._secret_key, algorithm=ALGORITHM)
        return token, payload

    def verify_token(self, token: str) -> Payload:
        """
        Decode and validate a signed token.

        Only HS256 is accepted; a token declaring any other algorithm is
        rejected before its claims are read.

        Args:
            token: JWT token string

        Returns:
            Payload with decoded claims

        Raises:
            ExpiredTokenError: If the token is authentic but expired
            InvalidTokenError: For any other failure
        """
        try:
            claims = jwt.decode(token, self._secret_key, algorithms=[ALGORITHM])
        except ExpiredSignatureError as e:
            raise ExpiredTokenError() from e
        except JWTError as e:
            logger.debug("JWT rejected: %s", type(e).__name__)
            raise InvalidTokenError() from e

        try:
            payload = Payload.model_validate(claims)
        except ValidationError as e:
            logger.debug("JWT claims do not match payload schema")
            raise InvalidTokenError() from e

        # exp only has second resolution
        payload.valid()
        return payload

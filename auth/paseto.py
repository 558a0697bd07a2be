"""PASETO token creation and validation."""

import logging
from datetime import timedelta

import pyseto
from pydantic import ValidationError
from pyseto import Key, PysetoError

from auth.errors import ConfigurationError, InvalidTokenError
from auth.schemas import Payload, new_payload

logger = logging.getLogger(__name__)

# XChaCha20-Poly1305 key size used by v2.local
SYMMETRIC_KEY_SIZE = 32


class PasetoMaker:
    """PASETO v2.local token maker; claims are encrypted and authenticated."""

    def __init__(self, symmetric_key: str):
        key_bytes = symmetric_key.encode("utf-8")
        if len(key_bytes) != SYMMETRIC_KEY_SIZE:
            raise ConfigurationError(
                f"invalid key size: must be exactly {SYMMETRIC_KEY_SIZE} bytes"
            )
        self._key = Key.new(version=2, purpose="local", key=key_bytes)

    def create_token(self, username: str, role: str, duration: timedelta) -> tuple[str, Payload]:
        """
        Create an encrypted token for a username and role.

        Args:
            username: Identity asserted by the token
            role: Role of the identity
            duration: Validity window starting now

        Returns:
            PASETO token string and the payload it carries

        Raises:
            PayloadConstructionError: If the payload cannot be built
        """
        payload = new_payload(username, role, duration)
        token = pyseto.encode(self._key, payload.model_dump_json().encode("utf-8"))
        return token.decode("utf-8"), payload

    def verify_token(self, token: str) -> Payload:
        """
        Decrypt and validate a token.

        Decryption failures are not told apart: a wrong key, a modified
        token and garbage input all raise InvalidTokenError.

        Raises:
            ExpiredTokenError: If the token decrypts but has expired
            InvalidTokenError: For any other failure
        """
        try:
            decoded = pyseto.decode(self._key, token)
        except (PysetoError, ValueError) as e:
            logger.debug("PASETO rejected: %s", type(e).__name__)
            raise InvalidTokenError() from e

        try:
            payload = Payload.model_validate_json(decoded.payload)
        except ValidationError as e:
            logger.debug("PASETO claims do not match payload schema")
            raise InvalidTokenError() from e

        payload.valid()
        return payload

"""Token payload schemas."""

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, field_validator

from auth.errors import ExpiredTokenError, PayloadConstructionError


class Payload(BaseModel):
    """Claims carried by every token, whatever its format."""

    model_config = ConfigDict(frozen=True)

    id: UUID  # random per token
    username: str
    role: str
    issued_at: datetime
    expired_at: datetime

    @field_validator("issued_at", "expired_at")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        # Tokens from other issuers may carry naive timestamps
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        try:
            return value.astimezone(UTC)
        except OverflowError as e:
            raise ValueError("timestamp out of range") from e

    def is_valid(self) -> bool:
        """Check if the payload has not expired yet."""
        return datetime.now(UTC) <= self.expired_at

    def valid(self) -> None:
        """
        Raise if the payload has expired.

        Raises:
            ExpiredTokenError: If the current time is past expired_at
        """
        if not self.is_valid():
            raise ExpiredTokenError()

    def to_claims(self) -> dict[str, Any]:
        """Return the payload as a JSON-compatible claims dict."""
        return self.model_dump(mode="json")


def new_payload(username: str, role: str, duration: timedelta) -> Payload:
    """
    Create a payload for a new token.

    Args:
        username: Identity asserted by the token
        role: Role of the identity
        duration: How long the token stays valid; zero or negative
            durations produce an already-expired payload

    Returns:
        Payload with a fresh random id

    Raises:
        PayloadConstructionError: If no random id can be generated
    """
    try:
        token_id = uuid4()
    except (NotImplementedError, OSError) as e:
        raise PayloadConstructionError(f"failed to generate token id: {e}") from e

    issued_at = datetime.now(UTC)
    return Payload(
        id=token_id,
        username=username,
        role=role,
        issued_at=issued_at,
        expired_at=issued_at + duration,
    )

"""Token maker interface."""

from datetime import timedelta
from typing import Protocol, runtime_checkable

from auth.schemas import Payload


@runtime_checkable
class Maker(Protocol):
    """Issues and verifies tokens of one format."""

    def create_token(self, username: str, role: str, duration: timedelta) -> tuple[str, Payload]:
        """Create a new token for a username and role, valid for duration."""
        ...

    def verify_token(self, token: str) -> Payload:
        """Check that a token is valid and return its payload."""
        ...

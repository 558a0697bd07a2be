"""Token error types."""


class TokenError(Exception):
    """Base exception for token creation and verification."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class ConfigurationError(TokenError, ValueError):
    """Key material rejected when a maker is constructed."""

    def __init__(self, message: str = "Invalid token configuration"):
        super().__init__("ERR_CONFIGURATION", message)


class InvalidTokenError(TokenError):
    """Token is malformed, tampered with, or was not issued with our key."""

    def __init__(self, message: str = "token is invalid"):
        super().__init__("ERR_INVALID_TOKEN", message)


class ExpiredTokenError(TokenError):
    """Token is authentic but its expiry has passed."""

    def __init__(self, message: str = "token has expired"):
        super().__init__("ERR_EXPIRED_TOKEN", message)


class PayloadConstructionError(TokenError):
    """A fresh payload could not be built."""

    def __init__(self, message: str = "failed to create token payload"):
        super().__init__("ERR_PAYLOAD", message)

"""Pytest configuration and fixtures."""

import pytest

from auth.jwt import JWTMaker
from auth.paseto import PasetoMaker

# Exactly 32 bytes so the same key works for both formats
TEST_KEY = "k3y-for-unit-tests-0123456789abc"
OTHER_KEY = "another-32-byte-key-for-tests-xy"


@pytest.fixture
def secret_key() -> str:
    return TEST_KEY


@pytest.fixture
def other_key() -> str:
    return OTHER_KEY


@pytest.fixture
def jwt_maker() -> JWTMaker:
    """JWT maker using the shared test key."""
    return JWTMaker(TEST_KEY)


@pytest.fixture
def paseto_maker() -> PasetoMaker:
    """PASETO maker using the shared test key."""
    return PasetoMaker(TEST_KEY)


@pytest.fixture(params=[JWTMaker, PasetoMaker], ids=["jwt", "paseto"])
def maker(request):
    """Each maker implementation in turn."""
    return request.param(TEST_KEY)


@pytest.fixture
def tamper():
    """Replace one character of a token, by default one in the middle."""
    def _tamper(token: str, index: int | None = None) -> str:
        if index is None:
            index = len(token) // 2
        replacement = "A" if token[index] != "A" else "B"
        return token[:index] + replacement + token[index + 1:]
    return _tamper

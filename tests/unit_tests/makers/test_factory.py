"""Unit tests for configuration-driven maker selection."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

import config
from auth.errors import ConfigurationError
from auth.factory import TokenType, create_token_maker, issue_access_token
from auth.jwt import JWTMaker
from auth.paseto import PasetoMaker


@pytest.mark.parametrize(
    ("token_type", "expected"),
    [(TokenType.JWT, JWTMaker), (TokenType.PASETO, PasetoMaker)],
)
def test_create_token_maker_by_type(token_type, expected, secret_key):
    settings = config.Settings(TOKEN_TYPE=token_type.value, TOKEN_SYMMETRIC_KEY=secret_key)

    maker = create_token_maker(settings)

    assert isinstance(maker, expected)
    token, _ = maker.create_token("alice", "depositor", timedelta(minutes=1))
    assert maker.verify_token(token).username == "alice"


def test_create_token_maker_defaults_to_global_settings(monkeypatch, secret_key):
    monkeypatch.setattr(config, "settings", config.Settings(TOKEN_TYPE="jwt", TOKEN_SYMMETRIC_KEY=secret_key))

    assert isinstance(create_token_maker(), JWTMaker)


def test_create_token_maker_rejects_short_key():
    settings = config.Settings(TOKEN_TYPE="paseto", TOKEN_SYMMETRIC_KEY="too-short")

    with pytest.raises(ConfigurationError):
        create_token_maker(settings)


def test_default_settings_build_a_maker():
    """Test: The shipped defaults are a usable dev configuration."""
    settings = config.Settings(_env_file=None)

    assert settings.TOKEN_TYPE == "paseto"
    assert settings.ACCESS_TOKEN_DURATION == timedelta(minutes=15)
    assert isinstance(create_token_maker(settings), PasetoMaker)


def test_settings_from_environment(monkeypatch, secret_key):
    monkeypatch.setenv("TOKEN_TYPE", "jwt")
    monkeypatch.setenv("TOKEN_SYMMETRIC_KEY", secret_key)
    monkeypatch.setenv("ACCESS_TOKEN_DURATION", "PT5M")

    settings = config.Settings(_env_file=None)

    assert settings.TOKEN_TYPE == "jwt"
    assert settings.TOKEN_SYMMETRIC_KEY == secret_key
    assert settings.ACCESS_TOKEN_DURATION == timedelta(minutes=5)


def test_settings_reject_unknown_token_type(monkeypatch):
    monkeypatch.setenv("TOKEN_TYPE", "saml")

    with pytest.raises(ValidationError):
        config.Settings(_env_file=None)


def test_issue_access_token_uses_configured_duration(secret_key):
    settings = config.Settings(
        TOKEN_TYPE="jwt",
        TOKEN_SYMMETRIC_KEY=secret_key,
        ACCESS_TOKEN_DURATION=timedelta(minutes=30),
    )
    maker = create_token_maker(settings)

    token, payload = issue_access_token(maker, "alice", "depositor", settings)

    assert payload.expired_at - payload.issued_at == timedelta(minutes=30)
    assert maker.verify_token(token) == payload

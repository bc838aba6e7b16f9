# -*- coding: utf-8 -*-
"""Location: ./tests/unit/oauthgate/oauth2/test_models.py
Copyright 2026
SPDX-License-Identifier: Apache-2.0

Tests for engine configuration and the engine error type.
"""

# Third-Party
import pytest

# First-Party
from oauthgate.config import Settings
from oauthgate.oauth2 import EngineError, OAuthServerConfig, OAuthServerConfigError


def test_defaults():
    cfg = OAuthServerConfig()
    assert cfg.access_token_lifetime == 3600
    assert cfg.refresh_token_lifetime == 1209600
    assert cfg.auth_code_lifetime == 30
    assert cfg.passthrough_errors is False
    assert cfg.continue_after_response is False


def test_client_id_pattern_is_case_insensitive():
    cfg = OAuthServerConfig()
    assert cfg.client_id_pattern.match("My-Client_01")
    assert not cfg.client_id_pattern.match("ab")


def test_with_continue_after_response_copies():
    cfg = OAuthServerConfig(grants=["password"], extra={"realm": "api"})
    forced = cfg.with_continue_after_response()
    assert forced.continue_after_response is True
    assert cfg.continue_after_response is False
    forced.grants.append("refresh_token")
    assert cfg.grants == ["password"]


def test_from_mapping_camel_case_and_extras():
    cfg = OAuthServerConfig.from_mapping({"passthroughErrors": True, "accessTokenLifetime": 60, "grants": ["password"], "realm": "api"})
    assert cfg.passthrough_errors is True
    assert cfg.access_token_lifetime == 60
    assert cfg.grants == ["password"]
    assert cfg.extra == {"realm": "api"}


def test_from_settings():
    settings = Settings(oauth_passthrough_errors=True, oauth_access_token_lifetime=120)
    model = object()
    cfg = OAuthServerConfig.from_settings(settings, model=model, grants=["client_credentials"], realm="api")
    assert cfg.model is model
    assert cfg.passthrough_errors is True
    assert cfg.access_token_lifetime == 120
    assert cfg.grants == ["client_credentials"]
    assert cfg.extra == {"realm": "api"}


def test_null_token_lifetime_allowed():
    assert OAuthServerConfig(access_token_lifetime=None).access_token_lifetime is None


@pytest.mark.parametrize("kwargs", [{"access_token_lifetime": 0}, {"auth_code_lifetime": None}, {"refresh_token_lifetime": -5}])
def test_invalid_lifetimes(kwargs):
    with pytest.raises(OAuthServerConfigError, match="must be a positive integer"):
        OAuthServerConfig(**kwargs)


def test_invalid_client_id_regex():
    with pytest.raises(OAuthServerConfigError, match="Invalid client_id_regex"):
        OAuthServerConfig(client_id_regex="[unclosed")


def test_engine_error_fields():
    err = EngineError(400, "invalid_client", headers={"WWW-Authenticate": "Basic"})
    assert err.error_description is None
    assert err.headers == {"WWW-Authenticate": "Basic"}
    assert str(err) == "invalid_client"
    assert str(EngineError()) == "OAuth engine error"

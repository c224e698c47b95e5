"""
Unit tests for configuration loading.
"""

import pytest

from pusher_client import ConfigurationError, Credentials
from pusher_client.config import load_config, load_env


def test_load_config():
    credentials, options = load_config({
        'pusher': {'app_id': "1", 'key': "k", 'secret': "s", 'base_url': "http://localhost"},
        'other': {},
    })

    assert credentials == Credentials("1", "k", "s")
    assert options == {'base_url': "http://localhost"}


def test_load_config_empty_values_allowed():
    credentials, _ = load_config({'pusher': {'app_id': "", 'key': "", 'secret': ""}})

    assert credentials == Credentials("", "", "")


def test_load_config_missing_section():
    with pytest.raises(ConfigurationError, match='"pusher" was not found'):
        load_config({'other': {}})


def test_load_config_missing_keys():
    with pytest.raises(ConfigurationError, match="key, secret"):
        load_config({'pusher': {'app_id': "1"}})


def test_load_env():
    credentials, options = load_env({
        'PUSHER_APP_ID': "1",
        'PUSHER_KEY': "k",
        'PUSHER_SECRET': "s",
        'PUSHER_TIMEOUT': "2.5",
    })

    assert credentials == Credentials("1", "k", "s")
    assert options == {'timeout': 2.5}


def test_load_env_missing():
    with pytest.raises(ConfigurationError, match="PUSHER_SECRET"):
        load_env({'PUSHER_APP_ID': "1", 'PUSHER_KEY': "k"})


def test_load_env_invalid_timeout():
    with pytest.raises(ConfigurationError):
        load_env({'PUSHER_APP_ID': "1", 'PUSHER_KEY': "k", 'PUSHER_SECRET': "s", 'PUSHER_TIMEOUT': "soon"})


def test_credentials_repr_hides_secret():
    assert "s3cr3t" not in repr(Credentials("1", "k", "s3cr3t"))


def test_load_config_string_timeout():
    _, options = load_config({'pusher': {'app_id': "1", 'key': "k", 'secret': "s", 'timeout': "7"}})

    assert options == {'timeout': 7.0}


def test_load_config_invalid_timeout():
    with pytest.raises(ConfigurationError, match="timeout must be a number"):
        load_config({'pusher': {'app_id': "1", 'key': "k", 'secret': "s", 'timeout': None}})

"""Test client configuration loading."""

import pytest

from config.settings import DEFAULT_HOST, DEFAULT_PORT, ClientConfig, Config
from utils.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("CLUSTER_SERVER_HOST", raising=False)
    monkeypatch.delenv("CLUSTER_SERVER_PORT", raising=False)


def test_defaults():
    """Test defaults apply without environment or arguments."""
    config = Config().load_client_config()

    assert config == ClientConfig(host=DEFAULT_HOST, port=DEFAULT_PORT)


def test_environment(monkeypatch):
    """Test environment variables set the server address."""
    monkeypatch.setenv("CLUSTER_SERVER_HOST", "miner.example")
    monkeypatch.setenv("CLUSTER_SERVER_PORT", "9000")

    loader = Config()
    config = loader.load_client_config()

    assert config.host == "miner.example"
    assert config.port == 9000
    assert loader.client is config


def test_arguments_override_environment(monkeypatch):
    """Test command line values take precedence."""
    monkeypatch.setenv("CLUSTER_SERVER_HOST", "miner.example")
    monkeypatch.setenv("CLUSTER_SERVER_PORT", "9000")

    config = Config().load_client_config("127.0.0.1", "8081")

    assert config == ClientConfig(host="127.0.0.1", port=8081)


@pytest.mark.parametrize("port", ["http", "0", "65536"])
def test_invalid_port(port):
    """Test malformed and out-of-range ports are rejected."""
    with pytest.raises(ConfigurationError):
        Config().load_client_config("localhost", port)


def test_empty_host():
    """Test an empty host is rejected."""
    with pytest.raises(ConfigurationError):
        Config().load_client_config("", "8080")


def test_configuration_error_is_value_error():
    """Test configuration errors are still ValueErrors."""
    with pytest.raises(ValueError):
        ClientConfig(host="localhost", port=True).validate()

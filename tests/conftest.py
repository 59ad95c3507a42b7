"""Pytest configuration shared by the API and CLI tests."""

import pytest
from fastapi.testclient import TestClient
from typer.testing import CliRunner

from morse_translator.api.app import create_app
from morse_translator.config import ServerConfig


@pytest.fixture
def config() -> ServerConfig:
    """Default server configuration, independent of the environment."""
    return ServerConfig()


@pytest.fixture
def client(config: ServerConfig) -> TestClient:
    """HTTP client for an app built with the default configuration."""
    return TestClient(create_app(config))


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()

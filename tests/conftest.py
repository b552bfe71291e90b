"""Shared fixtures for unit and integration tests."""

from __future__ import annotations

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Force test-safe settings before any module builds Settings()
os.environ.setdefault("GIVETH_MONGODB_URL", "mongodb://localhost:27017/giveth-testkit")
os.environ.setdefault("GIVETH_MONGODB_SERVER_SELECTION_TIMEOUT_MS", "1000")

from giveth_testkit.settings import Settings  # noqa: E402


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: needs a reachable MongoDB")


@pytest.fixture(scope="session")
def settings():
    return Settings()


@pytest.fixture
def jwt_settings():
    """Settings with a non-default JWT block, for checking config is honoured."""
    return Settings(
        auth_secret="another-secret-key-for-jwt-signing-in-tests",
        jwt_audience="https://giveth.io",
        jwt_issuer="giveth-tests",
        jwt_subject="e2e",
        jwt_expires_in=60,
        jwt_header={"typ": "access", "kid": "test-key"},
    )

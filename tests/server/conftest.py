"""Pytest fixtures for server module testing."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from server.main import app

_ENV_VARIABLES = ("GPSINFO_SENTENCES", "GPSINFO_CHECKSUM_CONTROL", "GPSINFO_MATCH_BY_SUM")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARIABLES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def client(clean_environment: None) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client

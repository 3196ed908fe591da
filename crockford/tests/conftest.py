import pytest
from fastapi.testclient import TestClient

from crockford.main import app
from crockford.utils import encoding


@pytest.fixture
def client():
    """Creates a test client for the id service."""
    return TestClient(app)


@pytest.fixture
def broken_entropy(monkeypatch):
    """Makes the OS random source fail."""
    def token_bytes(n=None):
        raise OSError("getrandom unavailable")

    monkeypatch.setattr(encoding.secrets, "token_bytes", token_bytes)


@pytest.fixture
def sample_timestamps():
    """Provides Unix timestamps in ascending order within 40 bits."""
    return [0, 1, 31, 32, 255, 256, 65535, 1700000000, 1700000001, 2**32, 2**40 - 1]

import pytest
from fastapi.testclient import TestClient

from realip.main import app
from realip.services.private_ranges import PrivateRangeTable

@pytest.fixture
def client() -> TestClient:
    return TestClient(app)

@pytest.fixture
def table() -> PrivateRangeTable:
    return PrivateRangeTable()

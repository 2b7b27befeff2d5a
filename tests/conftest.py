import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app

API_KEY = "test-key"


@pytest.fixture
def product_app():
    # fresh app per test, so every test starts from the seeded catalogue
    return create_app(Settings(api_key=API_KEY))


@pytest.fixture
def client(product_app):
    return TestClient(product_app)


@pytest.fixture
def auth():
    return {"x-api-key": API_KEY}

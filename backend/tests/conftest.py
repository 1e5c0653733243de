import pytest
from fastapi.testclient import TestClient

from app.core.config import get_settings
from app.main import app
from app.repositories.account_repository import AccountRepository, get_account_repository


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "Data" / "accounts.json"


@pytest.fixture
def repository(data_file):
    return AccountRepository(data_file)


@pytest.fixture
def client(data_file):
    app.dependency_overrides[get_account_repository] = lambda: AccountRepository(data_file)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

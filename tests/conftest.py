import pytest
from fastapi.testclient import TestClient

from portfolio_api.logger import LoggingConfig
from portfolio_api.main import create_app
from portfolio_api.storage.memory_storage import MemoryStorage


@pytest.fixture(autouse=True)
def quiet_logs():
    LoggingConfig().enabled = False
    yield
    LoggingConfig.reset()


@pytest.fixture
def storage():
    """기본 카탈로그가 적재된 저장소"""
    return MemoryStorage()


@pytest.fixture
def empty_storage():
    """답변이 하나도 없는 저장소"""
    return MemoryStorage(catalog=None)


@pytest.fixture
def client(storage):
    return TestClient(create_app(storage))


@pytest.fixture
def empty_client(empty_storage):
    return TestClient(create_app(empty_storage))

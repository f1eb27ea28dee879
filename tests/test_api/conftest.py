from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_rate_service, get_repository
from api.main import app
from infrastructure.persistence.repositories.transaction import InMemoryTransactionRepository


@pytest.fixture
def repository():
    return InMemoryTransactionRepository()


@pytest.fixture
def mock_rate_service():
    service = MagicMock()
    service.get_rate = AsyncMock(return_value=None)
    return service


@pytest.fixture
def client(repository, mock_rate_service):
    # Override the real dependencies so no startup wiring is needed
    app.dependency_overrides[get_repository] = lambda: repository
    app.dependency_overrides[get_rate_service] = lambda: mock_rate_service
    client = TestClient(app, raise_server_exceptions=False)
    yield client
    app.dependency_overrides.clear()

"""Fixtures for HTTP tests."""

import pytest
from fastapi.testclient import TestClient

from infrastructure.config import Settings, get_settings
from presentation.api.v1.dependencies import get_application_repository
from presentation.app import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        upload_dir=str(tmp_path / "uploads"),
        log_format="text",
        max_upload_size_bytes=1024,
    )


@pytest.fixture
def client(settings, repository):
    """Test client wired to the in-memory repository, without a database."""
    app = create_app(settings, with_lifespan=False)
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_application_repository] = lambda: repository

    with TestClient(app) as test_client:
        yield test_client

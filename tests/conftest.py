# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides a mocked UserService and handler
# - Provides a TestClient with the service dependency overridden
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_user_service
from app.main import app
from core.handlers.users import UsersHandler
from core.services.user_service import UserService


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def sample_user():
    """Sample user row as returned by the service."""
    return {
        "id": "550e8400-e29b-41d4-a716-446655440000",
        "name": "Ann",
        "email": "a@x.com",
        "created_at": "2024-01-15T10:00:00+00:00",
        "updated_at": "2024-01-15T10:00:00+00:00",
    }


@pytest.fixture
def mock_service(sample_user):
    """
    UserService mock with happy-path return values.

    Email is free and every write succeeds.
    """
    service = AsyncMock(spec=UserService)
    service.get_users.return_value = [sample_user]
    service.get_user.return_value = sample_user
    service.prevent_same_email.return_value = False
    service.create_user.return_value = True
    service.update_user.return_value = True
    service.check_old_password.return_value = True
    service.delete_user.return_value = True
    return service


@pytest.fixture
def handler(mock_service):
    """UsersHandler around the mocked service."""
    return UsersHandler(mock_service)


@pytest.fixture
def client(mock_service):
    """TestClient whose user service is the mock."""
    app.dependency_overrides[get_user_service] = lambda: mock_service
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()

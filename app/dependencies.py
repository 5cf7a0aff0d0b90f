# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# Tests swap the service with:
#   app.dependency_overrides[get_user_service] = lambda: fake_service
# =============================================================================

from typing import Annotated

from fastapi import Depends

from core.handlers.users import UsersHandler
from core.services.user_service import UserService


def get_user_service() -> UserService:
    """Get the user storage service."""
    return UserService()


def get_users_handler(
    service: Annotated[UserService, Depends(get_user_service)],
) -> UsersHandler:
    """Build the user handlers around the injected service."""
    return UsersHandler(service)


# Type alias for dependency injection
UsersHandlerDep = Annotated[UsersHandler, Depends(get_users_handler)]

# =============================================================================
# app/routers/users.py - User CRUD Endpoints
# =============================================================================
# Thin HTTP layer over UsersHandler. Request bodies are validated by the
# models in core.models.user before these functions run; every business
# failure is raised by the handler and rendered by app.exceptions.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path

from app.dependencies import UsersHandlerDep
from core.models.user import (
    ChangePasswordRequest,
    UserCreateRequest,
    UserCreateResponse,
    UserIdResponse,
    UserResponse,
    UserUpdateRequest,
)

router = APIRouter()

UserIdPath = Annotated[str, Path(description="User ID")]


@router.get("", response_model=list[UserResponse])
async def list_users(handler: UsersHandlerDep):
    """List all users."""
    return await handler.list_users()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: UserIdPath, handler: UsersHandlerDep):
    """
    Get a user by ID.

    Returns 422 with "Unknown user" if the ID doesn't exist.
    """
    return await handler.get_user(user_id)


@router.post("", response_model=UserCreateResponse)
async def create_user(request: UserCreateRequest, handler: UsersHandlerDep):
    """
    Create a user.

    Fails with 422 if the passwords differ, the email is taken,
    or the write fails.
    """
    return await handler.create_user(request)


@router.put("/{user_id}", response_model=UserIdResponse)
async def update_user(
    user_id: UserIdPath,
    request: UserUpdateRequest,
    handler: UsersHandlerDep,
):
    """Update a user's name and email."""
    return await handler.update_user(user_id, request)


@router.api_route(
    "/{user_id}/password",
    methods=["PATCH", "POST"],
    response_model=UserIdResponse,
)
async def change_password(
    user_id: UserIdPath,
    request: ChangePasswordRequest,
    handler: UsersHandlerDep,
):
    """
    Change a user's password.

    The new password must differ from the old one and match its
    confirmation. The response never contains password values.
    """
    return await handler.change_password(user_id, request)


@router.delete("/{user_id}", response_model=UserIdResponse)
async def delete_user(user_id: UserIdPath, handler: UsersHandlerDep):
    """Delete a user."""
    return await handler.delete_user(user_id)

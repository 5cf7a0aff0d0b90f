# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - user.py: User account request/response schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .user import (
    ChangePasswordRequest,
    UserCreateRequest,
    UserCreateResponse,
    UserIdResponse,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "ChangePasswordRequest",
    "UserCreateRequest",
    "UserCreateResponse",
    "UserIdResponse",
    "UserResponse",
    "UserUpdateRequest",
]

# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the API contract for user account operations:
# - UserCreateRequest: Body for creating a user
# - UserUpdateRequest: Body for updating name/email
# - ChangePasswordRequest: Body for changing a password
# - UserResponse / UserCreateResponse / UserIdResponse: Response shapes
#
# Field constraints are checked by FastAPI before any handler runs.
# Passwords never appear in a response model.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 100
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 32

# bcrypt only looks at the first 72 bytes
PASSWORD_MAX_BYTES = 72


def _password_field(description: str):
    return Field(
        ...,
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
        description=description,
    )


def _check_password_bytes(value: str) -> str:
    if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValueError(f"must be at most {PASSWORD_MAX_BYTES} bytes when UTF-8 encoded")
    return value


def _normalize_email(value: str) -> str:
    # Emails are stored and compared lowercased
    return value.lower()


# =============================================================================
# Request Models
# =============================================================================

class UserCreateRequest(BaseModel):
    """
    Schema for creating a user.

    Example:
        {
            "name": "Ann",
            "email": "a@x.com",
            "password": "secret1",
            "confirm_password": "secret1"
        }
    """

    name: str = Field(
        ...,
        min_length=NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
        description="Display name",
    )
    email: EmailStr = Field(..., description="Unique email address")
    password: str = _password_field("Plain-text password")
    confirm_password: str = _password_field("Must equal password")

    @field_validator("password", "confirm_password")
    @classmethod
    def check_password_bytes(cls, value: str) -> str:
        return _check_password_bytes(value)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return _normalize_email(value)

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Ann",
                "email": "a@x.com",
                "password": "secret1",
                "confirm_password": "secret1",
            }
        }
    }


class UserUpdateRequest(BaseModel):
    """Schema for updating a user's name and email."""

    name: str = Field(
        ...,
        min_length=NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
        description="Display name",
    )
    email: EmailStr = Field(..., description="Unique email address")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return _normalize_email(value)


class ChangePasswordRequest(BaseModel):
    """
    Schema for changing a password.

    The new password must differ from the old one and be typed twice.
    Those rules are checked by the handler, not here.
    """

    old_password: str = _password_field("Current password")
    new_password: str = _password_field("Replacement password")
    confirm_new_password: str = _password_field("Must equal new_password")

    @field_validator("old_password", "new_password", "confirm_new_password")
    @classmethod
    def check_password_bytes(cls, value: str) -> str:
        return _check_password_bytes(value)


# =============================================================================
# Response Models
# =============================================================================

class UserResponse(BaseModel):
    """Public view of a user account."""

    id: str
    name: str
    email: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserCreateResponse(BaseModel):
    """Returned after a user is created. The password is deliberately omitted."""

    name: str
    email: str


class UserIdResponse(BaseModel):
    """Returned after update, change-password and delete."""

    id: str

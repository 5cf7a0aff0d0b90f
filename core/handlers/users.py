# =============================================================================
# core/handlers/users.py - User Request Handlers
# =============================================================================
# One async method per user operation. Each method runs its business rules
# in order, stops at the first failure, calls the injected UserService and
# returns the response body. Failures are raised as AccountsException
# subclasses and turned into JSON by the app's exception handlers.
#
# Usage:
#   handler = UsersHandler(UserService())
#   body = await handler.create_user(request)
# =============================================================================

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from app.exceptions import (
    AccountsException,
    EmailAlreadyTakenError,
    InternalError,
    InvalidPasswordError,
    UnprocessableEntityError,
)
from core.models.user import ChangePasswordRequest, UserCreateRequest, UserUpdateRequest
from core.services.user_service import UserService

logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT")


# =============================================================================
# Business Rules
# =============================================================================

@dataclass(frozen=True)
class Rule(Generic[RequestT]):
    """
    A single business rule.

    `violated` returns True when the request breaks the rule;
    `error` builds the exception to raise in that case.
    """
    name: str
    violated: Callable[[RequestT], bool]
    error: Callable[[], AccountsException]


def enforce_rules(rules: list[Rule[RequestT]], request: RequestT) -> None:
    """Raise the error of the first violated rule, in list order."""
    for rule in rules:
        if rule.violated(request):
            logger.info(f"Request rejected by rule: {rule.name}")
            raise rule.error()


CREATE_USER_RULES: list[Rule[UserCreateRequest]] = [
    Rule(
        name="password_confirmed",
        violated=lambda r: r.password != r.confirm_password,
        error=lambda: InvalidPasswordError(
            "Password and Confirm Password are different",
            suggestion="Type the same value in password and confirm_password",
        ),
    ),
]

CHANGE_PASSWORD_RULES: list[Rule[ChangePasswordRequest]] = [
    Rule(
        name="new_password_differs",
        violated=lambda r: r.new_password == r.old_password,
        error=lambda: InvalidPasswordError(
            "New Password cannot be the same as the old password",
            suggestion="Choose a password you haven't used for this account",
        ),
    ),
    Rule(
        name="new_password_confirmed",
        violated=lambda r: r.new_password != r.confirm_new_password,
        error=lambda: InvalidPasswordError(
            "New Password and Confirm New Password didn't match",
            suggestion="Type the same value in new_password and confirm_new_password",
        ),
    ),
]


# =============================================================================
# Handlers
# =============================================================================

class UsersHandler:
    """
    Request handlers for user accounts.

    Args:
        service: Storage collaborator (UserService or a test double)
    """

    def __init__(self, service: UserService):
        self.service = service

    async def _ensure_email_free(self, email: str, exclude_id: str | None = None) -> None:
        taken = await self.service.prevent_same_email(email, exclude_id=exclude_id)

        # Only a real bool is an answer; anything else is a broken lookup
        if not isinstance(taken, bool):
            logger.error(f"Email uniqueness check returned {taken!r}")
            raise InternalError("Could not verify that the email is available")

        if taken:
            raise EmailAlreadyTakenError(email)

    async def list_users(self) -> list[dict[str, Any]]:
        return await self.service.get_users()

    async def get_user(self, user_id: str) -> dict[str, Any]:
        user = await self.service.get_user(user_id)
        if not user:
            raise UnprocessableEntityError("Unknown user", details={"user_id": user_id})
        return user

    async def create_user(self, request: UserCreateRequest) -> dict[str, Any]:
        """
        Create a user.

        Order of checks:
        1. password == confirm_password
        2. email not taken
        3. service write succeeded
        """
        enforce_rules(CREATE_USER_RULES, request)
        await self._ensure_email_free(request.email)

        success = await self.service.create_user(request.name, request.email, request.password)
        if not success:
            raise UnprocessableEntityError("Failed to create user")

        return {"name": request.name, "email": request.email}

    async def update_user(self, user_id: str, request: UserUpdateRequest) -> dict[str, Any]:
        """
        Update a user's name and email.

        The user's own current email doesn't count as taken.
        """
        await self._ensure_email_free(request.email, exclude_id=user_id)

        success = await self.service.update_user(user_id, request.name, request.email)
        if not success:
            raise UnprocessableEntityError(
                "Failed to update user", details={"user_id": user_id}
            )

        return {"id": user_id}

    async def change_password(self, user_id: str, request: ChangePasswordRequest) -> dict[str, Any]:
        """
        Change a user's password.

        The password rules run before the old password is checked, so a
        request that breaks them never reaches the service. The response
        only echoes the id.
        """
        enforce_rules(CHANGE_PASSWORD_RULES, request)

        success = await self.service.check_old_password(
            user_id, request.old_password, request.new_password
        )
        if not success:
            raise UnprocessableEntityError(
                "Failed to change password", details={"user_id": user_id}
            )

        return {"id": user_id}

    async def delete_user(self, user_id: str) -> dict[str, Any]:
        success = await self.service.delete_user(user_id)
        if not success:
            raise UnprocessableEntityError(
                "Failed to delete user", details={"user_id": user_id}
            )
        return {"id": user_id}

# =============================================================================
# core/services/user_service.py - User Persistence Service
# =============================================================================
# The collaborator behind the user handlers. Wraps the Supabase users table
# and bcrypt hashing behind a small async interface whose write operations
# report success as a plain bool.
# =============================================================================

import asyncio
import logging
from typing import Any
from uuid import UUID

from lib.passwords import hash_password, verify_password
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)


class UserService:
    """
    Service for user account storage.

    Read methods return dicts with public columns only. Write methods
    return True on success and False when nothing was written (unknown id,
    wrong password, lost an email race). Storage errors raise
    SupabaseClientError.
    """

    async def get_users(self) -> list[dict[str, Any]]:
        """List every user."""
        return SupabaseClient.fetch_users()

    async def get_user(self, user_id: str | UUID) -> dict[str, Any] | None:
        """Fetch one user, or None if the id is unknown."""
        return SupabaseClient.fetch_user(user_id)

    async def prevent_same_email(
        self,
        email: str,
        exclude_id: str | UUID | None = None,
    ) -> bool:
        """
        Check whether an email is already in use.

        Args:
            email: Email address to check
            exclude_id: User whose own record should not count (for updates)

        Returns:
            True if another user has the email, False if it is free
        """
        return SupabaseClient.email_exists(email, exclude_id=exclude_id)

    async def create_user(self, name: str, email: str, password: str) -> bool:
        """Hash the password and insert a new user."""
        password_hash = await asyncio.to_thread(hash_password, password)
        user = SupabaseClient.insert_user(
            name=name,
            email=email,
            password_hash=password_hash,
        )
        if user is None:
            return False

        logger.info(f"Created user: {user.get('id')}")
        return True

    async def update_user(self, user_id: str | UUID, name: str, email: str) -> bool:
        """Change a user's name and email."""
        updated = SupabaseClient.update_user(user_id, {"name": name, "email": email})
        if updated:
            logger.info(f"Updated user: {user_id}")
        return updated

    async def check_old_password(
        self,
        user_id: str | UUID,
        old_password: str,
        new_password: str,
    ) -> bool:
        """
        Verify the current password, then store the new one.

        Returns:
            False if the user doesn't exist or old_password is wrong,
            True once the new hash is written
        """
        user = SupabaseClient.fetch_user(user_id, include_password_hash=True)
        if not user:
            return False

        matches = await asyncio.to_thread(verify_password, old_password, user.get("password_hash"))
        if not matches:
            logger.info(f"Old password mismatch for user: {user_id}")
            return False

        new_hash = await asyncio.to_thread(hash_password, new_password)
        changed = SupabaseClient.update_user(user_id, {"password_hash": new_hash})
        if changed:
            logger.info(f"Changed password for user: {user_id}")
        return changed

    async def delete_user(self, user_id: str | UUID) -> bool:
        """Delete a user."""
        deleted = SupabaseClient.delete_user(user_id)
        if deleted:
            logger.info(f"Deleted user: {user_id}")
        return deleted

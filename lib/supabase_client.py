# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for Supabase database operations.
# It implements the singleton pattern to reuse a single client connection
# and provides specialized methods for the users table:
# - Listing and fetching user accounts (public columns only)
# - Email lookups for uniqueness checks
# - Insert, update and delete of user rows
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   user = SupabaseClient.fetch_user(user_id)
# =============================================================================

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from supabase import create_client, Client

from app.config import settings

# Set up logging for this module
logger = logging.getLogger(__name__)

# Columns safe to return to API clients (never the password hash)
PUBLIC_USER_COLUMNS = "id, name, email, created_at, updated_at"

# PostgREST code for "no rows" on .single()
NO_ROWS_CODE = "PGRST116"

# Postgres code for malformed input (e.g. an id that isn't a UUID)
INVALID_TEXT_REPRESENTATION_CODE = "22P02"

# Postgres code for a unique index violation (users.email)
UNIQUE_VIOLATION_CODE = "23505"


def _matches_no_row(error: Exception) -> bool:
    """True if the error means the id can't match any row."""
    message = str(error)
    return NO_ROWS_CODE in message or INVALID_TEXT_REPRESENTATION_CODE in message


def _is_uuid(value: str | UUID) -> bool:
    if isinstance(value, UUID):
        return True
    try:
        UUID(str(value))
    except ValueError:
        return False
    return True


class SupabaseClientError(Exception):
    """
    Error during Supabase operations.

    Carries a code and an actionable suggestion for the logs.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Typed wrapper for Supabase database operations.

    Implements singleton pattern - one client instance is shared across
    the application. All methods are class methods for easy access without
    instantiation.

    Example:
        users = SupabaseClient.fetch_users()
        user = SupabaseClient.fetch_user("550e8400-...")
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS).
        This is appropriate for server-side operations.

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                ) from e
        return cls._instance

    @classmethod
    def _normalize_uuid(cls, uuid_value: str | UUID) -> str:
        """Convert UUID to string for queries."""
        return str(uuid_value) if isinstance(uuid_value, UUID) else uuid_value

    @classmethod
    def _users(cls):
        return cls.get_client().table(settings.USERS_TABLE)

    # -------------------------------------------------------------------------
    # Read Operations
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_users(cls) -> list[dict[str, Any]]:
        """
        Fetch all users, oldest first.

        Returns:
            List of user dicts with public columns only

        Raises:
            SupabaseClientError: If query fails
        """
        try:
            response = (
                cls._users()
                .select(PUBLIC_USER_COLUMNS)
                .order("created_at")
                .execute()
            )
            return response.data or []

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch users: {e}",
                code="FETCH_USERS_FAILED",
                suggestion=f"Check that the '{settings.USERS_TABLE}' table exists",
            ) from e

    @classmethod
    def fetch_user(
        cls,
        user_id: str | UUID,
        include_password_hash: bool = False,
    ) -> dict[str, Any] | None:
        """
        Fetch a user by ID.

        Args:
            user_id: The user UUID
            include_password_hash: Also select the password_hash column

        Returns:
            User dict, or None if not found

        Raises:
            SupabaseClientError: If query fails
        """
        user_id_str = cls._normalize_uuid(user_id)
        columns = PUBLIC_USER_COLUMNS
        if include_password_hash:
            columns += ", password_hash"

        try:
            response = (
                cls._users()
                .select(columns)
                .eq("id", user_id_str)
                .single()
                .execute()
            )
            return response.data

        except Exception as e:
            if _matches_no_row(e):
                return None
            raise SupabaseClientError(
                message=f"Failed to fetch user: {e}",
                code="FETCH_USER_FAILED",
                details={"user_id": user_id_str}
            ) from e

    @classmethod
    def email_exists(cls, email: str, exclude_id: str | UUID | None = None) -> bool:
        """
        Check whether any user (other than exclude_id) owns the email.

        Args:
            email: Email address to look up
            exclude_id: User ID to ignore (the user being updated)

        Returns:
            True if the email is taken, False otherwise

        Raises:
            SupabaseClientError: If query fails
        """
        try:
            query = (
                cls._users()
                .select("id")
                .eq("email", email.lower())
            )
            # A malformed id matches no row, so there is nothing to exclude
            if exclude_id is not None and _is_uuid(exclude_id):
                query = query.neq("id", cls._normalize_uuid(exclude_id))

            response = query.limit(1).execute()
            return bool(response.data)

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to look up email: {e}",
                suggestion=f"Check that the '{settings.USERS_TABLE}' table exists",
                code="EMAIL_LOOKUP_FAILED",
            ) from e

    # -------------------------------------------------------------------------
    # Write Operations
    # -------------------------------------------------------------------------

    @classmethod
    def insert_user(cls, name: str, email: str, password_hash: str) -> dict[str, Any] | None:
        """
        Insert a new user row.

        Returns:
            Inserted user dict (public columns), or None if nothing was inserted

        Raises:
            SupabaseClientError: If insert fails
        """
        data = {
            "name": name,
            "email": email.lower(),
            "password_hash": password_hash,
        }

        try:
            response = cls._users().insert(data).execute()

        except Exception as e:
            # Lost a race against another insert with the same email
            if UNIQUE_VIOLATION_CODE in str(e):
                logger.warning(f"Insert rejected by unique index for email: {email}")
                return None
            raise SupabaseClientError(
                message=f"Failed to insert user: {e}",
                code="INSERT_USER_FAILED",
                details={"email": email}
            ) from e

        if not response.data:
            return None
        row = response.data[0]
        row.pop("password_hash", None)
        return row

    @classmethod
    def update_user(cls, user_id: str | UUID, fields: dict[str, Any]) -> bool:
        """
        Update columns on a user row.

        Args:
            user_id: The user UUID
            fields: Column -> value mapping

        Returns:
            True if a row was updated, False if no row matched

        Raises:
            SupabaseClientError: If update fails
        """
        user_id_str = cls._normalize_uuid(user_id)

        try:
            response = (
                cls._users()
                .update(fields)
                .eq("id", user_id_str)
                .execute()
            )
            return bool(response.data)

        except Exception as e:
            if _matches_no_row(e) or UNIQUE_VIOLATION_CODE in str(e):
                return False
            raise SupabaseClientError(
                message=f"Failed to update user: {e}",
                code="UPDATE_USER_FAILED",
                details={"user_id": user_id_str, "fields": sorted(fields)}
            ) from e

    @classmethod
    def delete_user(cls, user_id: str | UUID) -> bool:
        """
        Delete a user row.

        Returns:
            True if a row was deleted, False if no row matched

        Raises:
            SupabaseClientError: If delete fails
        """
        user_id_str = cls._normalize_uuid(user_id)

        try:
            response = (
                cls._users()
                .delete()
                .eq("id", user_id_str)
                .execute()
            )
            return bool(response.data)

        except Exception as e:
            if _matches_no_row(e):
                return False
            raise SupabaseClientError(
                message=f"Failed to delete user: {e}",
                code="DELETE_USER_FAILED",
                details={"user_id": user_id_str}
            ) from e

    # -------------------------------------------------------------------------
    # Health
    # -------------------------------------------------------------------------

    @classmethod
    def ping(cls) -> None:
        """
        Run the cheapest possible query against the users table.

        Raises:
            SupabaseClientError: If the table can't be reached
        """
        try:
            cls._users().select("id").limit(1).execute()

        except Exception as e:
            raise SupabaseClientError(
                message=f"Users table unreachable: {e}",
                code="PING_FAILED",
                suggestion="Check SUPABASE_URL, SUPABASE_SERVICE_KEY and USERS_TABLE",
            ) from e

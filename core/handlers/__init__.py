# =============================================================================
# core/handlers/ - Request Handlers
# =============================================================================

from .users import (
    CHANGE_PASSWORD_RULES,
    CREATE_USER_RULES,
    Rule,
    UsersHandler,
    enforce_rules,
)

__all__ = [
    "CHANGE_PASSWORD_RULES",
    "CREATE_USER_RULES",
    "Rule",
    "UsersHandler",
    "enforce_rules",
]

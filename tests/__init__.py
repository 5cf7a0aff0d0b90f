# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Accounts API:
# - test_models.py: Request model validation
# - test_handlers.py: Business rules and error precedence in UsersHandler
# - test_users_api.py: HTTP status codes and bodies through FastAPI
# - test_user_service.py: UserService over a mocked Supabase client
# - test_passwords.py: bcrypt helpers
# - test_exceptions.py: Error serialization
#
# Run tests with: poetry run pytest
# =============================================================================

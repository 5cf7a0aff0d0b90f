# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the user request models to ensure:
# - Valid data is accepted and parsed correctly
# - Invalid data raises ValidationError
#
# Run with: poetry run pytest tests/test_models.py -v
# =============================================================================

import pytest
from pydantic import ValidationError

from core.models import (
    ChangePasswordRequest,
    UserCreateRequest,
    UserCreateResponse,
    UserUpdateRequest,
)


def _create_data(**overrides):
    data = {
        "name": "Ann",
        "email": "a@x.com",
        "password": "secret1",
        "confirm_password": "secret1",
    }
    data.update(overrides)
    return data


# =============================================================================
# Create Request Tests
# =============================================================================

class TestUserCreateRequest:
    """Tests for UserCreateRequest model."""

    def test_valid_create_request(self):
        """Test creating a valid request."""
        request = UserCreateRequest(**_create_data())

        assert request.name == "Ann"
        assert request.email == "a@x.com"
        assert request.password == "secret1"

    def test_mismatched_passwords_pass_shape_validation(self):
        """Password confirmation is a business rule, not a field constraint."""
        request = UserCreateRequest(**_create_data(confirm_password="secret2"))
        assert request.confirm_password == "secret2"

    @pytest.mark.parametrize("name", ["", "x" * 101])
    def test_name_length(self, name):
        """Test that name must be 1-100 characters."""
        with pytest.raises(ValidationError):
            UserCreateRequest(**_create_data(name=name))

    def test_name_boundaries_accepted(self):
        """Test that 1 and 100 character names are accepted."""
        assert UserCreateRequest(**_create_data(name="x")).name == "x"
        assert len(UserCreateRequest(**_create_data(name="x" * 100)).name) == 100

    def test_email_lowercased(self):
        """Test that emails are stored in one case so lookups can't miss."""
        request = UserCreateRequest(**_create_data(email="Ann@X.com"))
        assert request.email == "ann@x.com"

    @pytest.mark.parametrize("email", ["not-an-email", "a@", "@x.com", ""])
    def test_invalid_email(self, email):
        """Test that malformed emails are rejected."""
        with pytest.raises(ValidationError):
            UserCreateRequest(**_create_data(email=email))

    @pytest.mark.parametrize("field", ["password", "confirm_password"])
    @pytest.mark.parametrize("value", ["12345", "x" * 33])
    def test_password_length(self, field, value):
        """Test that password fields must be 6-32 characters."""
        with pytest.raises(ValidationError):
            UserCreateRequest(**_create_data(**{field: value}))

    def test_password_byte_limit(self):
        """Test that 32 four-byte characters exceed the bcrypt byte limit."""
        password = "\U0001F600" * 32
        with pytest.raises(ValidationError) as exc_info:
            UserCreateRequest(**_create_data(password=password, confirm_password=password))

        assert "72 bytes" in str(exc_info.value)

    @pytest.mark.parametrize("missing", ["name", "email", "password", "confirm_password"])
    def test_required_fields(self, missing):
        """Test that every field is required."""
        data = _create_data()
        del data[missing]

        with pytest.raises(ValidationError):
            UserCreateRequest(**data)


# =============================================================================
# Update Request Tests
# =============================================================================

class TestUserUpdateRequest:
    """Tests for UserUpdateRequest model."""

    def test_valid_update_request(self):
        request = UserUpdateRequest(name="Ann B", email="ann@x.com")
        assert request.name == "Ann B"
        assert request.email == "ann@x.com"

    def test_ignores_password_fields(self):
        """Test that password fields aren't part of an update."""
        request = UserUpdateRequest(name="Ann", email="a@x.com", password="secret1")
        assert not hasattr(request, "password")

    def test_email_lowercased(self):
        request = UserUpdateRequest(name="Ann", email="ANN@x.com")
        assert request.email == "ann@x.com"

    def test_invalid_email(self):
        with pytest.raises(ValidationError):
            UserUpdateRequest(name="Ann", email="nope")

    def test_empty_name(self):
        with pytest.raises(ValidationError):
            UserUpdateRequest(name="", email="a@x.com")


# =============================================================================
# Change Password Request Tests
# =============================================================================

class TestChangePasswordRequest:
    """Tests for ChangePasswordRequest model."""

    def test_valid_request(self):
        request = ChangePasswordRequest(
            old_password="secret1",
            new_password="secret2",
            confirm_new_password="secret2",
        )
        assert request.new_password == "secret2"

    @pytest.mark.parametrize("field", ["old_password", "new_password", "confirm_new_password"])
    def test_short_password(self, field):
        data = {
            "old_password": "secret1",
            "new_password": "secret2",
            "confirm_new_password": "secret2",
        }
        data[field] = "123"

        with pytest.raises(ValidationError):
            ChangePasswordRequest(**data)


class TestUserCreateResponse:
    """Tests for UserCreateResponse model."""

    def test_has_no_password_field(self):
        assert "password" not in UserCreateResponse.model_fields

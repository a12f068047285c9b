"""Unit tests for the password change validators."""

# Third Party
import pytest

# Local Modules
from core.validators import (
    validate_password_change_request,
    validate_password_change_form,
)


@pytest.fixture
def valid_fields():
    """A password change request that passes every rule."""
    return {
        "email": "test@example.com",
        "currentPassword": "password123",
        "newPassword": "newpassword123",
        "confirmPassword": "newpassword123",
    }


class TestValidatePasswordChangeRequest:
    """Test cases for the server-side password change validator."""

    @pytest.mark.parametrize(
        "missing",
        ["email", "currentPassword", "newPassword", "confirmPassword"],
    )
    def test_missing_field(self, valid_fields, missing):
        """Test any missing field yields the combined required message."""
        # Arrange
        del valid_fields[missing]

        # Act
        result = validate_password_change_request(valid_fields)

        # Assert
        assert result == "All fields are required."

    def test_all_fields_missing(self):
        """Test an empty request yields the combined required message."""
        # Act
        result = validate_password_change_request({})

        # Assert
        assert result == "All fields are required."

    def test_short_new_password(self, valid_fields):
        """Test a new password under six characters is rejected."""
        # Arrange
        valid_fields["newPassword"] = "12345"
        valid_fields["confirmPassword"] = "12345"

        # Act
        result = validate_password_change_request(valid_fields)

        # Assert
        assert result == "New password must be at least 6 characters."

    def test_length_checked_before_match(self, valid_fields):
        """Test a short, mismatched new password reports the length error."""
        # Arrange
        valid_fields["newPassword"] = "123"
        valid_fields["confirmPassword"] = "456"

        # Act
        result = validate_password_change_request(valid_fields)

        # Assert
        assert result == "New password must be at least 6 characters."

    def test_mismatch(self, valid_fields):
        """Test differing new and confirm passwords are rejected."""
        # Arrange
        valid_fields["confirmPassword"] = "differentpassword123"

        # Act
        result = validate_password_change_request(valid_fields)

        # Assert
        assert result == "New password and confirm password do not match."

    def test_same_as_current(self, valid_fields):
        """Test reusing the current password is rejected."""
        # Arrange
        valid_fields["newPassword"] = "password123"
        valid_fields["confirmPassword"] = "password123"

        # Act
        result = validate_password_change_request(valid_fields)

        # Assert
        assert (
            result == "New password must be different from current password."
        )

    def test_valid_request(self, valid_fields):
        """Test a valid request passes validation."""
        # Act
        result = validate_password_change_request(valid_fields)

        # Assert
        assert result is None


class TestValidatePasswordChangeForm:
    """Test cases for the client-side password change validator."""

    def test_empty_form_reports_every_field(self):
        """Test an empty form reports all four required messages."""
        # Act
        errors = validate_password_change_form(
            {
                "email": "",
                "currentPassword": "",
                "newPassword": "",
                "confirmPassword": "",
            }
        )

        # Assert
        assert errors == {
            "email": "Email is required.",
            "currentPassword": "Current password is required.",
            "newPassword": "New password is required.",
            "confirmPassword": "Please confirm your new password.",
        }

    def test_invalid_email(self, valid_fields):
        """Test a malformed email is reported as invalid."""
        # Arrange
        valid_fields["email"] = "invalid-email"

        # Act
        errors = validate_password_change_form(valid_fields)

        # Assert
        assert errors == {"email": "Email is invalid."}

    def test_short_new_password(self, valid_fields):
        """Test a short new password is reported on the new password field."""
        # Arrange
        valid_fields["newPassword"] = "12345"
        valid_fields["confirmPassword"] = "12345"

        # Act
        errors = validate_password_change_form(valid_fields)

        # Assert
        assert errors == {
            "newPassword": "New password must be at least 6 characters."
        }

    def test_mismatch(self, valid_fields):
        """Test a mismatch is reported on the confirm field."""
        # Arrange
        valid_fields["confirmPassword"] = "differentpassword"

        # Act
        errors = validate_password_change_form(valid_fields)

        # Assert
        assert errors == {"confirmPassword": "Passwords do not match."}

    def test_errors_accumulate(self, valid_fields):
        """Test several failing fields are reported together."""
        # Arrange
        valid_fields["email"] = "invalid-email"
        valid_fields["newPassword"] = "123"
        valid_fields["confirmPassword"] = "456"

        # Act
        errors = validate_password_change_form(valid_fields)

        # Assert
        assert errors == {
            "email": "Email is invalid.",
            "newPassword": "New password must be at least 6 characters.",
            "confirmPassword": "Passwords do not match.",
        }

    def test_same_as_current(self, valid_fields):
        """Test reusing the current password is reported on the new field."""
        # Arrange
        valid_fields["newPassword"] = "password123"
        valid_fields["confirmPassword"] = "password123"

        # Act
        errors = validate_password_change_form(valid_fields)

        # Assert
        assert errors == {
            "newPassword": "New password must be different from current password."
        }

    def test_same_as_current_overwrites_length_error(self, valid_fields):
        """Test the same-as-current message replaces a length error."""
        # Arrange
        valid_fields["currentPassword"] = "abc"
        valid_fields["newPassword"] = "abc"
        valid_fields["confirmPassword"] = "abc"

        # Act
        errors = validate_password_change_form(valid_fields)

        # Assert
        assert errors == {
            "newPassword": "New password must be different from current password."
        }

    def test_valid_form(self, valid_fields):
        """Test a valid form has no errors."""
        # Act
        errors = validate_password_change_form(valid_fields)

        # Assert
        assert errors == {}

# Standard Library
from enum import Enum


class AllowedMethod(str, Enum):
    """Enumeration of HTTP methods used by the account form endpoints.

    Attributes:
        post: HTTP POST method.
        put: HTTP PUT method.
    """

    post = "POST"
    put = "PUT"


class NotificationKind(str, Enum):
    """Enumeration of notification kinds shown after a form submission.

    Attributes:
        success: The submission was accepted by the server.
        error: The submission was rejected or could not be sent.
    """

    success = "success"
    error = "error"


class LoginMessage(str, Enum):
    """User-facing messages for the login flow.

    Attributes:
        credentials_required: Server-side combined required-field message.
        password_too_short: Password shorter than the minimum length.
        email_required: Client-side missing email message.
        email_invalid: Client-side malformed email message.
        success: Credentials matched the account record.
        invalid_credentials: Credentials did not match.
    """

    credentials_required = "Email and password are required."
    password_too_short = "Password must be at least 6 characters."
    email_required = "Email is required."
    email_invalid = "Email is invalid."
    success = "Login successful!"
    invalid_credentials = "Invalid credentials."


class PasswordChangeMessage(str, Enum):
    """User-facing messages for the password change flow.

    Attributes:
        all_fields_required: Server-side combined required-field message.
        new_password_too_short: New password shorter than the minimum length.
        server_mismatch: Server-side new/confirm mismatch message.
        same_as_current: New password equals the current password.
        success: Server-side success message.
        current_password_incorrect: Email or current password did not match.
        current_password_required: Client-side missing current password.
        new_password_required: Client-side missing new password.
        confirm_password_required: Client-side missing confirmation.
        client_mismatch: Client-side new/confirm mismatch message.
        changed: Client-side success notification.
    """

    all_fields_required = "All fields are required."
    new_password_too_short = "New password must be at least 6 characters."
    server_mismatch = "New password and confirm password do not match."
    same_as_current = "New password must be different from current password."
    success = "Password updated successfully!"
    current_password_incorrect = "Current password is incorrect."
    current_password_required = "Current password is required."
    new_password_required = "New password is required."
    confirm_password_required = "Please confirm your new password."
    client_mismatch = "Passwords do not match."
    changed = "Password changed successfully!"


class ProfileMessage(str, Enum):
    """User-facing messages for the profile update flow.

    Attributes:
        validation_failed: Top-level message for a rejected profile update.
        username_too_short: Username missing or shorter than the minimum.
        full_name_required: Full name missing.
        email_invalid: Email does not look like an address.
        phone_invalid: Phone is not 10 to 15 digits.
        birth_date_in_future: Birth date is later than now.
        bio_too_long: Bio longer than the maximum.
        updated: Client-side success notification.
    """

    validation_failed = "Validation failed"
    username_too_short = "Username must be at least 6 characters."
    full_name_required = "Full name is required."
    email_invalid = "Must be a valid email format."
    phone_invalid = "Phone must be 10-15 digits."
    birth_date_in_future = "Birth date cannot be in the future."
    bio_too_long = "Bio must be 160 characters or less."
    updated = "Profile updated successfully!"


class CommonMessage(str, Enum):
    """Messages shared by every form.

    Attributes:
        invalid_request_format: The request body could not be parsed.
        generic_error: Fallback when an error response carries no message.
        network_error: The request never produced a readable response.
    """

    invalid_request_format = "Invalid request format."
    generic_error = "An error occurred."
    network_error = "Network error. Please try again."

"""Validation rules for the change-password form."""

# Standard Library
from typing import Any, Dict, Mapping, Optional

# Local Modules
from core.utils import LoginMessage, PasswordChangeMessage
from core.utils.constants import MIN_PASSWORD_LENGTH, FORM_EMAIL_PATTERN

PASSWORD_CHANGE_FIELDS = (
    "email",
    "currentPassword",
    "newPassword",
    "confirmPassword",
)


def validate_password_change_request(
    fields: Mapping[str, Any],
) -> Optional[str]:
    """Server-side password change check.

    Rules run in a fixed order and stop at the first failure: required
    fields, new password length, confirmation match, then difference from
    the current password.

    Parameters
    ----------
    fields : Mapping[str, Any]
        The raw request fields keyed by their wire names.

    Returns
    -------
    Optional[str]
        The message of the first failing rule, or None when the request may
        proceed to the account service.
    """
    if not all(fields.get(name) for name in PASSWORD_CHANGE_FIELDS):
        return PasswordChangeMessage.all_fields_required.value

    current_password = fields["currentPassword"]
    new_password = fields["newPassword"]
    confirm_password = fields["confirmPassword"]

    if len(new_password) < MIN_PASSWORD_LENGTH:
        return PasswordChangeMessage.new_password_too_short.value

    if new_password != confirm_password:
        return PasswordChangeMessage.server_mismatch.value

    if current_password == new_password:
        return PasswordChangeMessage.same_as_current.value

    return None


def validate_password_change_form(fields: Mapping[str, Any]) -> Dict[str, str]:
    """Client-side password change check.

    Every field is checked and all errors are returned together. When the
    current and new passwords are both filled in and equal, the new password
    error is replaced with the same-as-current message.

    Parameters
    ----------
    fields : Mapping[str, Any]
        The form fields keyed by their wire names.

    Returns
    -------
    Dict[str, str]
        Field name to error message. Empty when the form is valid.
    """
    errors: Dict[str, str] = {}
    email = fields.get("email") or ""
    current_password = fields.get("currentPassword") or ""
    new_password = fields.get("newPassword") or ""
    confirm_password = fields.get("confirmPassword") or ""

    if not email:
        errors["email"] = LoginMessage.email_required.value
    elif not FORM_EMAIL_PATTERN.search(email):
        errors["email"] = LoginMessage.email_invalid.value

    if not current_password:
        errors["currentPassword"] = (
            PasswordChangeMessage.current_password_required.value
        )

    if not new_password:
        errors["newPassword"] = PasswordChangeMessage.new_password_required.value
    elif len(new_password) < MIN_PASSWORD_LENGTH:
        errors["newPassword"] = (
            PasswordChangeMessage.new_password_too_short.value
        )

    if not confirm_password:
        errors["confirmPassword"] = (
            PasswordChangeMessage.confirm_password_required.value
        )
    elif new_password != confirm_password:
        errors["confirmPassword"] = PasswordChangeMessage.client_mismatch.value

    if current_password and new_password and current_password == new_password:
        errors["newPassword"] = PasswordChangeMessage.same_as_current.value

    return errors

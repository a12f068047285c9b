"""Validation rules for the login form."""

# Standard Library
from typing import Any, Dict, Mapping, Optional

# Local Modules
from core.utils import LoginMessage
from core.utils.constants import MIN_PASSWORD_LENGTH, FORM_EMAIL_PATTERN


def validate_login_request(fields: Mapping[str, Any]) -> Optional[str]:
    """Server-side login check. Returns the first failing message, if any.

    Parameters
    ----------
    fields : Mapping[str, Any]
        The raw request fields keyed by their wire names.

    Returns
    -------
    Optional[str]
        The error message for the first rule that fails, or None when the
        request may proceed to the account service.
    """
    email = fields.get("email") or ""
    password = fields.get("password") or ""

    # Both fields are reported together rather than per field
    if not email or not password:
        return LoginMessage.credentials_required.value

    if len(password) < MIN_PASSWORD_LENGTH:
        return LoginMessage.password_too_short.value

    return None


def validate_login_form(fields: Mapping[str, Any]) -> Dict[str, str]:
    """Client-side login check reporting one message per failing field.

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
    password = fields.get("password") or ""

    if not email:
        errors["email"] = LoginMessage.email_required.value
    elif not FORM_EMAIL_PATTERN.search(email):
        errors["email"] = LoginMessage.email_invalid.value

    if len(password) < MIN_PASSWORD_LENGTH:
        errors["password"] = LoginMessage.password_too_short.value

    return errors

"""Validation rules for the profile update form.

The same rules run in the forms client and in the API backend. Every field is
checked on every call; errors are never short-circuited.
"""

# Standard Library
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

# Local Modules
from core.utils import ProfileMessage
from core.utils.constants import (
    MIN_USERNAME_LENGTH,
    MAX_BIO_LENGTH,
    PROFILE_EMAIL_PATTERN,
    PHONE_PATTERN,
)


def parse_birth_date(value: str) -> Optional[datetime]:
    """Parse an ISO 8601 birth date into an aware UTC datetime.

    Date-only values are read as midnight UTC. Values without an offset are
    treated as UTC.

    Parameters
    ----------
    value : str
        The raw birth date, e.g. "1990-01-01".

    Returns
    -------
    Optional[datetime]
        The parsed datetime, or None if the value is not an ISO date.
    """
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def validate_profile_update(
    fields: Mapping[str, Any], now: Optional[datetime] = None
) -> Dict[str, str]:
    """Validate a profile update and collect every failing field.

    Parameters
    ----------
    fields : Mapping[str, Any]
        The profile fields keyed by their wire names. ``birthDate`` and
        ``bio`` are optional.
    now : Optional[datetime], optional
        The instant birth dates are compared against, by default the current
        UTC time.

    Returns
    -------
    Dict[str, str]
        Field name to error message, in form order. Empty when valid.
    """
    errors: Dict[str, str] = {}
    username = fields.get("username") or ""
    full_name = fields.get("fullName") or ""
    email = fields.get("email") or ""
    phone = fields.get("phone") or ""
    birth_date = fields.get("birthDate")
    bio = fields.get("bio")

    # Missing and short usernames share one message
    if len(username) < MIN_USERNAME_LENGTH:
        errors["username"] = ProfileMessage.username_too_short.value

    if not full_name:
        errors["fullName"] = ProfileMessage.full_name_required.value

    if not PROFILE_EMAIL_PATTERN.fullmatch(email):
        errors["email"] = ProfileMessage.email_invalid.value

    if not PHONE_PATTERN.fullmatch(phone):
        errors["phone"] = ProfileMessage.phone_invalid.value

    if birth_date:
        parsed = parse_birth_date(birth_date)
        if parsed is not None and parsed > (now or datetime.now(timezone.utc)):
            errors["birthDate"] = ProfileMessage.birth_date_in_future.value

    if bio and len(bio) > MAX_BIO_LENGTH:
        errors["bio"] = ProfileMessage.bio_too_long.value

    return errors

"""Field validation for the account forms.

Each form has a validator returning a mapping of field name to message. The
server-side login and password change paths instead report a single message
for the first rule that fails.
"""

# Local Modules
from core.validators.login import validate_login_request, validate_login_form
from core.validators.password import (
    validate_password_change_request,
    validate_password_change_form,
)
from core.validators.profile import validate_profile_update, parse_birth_date

__all__ = [
    "validate_login_request",
    "validate_login_form",
    "validate_password_change_request",
    "validate_password_change_form",
    "validate_profile_update",
    "parse_birth_date",
]

# Standard Library
import re

# Password rules
MIN_PASSWORD_LENGTH = 6

# Profile rules
MIN_USERNAME_LENGTH = 6
MAX_BIO_LENGTH = 160
MIN_PHONE_DIGITS = 10
MAX_PHONE_DIGITS = 15

# Loose email shape checked by the login and password forms (unanchored)
FORM_EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")

# Stricter email shape checked by the profile form (whole value)
PROFILE_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

# ASCII digits only, length bounds inclusive
PHONE_PATTERN = re.compile(
    rf"[0-9]{{{MIN_PHONE_DIGITS},{MAX_PHONE_DIGITS}}}"
)

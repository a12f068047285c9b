# Local Modules
from core.utils.enums import (
    AllowedMethod,
    NotificationKind,
    LoginMessage,
    PasswordChangeMessage,
    ProfileMessage,
    CommonMessage,
)

__all__ = [
    "AllowedMethod",
    "NotificationKind",
    "LoginMessage",
    "PasswordChangeMessage",
    "ProfileMessage",
    "CommonMessage",
]

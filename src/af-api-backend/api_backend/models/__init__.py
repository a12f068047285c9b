"""Request and response models for the account form routes."""

# Local Modules
from api_backend.models.login import LoginRequest
from api_backend.models.password import PasswordChangeRequest
from api_backend.models.profile import ProfileUpdateRequest
from api_backend.models.responses import (
    MessageResponse,
    PasswordChangeResponse,
    ProfileUpdateResponse,
    ValidationFailedResponse,
)

__all__ = [
    "LoginRequest",
    "PasswordChangeRequest",
    "ProfileUpdateRequest",
    "MessageResponse",
    "PasswordChangeResponse",
    "ProfileUpdateResponse",
    "ValidationFailedResponse",
]

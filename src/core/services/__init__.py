"""
This module provides access to core services used throughout the application.
"""

# Local Modules
from core.services.account_service import (
    AccountResult,
    AccountService,
    AccountStore,
    StaticAccountStore,
)

__all__ = [
    "AccountResult",
    "AccountService",
    "AccountStore",
    "StaticAccountStore",
]

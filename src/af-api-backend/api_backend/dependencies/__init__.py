"""This module provides dependencies for the API backend.

It includes the factory that hands the account service to the routers, so
tests and alternative deployments can swap the credential store.
"""

# Local Modules
from api_backend.dependencies.dependencies import get_account_service

__all__ = [
    "get_account_service",
]

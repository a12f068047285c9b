# Standard Library
from functools import lru_cache

# Third Party
from aws_lambda_powertools import Logger

# Local Modules
from core.services import AccountService, StaticAccountStore

# Initialize logger
logger = Logger(service="dependencies")


@lru_cache
def get_account_service() -> AccountService:
    """Returns the account service shared by all requests.

    The service only reads from an immutable store, so one instance is safe
    to reuse across requests and warm Lambda invocations.

    Returns
    -------
    AccountService
        An account service backed by the configured mock account.
    """
    logger.info("Creating account service backed by the static account store.")
    return AccountService(store=StaticAccountStore())

# Standard Library
from typing import Dict, Any

# Third Party
from mangum import Mangum
from aws_lambda_powertools import Logger
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

# Local Modules
from api_backend.app import create_app

# Initialize a logger
logger = Logger()

# Built once per container and reused by warm invocations
app = create_app()
lambda_asgi_handler = Mangum(app, lifespan="off")


@logger.inject_lambda_context(
    log_event=False, correlation_id_path=correlation_paths.API_GATEWAY_HTTP
)
def lambda_handler(
    event: Dict[str, Any], context: LambdaContext
) -> Dict[str, Any]:
    """Entry point for API Gateway events.

    The raw event is not logged because form bodies carry passwords.

    Parameters
    ----------
    event : Dict[str, Any]
        The API Gateway HTTP event.
    context : LambdaContext
        The Lambda runtime context.

    Returns
    -------
    Dict[str, Any]
        The API Gateway response produced by the application.
    """
    return lambda_asgi_handler(event, context)

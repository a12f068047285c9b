"""Exception handlers registered on the FastAPI application."""

# Third Party
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from aws_lambda_powertools import Logger

# Local Modules
from core.utils import CommonMessage

# Initialize logger
logger = Logger(service="exception-handlers")


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Reports an unparseable request body as a 400 with a generic message.

    Missing, non-JSON, non-object or wrongly typed bodies all end up here.
    Field-level rules are enforced by the routers themselves.

    Parameters
    ----------
    request : Request
        The request whose body could not be parsed.
    exc : RequestValidationError
        The error raised by FastAPI while reading the body.

    Returns
    -------
    JSONResponse
        A 400 response with `{"message": "Invalid request format."}`.
    """
    logger.error(
        f"Invalid request format for {request.method} {request.url.path}: "
        f"{exc.errors()}"
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": CommonMessage.invalid_request_format.value},
    )

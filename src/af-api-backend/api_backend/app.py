"""Application factory for the account forms API."""

# Standard Library
from typing import List, Optional

# Third Party
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from aws_lambda_powertools import Logger

# Local Modules
from api_backend.api import router
from api_backend.exceptions import request_validation_exception_handler
from core.utils.config import API_PREFIX, CORS_ALLOWED_ORIGINS

# Initialize logger
logger = Logger(service="app")


def create_app(
    api_prefix: str = API_PREFIX,
    allowed_origins: Optional[List[str]] = None,
) -> FastAPI:
    """Builds the FastAPI application serving the account form endpoints.

    Parameters
    ----------
    api_prefix : str, optional
        Path prefix for the endpoints, the documentation pages and the
        OpenAPI schema, by default the configured ``API_PREFIX``.
    allowed_origins : Optional[List[str]], optional
        Origins allowed by CORS, by default parsed from
        ``CORS_ALLOWED_ORIGINS``.

    Returns
    -------
    FastAPI
        The configured application.
    """
    origins = allowed_origins or CORS_ALLOWED_ORIGINS.split(",")
    logger.info(
        f"Creating application under '{api_prefix}' for origins {origins}."
    )

    # Default docs URLs are replaced by the prefixed documentation router
    app = FastAPI(
        title="Account Forms API",
        version="0.1.0",
        description=(
            "Mock API validating login, password change and profile forms."
        ),
        docs_url=None,
        redoc_url=None,
        openapi_url=f"{api_prefix}/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Unparseable bodies answer 400 "Invalid request format."
    app.add_exception_handler(
        RequestValidationError, request_validation_exception_handler
    )

    app.include_router(router, prefix=api_prefix)
    return app

"""Environment-driven configuration shared by the backend and the client."""

# Standard Library
import os

# Path prefix for every API route, including the documentation routes
API_PREFIX = os.environ.get("API_PREFIX", "/api")

# Comma separated list of origins allowed by the CORS middleware
CORS_ALLOWED_ORIGINS = os.environ.get("CORS_ALLOWED_ORIGINS", "*")

# The single account the mock account service authenticates against
MOCK_ACCOUNT_EMAIL = os.environ.get("MOCK_ACCOUNT_EMAIL", "test@example.com")
MOCK_ACCOUNT_PASSWORD = os.environ.get("MOCK_ACCOUNT_PASSWORD", "password123")

# Seconds the forms client waits for a response
FORMS_CLIENT_TIMEOUT = float(os.environ.get("FORMS_CLIENT_TIMEOUT", "10"))

# Local Modules
from api_backend.api import router

__all__ = ["router"]

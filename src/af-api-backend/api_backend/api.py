# Third Party
from fastapi import APIRouter

# Local Modules
from api_backend.routers import docs, login, password, profile

# Create a router instance with a default prefix
router = APIRouter()

# Include other routers
router.include_router(login.router)
router.include_router(password.router)
router.include_router(profile.router)
router.include_router(docs.router)

from fastapi import APIRouter

from api.routes.locales import router as locales_router
from api.routes.system import router as system_router

api_router = APIRouter()

api_router.include_router(system_router)
api_router.include_router(locales_router)

from fastapi import APIRouter

from kommacheck.api.routes.check import router as check_router
from kommacheck.api.routes.root import router as root_router

api_router = APIRouter()
api_router.include_router(root_router)
api_router.include_router(check_router)

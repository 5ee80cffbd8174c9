from fastapi import APIRouter

from app.api import ai, gitlab

api_router = APIRouter(prefix="/api")

api_router.include_router(gitlab.router)
api_router.include_router(ai.router)

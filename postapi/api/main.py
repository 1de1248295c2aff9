from fastapi import APIRouter

from postapi.api.routes import health, posts

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(posts.router)

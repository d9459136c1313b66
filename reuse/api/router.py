"""
API router - aggregates all endpoint modules.
"""

from fastapi import APIRouter

from reuse.api.endpoints import auth, health, items, profile

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(profile.router, prefix="/me", tags=["profile"])
api_router.include_router(items.router, prefix="/items", tags=["items"])

"""API router for version 1."""
from fastapi import APIRouter

from droword.api.v1.endpoints import practice, proficiency, tags, words


api_router = APIRouter()
api_router.include_router(words.router)
api_router.include_router(practice.router)
api_router.include_router(proficiency.router)
api_router.include_router(tags.router)

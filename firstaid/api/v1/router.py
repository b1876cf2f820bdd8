"""API v1 router aggregating all endpoints."""

from fastapi import APIRouter

from firstaid.api.v1 import chat, health, screenings

api_router = APIRouter()

# Health check
api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"],
)

# Chat triage
api_router.include_router(chat.router)

# Screenings
api_router.include_router(screenings.router)

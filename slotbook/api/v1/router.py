"""API v1 router aggregating all endpoints."""

from fastapi import APIRouter

from slotbook.api.v1 import availability, meetings, slots, users

api_router = APIRouter()

api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(slots.router, prefix="/slots", tags=["slots"])
api_router.include_router(meetings.router, prefix="/meetings", tags=["meetings"])
api_router.include_router(availability.router, prefix="/availability", tags=["availability"])

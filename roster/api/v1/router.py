"""
API v1 router - aggregates all endpoint modules (RESTful structure).
"""

from fastapi import APIRouter

from roster.api.v1.endpoints import health, members, teams

api_router = APIRouter(prefix="/v1")

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(teams.router, prefix="/teams", tags=["teams"])
api_router.include_router(members.router, prefix="/members", tags=["members"])

"""
Health checks - for load balancers, Kubernetes, and monitoring.
Challenge: Fast liveness; readiness confirms the database answers.
"""

from fastapi import APIRouter
from sqlalchemy import text

from roster.config import get_settings
from roster.db.session import DbSession

router = APIRouter()
settings = get_settings()


@router.get("")
async def health():
    """Liveness: is the process up?"""
    return {"status": "ok", "app": settings.app_name}


@router.get("/ready")
async def ready(session: DbSession):
    """Readiness: can the database run a query?"""
    await session.execute(text("SELECT 1"))
    return {"status": "ready"}

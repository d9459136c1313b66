"""
Health checks - liveness and database readiness.
"""

import logging

from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from reuse.core.errors import InternalError
from reuse.db.session import DbSession

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("")
async def health():
    """Liveness: is the process up?"""
    return {"ok": True, "message": "API funcionando!"}


@router.get("/ready")
async def ready(session: DbSession):
    """Readiness: can we reach the database?"""
    try:
        await session.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error("Database check failed: %s", exc)
        raise InternalError("Banco de dados indisponível") from exc
    return {"ok": True, "database": "up"}

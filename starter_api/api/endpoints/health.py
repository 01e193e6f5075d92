"""
Health endpoint.

Reports service liveness and database reachability.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, text

from starter_api.core.config import settings
from starter_api.db.session import get_db

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", summary="Health check endpoint for monitoring.")
def health_check(db: Session = Depends(get_db)):
    body = {"status": "ok", "service": "starter-api", "version": settings.VERSION, "database": "ok"}
    try:
        db.exec(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Database health check failed")
        body.update(status="degraded", database="unavailable")
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=body)
    return body

"""FastAPI entrypoint for the nunu-log time tracking API."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from nunu_log.api.v1.api import api_router
from nunu_log.core.config import settings
from nunu_log.db import session as db_session
from nunu_log.db.base import Base
from nunu_log.db.migrations import ensure_sqlite_schema

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, debug=settings.debug)
app.include_router(api_router, prefix="/api/v1")


@app.on_event("startup")
def startup() -> None:
    logger.info("Starting %s (env=%s)", settings.app_name, settings.app_env)
    if not settings.api_token:
        logger.warning("NUNU_LOG_API_TOKEN not set; Siri webhook accepts unauthenticated calls.")
    try:
        Base.metadata.create_all(bind=db_session.engine)
        ensure_sqlite_schema(db_session.engine)
    except Exception:
        logger.exception("[BOOTSTRAP] Schema setup failed")
        raise


@app.get("/")
def root() -> dict[str, str]:
    return {"app": settings.app_name, "env": settings.app_env}


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}

"""API v1 router composition."""

from fastapi import APIRouter

from nunu_log.api.v1.endpoints import entries, siri, stats

api_router: APIRouter = APIRouter()
api_router.include_router(entries.router, prefix="/entries", tags=["entries"])
api_router.include_router(siri.router, prefix="/siri", tags=["siri"])
api_router.include_router(stats.router, prefix="/stats", tags=["stats"])

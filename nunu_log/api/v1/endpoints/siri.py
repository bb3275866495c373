"""Siri shortcut webhook."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from nunu_log.core.security import require_api_token
from nunu_log.db.session import get_db
from nunu_log.schemas.entry import EntryRead, SiriEntryCreate, SiriEntryResponse
from nunu_log.services.siri_service import MissingEntryTypeError, create_siri_entry

router: APIRouter = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=SiriEntryResponse, dependencies=[Depends(require_api_token)])
def create_from_shortcut(payload: SiriEntryCreate, db: Session = Depends(get_db)) -> SiriEntryResponse:
    try:
        entry = create_siri_entry(db, payload)
    except MissingEntryTypeError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    logger.info("[SIRI] Created %s entry id=%s", entry.type, entry.id)
    return SiriEntryResponse(entry=EntryRead.model_validate(entry))

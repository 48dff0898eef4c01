"""
Training session endpoints.
"""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.dependencies import get_store
from app.db.repositories.training_session import TrainingSessionRepository
from app.db.store import DataStore
from app.engine.tags import compute_session_tags
from app.schemas.training_session import TrainingSessionDetail

router = APIRouter()


@router.get("/{session_id}", summary="Get a training session with its highlight tags.",
            response_model=TrainingSessionDetail, )
def get_session(session_id: uuid.UUID, store: DataStore = Depends(get_store)):
    entry = TrainingSessionRepository(store).get_by_id(str(session_id))
    if not entry:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Training session not found", )
    return TrainingSessionDetail(**entry.model_dump(), tags=compute_session_tags(entry))

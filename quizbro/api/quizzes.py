"""
Quiz submission API endpoints
"""
from datetime import datetime
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from uuid import UUID
import logging

from quizbro.database import get_db
from quizbro.schemas.response import ResponseRecord, ResponseSubmission
from quizbro.schemas.session import SessionInfo
from quizbro.services.store_service import store_service
from quizbro.api.deps import require_student, get_now

router = APIRouter(prefix="/api/quizzes", tags=["quizzes"])
logger = logging.getLogger(__name__)


@router.post("/{quiz_id}/responses", response_model=ResponseRecord, status_code=201)
async def submit_response(
    quiz_id: UUID,
    submission: ResponseSubmission,
    session: SessionInfo = Depends(require_student),
    now: datetime = Depends(get_now),
    db: Session = Depends(get_db)
):
    """
    Record a student's completed quiz
    
    - 404 if the quiz does not exist
    - 403 if it is unpublished or scheduled for later
    - 409 if the student already submitted it
    """
    logger.info(f"Submitting quiz {quiz_id} for user {session.user_id}")
    
    return store_service.record_response(
        db,
        quiz_id=quiz_id,
        user_id=session.user_id,
        total_marks=submission.total_marks,
        now=now
    )

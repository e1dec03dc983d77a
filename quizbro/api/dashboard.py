"""
Role-specific dashboard API endpoints
"""
from datetime import datetime
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from quizbro.config import settings
from quizbro.database import get_db
from quizbro.schemas.dashboard import DashboardResponse, TeacherDashboard, StudentDashboard
from quizbro.schemas.response import ResponseRecord
from quizbro.schemas.session import SessionInfo
from quizbro.services.aggregation_service import aggregation_service
from quizbro.services.dashboard_service import dashboard_service
from quizbro.services.store_service import store_service
from quizbro.api.deps import get_current_session, require_teacher, require_student, get_now

router = APIRouter(prefix="/api", tags=["dashboard"])
logger = logging.getLogger(__name__)


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    session: SessionInfo = Depends(get_current_session),
    now: datetime = Depends(get_now),
    db: Session = Depends(get_db)
):
    """
    Dashboard for the signed-in user
    
    - Teachers: quiz counts and their quizzes
    - Students: stats, available quizzes and recent results
    - Accounts without a role yet: a setup message
    """
    logger.info(f"Building dashboard for {session.user_id} ({session.role.value})")
    return dashboard_service.build(db, session, now)


@router.get("/teacher/quizzes", response_model=TeacherDashboard)
async def get_teacher_quizzes(
    session: SessionInfo = Depends(require_teacher),
    db: Session = Depends(get_db)
):
    return dashboard_service.teacher_dashboard(db, session)


@router.get("/student/quizzes", response_model=StudentDashboard)
async def get_student_quizzes(
    session: SessionInfo = Depends(require_student),
    now: datetime = Depends(get_now),
    db: Session = Depends(get_db)
):
    return dashboard_service.student_dashboard(db, session, now)


@router.get("/student/results", response_model=List[ResponseRecord])
async def get_student_results(
    limit: Optional[int] = Query(None, ge=0, le=100),
    session: SessionInfo = Depends(require_student),
    db: Session = Depends(get_db)
):
    """Latest results first"""
    responses = store_service.responses_for_user(db, session.user_id)
    recent = aggregation_service.recent_results(
        responses,
        settings.RECENT_RESULTS_LIMIT if limit is None else limit
    )
    return list(recent)

"""
Dashboard assembly - role dispatch and the teacher/student views
"""
import logging
from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Session

from quizbro.config import settings
from quizbro.schemas.dashboard import (
    DashboardVariant,
    DashboardResponse,
    TeacherDashboard,
    StudentDashboard,
)
from quizbro.schemas.quiz import QuizCounts, TeacherQuizCard, StudentQuizCard
from quizbro.schemas.response import StudentStats
from quizbro.schemas.session import Role, SessionInfo
from quizbro.services.aggregation_service import aggregation_service
from quizbro.services.lifecycle_service import lifecycle_service, Availability
from quizbro.services.store_service import store_service

logger = logging.getLogger(__name__)

SETUP_MESSAGE = "Setting up your account..."


class DashboardService:
    """Builds dashboards from store records via the lifecycle and aggregation rules"""
    
    def select_dashboard(self, role: Optional[Role]) -> DashboardVariant:
        """Map a role tag to its dashboard; no role yet means still loading"""
        if role is None:
            return DashboardVariant.LOADING
        if role == Role.TEACHER:
            return DashboardVariant.TEACHER
        if role == Role.STUDENT:
            return DashboardVariant.STUDENT
        if role == Role.UNKNOWN:
            return DashboardVariant.UNKNOWN_ROLE
        raise ValueError(f"Unhandled role: {role}")
    
    def teacher_dashboard(self, db: Session, session: SessionInfo) -> TeacherDashboard:
        quizzes = store_service.quizzes_by_owner(db, session.user_id)
        counts = aggregation_service.quiz_counts(quizzes)
        
        cards = [
            TeacherQuizCard(
                **quiz.model_dump(),
                status_label="Published" if quiz.is_published else "Draft"
            )
            for quiz in quizzes
        ]
        
        return TeacherDashboard(counts=QuizCounts(**counts), quizzes=cards)
    
    def student_dashboard(
        self,
        db: Session,
        session: SessionInfo,
        now: datetime,
        limit: Optional[int] = None
    ) -> StudentDashboard:
        """
        Published quizzes minus the ones already attempted, the student's
        headline numbers and latest results
        
        Args:
            db: Database session
            session: Signed-in student
            now: Reference time for schedule checks
            limit: Number of recent results (default from settings)
        """
        quizzes = store_service.published_quizzes(db)
        responses = store_service.responses_for_user(db, session.user_id)
        
        attempted_ids = {r.quiz_id for r in responses}
        stats = aggregation_service.student_stats(quizzes, responses)
        
        cards = []
        for quiz in quizzes:
            if not lifecycle_service.visible_to_student(quiz, attempted_ids):
                continue
            
            availability = lifecycle_service.availability(quiz, now)
            cards.append(StudentQuizCard(
                **quiz.model_dump(),
                availability=availability.value,
                attemptable=lifecycle_service.attemptable(quiz, now, attempted_ids),
                status_label="Available" if availability == Availability.AVAILABLE else "Scheduled"
            ))
        
        recent = aggregation_service.recent_results(
            responses,
            settings.RECENT_RESULTS_LIMIT if limit is None else limit
        )
        
        return StudentDashboard(
            stats=StudentStats(**stats),
            available_quizzes=cards,
            recent_results=list(recent)
        )
    
    def build(self, db: Session, session: Optional[SessionInfo], now: datetime) -> DashboardResponse:
        """Dashboard for whoever is signed in"""
        variant = self.select_dashboard(session.role if session else None)
        logger.debug(f"Dashboard variant {variant.value}")
        
        if variant == DashboardVariant.TEACHER:
            return DashboardResponse(
                variant=variant,
                email=session.email,
                teacher=self.teacher_dashboard(db, session)
            )
        if variant == DashboardVariant.STUDENT:
            return DashboardResponse(
                variant=variant,
                email=session.email,
                student=self.student_dashboard(db, session, now)
            )
        if variant == DashboardVariant.UNKNOWN_ROLE:
            return DashboardResponse(variant=variant, email=session.email, message=SETUP_MESSAGE)
        return DashboardResponse(variant=variant)


# Global instance
dashboard_service = DashboardService()

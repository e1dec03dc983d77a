"""
Record store client - quiz and response queries for the dashboards
"""
import logging
from datetime import datetime
from typing import List, Type, TypeVar
from uuid import UUID
from pydantic import BaseModel, ValidationError
from sqlalchemy import func
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from quizbro.exceptions import (
    MalformedInput,
    UpstreamFailure,
    NotFound,
    QuizNotAvailable,
    AlreadyAttempted,
)
from quizbro.models import Quiz, Question, Response
from quizbro.schemas.quiz import QuizRecord, QuizSummary
from quizbro.schemas.response import ResponseRecord
from quizbro.services.lifecycle_service import lifecycle_service, Availability, as_utc

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def _validate(schema: Type[SchemaT], row) -> SchemaT:
    """Validate an ORM row into its schema at the store boundary"""
    try:
        return schema.model_validate(row)
    except ValidationError as e:
        logger.error(f"Malformed {schema.__name__} record: {e}")
        raise MalformedInput(f"Malformed {schema.__name__} record: {e.error_count()} invalid field(s)") from e


class StoreService:
    """
    Queries over quizzes and responses
    
    Every method returns validated schema records. Query errors surface
    as UpstreamFailure and are never retried.
    """
    
    def quizzes_by_owner(self, db: Session, owner_id: UUID) -> List[QuizSummary]:
        """
        Quizzes created by a teacher, newest first, with question and
        response counts embedded
        """
        question_counts = db.query(
            Question.quiz_id,
            func.count(Question.id).label("question_count")
        ).group_by(Question.quiz_id).subquery()
        
        response_counts = db.query(
            Response.quiz_id,
            func.count(Response.id).label("response_count")
        ).group_by(Response.quiz_id).subquery()
        
        try:
            rows = db.query(
                Quiz,
                func.coalesce(question_counts.c.question_count, 0),
                func.coalesce(response_counts.c.response_count, 0)
            ).outerjoin(
                question_counts, question_counts.c.quiz_id == Quiz.id
            ).outerjoin(
                response_counts, response_counts.c.quiz_id == Quiz.id
            ).filter(
                Quiz.created_by == owner_id
            ).order_by(Quiz.created_at.desc()).all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch quizzes for owner {owner_id}: {str(e)}")
            raise UpstreamFailure("Failed to fetch quizzes") from e
        
        return [
            _validate(QuizSummary, quiz).model_copy(update={
                "question_count": int(question_count),
                "response_count": int(response_count)
            })
            for quiz, question_count, response_count in rows
        ]
    
    def published_quizzes(self, db: Session) -> List[QuizRecord]:
        """All published quizzes, newest first"""
        try:
            quizzes = db.query(Quiz).filter(
                Quiz.is_published.is_(True)
            ).order_by(Quiz.created_at.desc()).all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch published quizzes: {str(e)}")
            raise UpstreamFailure("Failed to fetch dashboard data") from e
        
        return [_validate(QuizRecord, quiz) for quiz in quizzes]
    
    def responses_for_user(self, db: Session, user_id: UUID) -> List[ResponseRecord]:
        """A student's responses, latest submission first, with quiz title and duration"""
        try:
            rows = db.query(Response, Quiz.title, Quiz.duration).join(
                Quiz, Quiz.id == Response.quiz_id
            ).filter(
                Response.user_id == user_id
            ).order_by(Response.submitted_at.desc()).all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch responses for user {user_id}: {str(e)}")
            raise UpstreamFailure("Failed to fetch dashboard data") from e
        
        return [
            _validate(ResponseRecord, response).model_copy(update={
                "quiz_title": title,
                "quiz_duration": duration
            })
            for response, title, duration in rows
        ]
    
    def get_quiz(self, db: Session, quiz_id: UUID) -> QuizRecord:
        try:
            quiz = db.query(Quiz).filter(Quiz.id == quiz_id).first()
        except SQLAlchemyError as e:
            raise UpstreamFailure("Failed to fetch quiz") from e
        
        if not quiz:
            raise NotFound("Quiz not found")
        
        return _validate(QuizRecord, quiz)
    
    def record_response(
        self,
        db: Session,
        quiz_id: UUID,
        user_id: UUID,
        total_marks: float,
        now: datetime
    ) -> ResponseRecord:
        """
        Store a student's single response to a quiz
        
        Raises:
            NotFound: unknown quiz
            AlreadyAttempted: the student already responded
            QuizNotAvailable: quiz unpublished or scheduled for later
        """
        quiz = self.get_quiz(db, quiz_id)
        
        try:
            existing = db.query(Response.id).filter(
                Response.quiz_id == quiz_id,
                Response.user_id == user_id
            ).first()
        except SQLAlchemyError as e:
            raise UpstreamFailure("Failed to submit quiz") from e
        
        attempted_ids = {quiz.id} if existing else set()
        
        if not lifecycle_service.attemptable(quiz, now, attempted_ids):
            if existing:
                raise AlreadyAttempted("You have already completed this quiz")
            
            availability = lifecycle_service.availability(quiz, now)
            if availability == Availability.SCHEDULED_FUTURE:
                raise QuizNotAvailable("This quiz is not available yet")
            raise QuizNotAvailable("This quiz is not published")
        
        response = Response(
            quiz_id=quiz_id,
            user_id=user_id,
            total_marks=total_marks,
            # Stored as naive UTC
            submitted_at=as_utc(now).replace(tzinfo=None)
        )
        
        try:
            db.add(response)
            db.commit()
            db.refresh(response)
        except IntegrityError as e:
            db.rollback()
            raise AlreadyAttempted("You have already completed this quiz") from e
        except SQLAlchemyError as e:
            logger.error(f"Failed to store response: {str(e)}")
            db.rollback()
            raise UpstreamFailure("Failed to submit quiz") from e
        
        logger.info(f"Response recorded: {response.id}, quiz {quiz_id}, score {total_marks}")
        
        return _validate(ResponseRecord, response).model_copy(update={
            "quiz_title": quiz.title,
            "quiz_duration": quiz.duration
        })


# Global instance
store_service = StoreService()

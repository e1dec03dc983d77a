"""
Quiz lifecycle rules - visibility, schedule availability and attempt eligibility
"""
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import AbstractSet, Any

logger = logging.getLogger(__name__)


class Availability(str, Enum):
    NOT_PUBLISHED = "not_published"
    SCHEDULED_FUTURE = "scheduled_future"
    AVAILABLE = "available"


def as_utc(value: datetime) -> datetime:
    """Normalize a timestamp to aware UTC; naive values are taken as UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class LifecycleService:
    """
    Pure rules classifying a quiz against a reference clock and a
    student's attempt history.
    
    Nothing here is cached: `now` advances between calls, so callers
    re-evaluate on every render or poll.
    
    Quizzes are read by attribute (`id`, `is_published`, `scheduled_for`),
    so ORM rows and validated schema records are both accepted.
    """
    
    def availability(self, quiz: Any, now: datetime) -> Availability:
        """
        Classify a quiz's schedule state
        
        Args:
            quiz: Quiz record
            now: Reference timestamp
            
        Returns:
            NOT_PUBLISHED, SCHEDULED_FUTURE or AVAILABLE
        """
        if not quiz.is_published:
            return Availability.NOT_PUBLISHED
        
        # Boundary is inclusive: scheduled_for == now is available
        if quiz.scheduled_for is not None and as_utc(quiz.scheduled_for) > as_utc(now):
            return Availability.SCHEDULED_FUTURE
        
        return Availability.AVAILABLE
    
    def visible_to_student(self, quiz: Any, attempted_quiz_ids: AbstractSet) -> bool:
        """Published and not already attempted, regardless of schedule"""
        return bool(quiz.is_published) and quiz.id not in attempted_quiz_ids
    
    def attemptable(self, quiz: Any, now: datetime, attempted_quiz_ids: AbstractSet) -> bool:
        """Visible to the student and available right now"""
        result = (
            self.visible_to_student(quiz, attempted_quiz_ids)
            and self.availability(quiz, now) == Availability.AVAILABLE
        )
        logger.debug(f"Quiz {quiz.id} attemptable={result}")
        return result


# Global instance
lifecycle_service = LifecycleService()

"""
Dashboard statistics derived from quiz and response record sets
"""
import logging
import math
from itertools import islice
from typing import Any, Dict, Iterable, Iterator, Sequence

from quizbro.services.lifecycle_service import lifecycle_service, as_utc

logger = logging.getLogger(__name__)


class RecentResults:
    """
    Most-recent-first view over a sorted copy of some responses.
    
    Iteration is lazy and can be repeated; the caller's collection is
    never reordered.
    """
    
    def __init__(self, responses: Iterable[Any], limit: int):
        self._ordered = sorted(
            responses,
            key=lambda r: as_utc(r.submitted_at),
            reverse=True
        )
        self.limit = limit
    
    def __iter__(self) -> Iterator[Any]:
        return islice(self._ordered, self.limit)
    
    def __len__(self) -> int:
        return min(len(self._ordered), self.limit)
    
    def __repr__(self):
        return f"<RecentResults(limit={self.limit}, size={len(self)})>"


class AggregationService:
    """Service computing summary numbers for the dashboards"""
    
    DEFAULT_RECENT_LIMIT = 5
    
    def quiz_counts(self, quizzes: Sequence[Any]) -> Dict[str, int]:
        """
        Headline counts for a teacher's quizzes
        
        `scheduled` counts every quiz with a scheduled_for value, including
        ones whose time has already passed.
        """
        return {
            "total": len(quizzes),
            "published": sum(1 for q in quizzes if q.is_published),
            "scheduled": sum(1 for q in quizzes if q.scheduled_for is not None)
        }
    
    def student_stats(
        self,
        available_quizzes: Sequence[Any],
        completed_responses: Sequence[Any]
    ) -> Dict[str, int]:
        """
        Headline numbers for a student
        
        Args:
            available_quizzes: Published quizzes, attempted ones may be included
            completed_responses: The student's responses
            
        Returns:
            Dictionary with available_count, completed_count and average_score
        """
        attempted_ids = {r.quiz_id for r in completed_responses}
        available_count = sum(
            1 for q in available_quizzes
            if lifecycle_service.visible_to_student(q, attempted_ids)
        )
        
        if completed_responses:
            total = sum(float(r.total_marks) for r in completed_responses)
            # Round half up, matching how percentages are displayed
            average_score = math.floor(total / len(completed_responses) + 0.5)
        else:
            average_score = 0
        
        return {
            "available_count": available_count,
            "completed_count": len(completed_responses),
            "average_score": int(average_score)
        }
    
    def recent_results(
        self,
        completed_responses: Iterable[Any],
        limit: int = DEFAULT_RECENT_LIMIT
    ) -> RecentResults:
        """Latest submissions first, at most `limit` of them"""
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        
        return RecentResults(completed_responses, limit)


# Global instance
aggregation_service = AggregationService()

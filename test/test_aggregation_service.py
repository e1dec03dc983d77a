"""
Test cases for dashboard statistics.
"""
import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from types import SimpleNamespace

import pytest

from quizbro.services.aggregation_service import aggregation_service

NOW = datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)


def quiz(published=True, scheduled_for=None):
    return SimpleNamespace(id=uuid.uuid4(), is_published=published, scheduled_for=scheduled_for)


def response(total_marks, quiz_id=None, submitted_at=NOW):
    return SimpleNamespace(
        id=uuid.uuid4(),
        quiz_id=quiz_id or uuid.uuid4(),
        total_marks=total_marks,
        submitted_at=submitted_at
    )


class TestQuizCounts:
    """Test cases for teacher headline counts."""
    
    def test_empty(self):
        assert aggregation_service.quiz_counts([]) == {"total": 0, "published": 0, "scheduled": 0}
    
    def test_counts(self):
        quizzes = [
            quiz(),
            quiz(published=False),
            quiz(scheduled_for=NOW + timedelta(days=2)),
            quiz(published=False, scheduled_for=NOW + timedelta(days=2)),
        ]
        assert aggregation_service.quiz_counts(quizzes) == {"total": 4, "published": 2, "scheduled": 2}
    
    def test_elapsed_schedule_still_counts_as_scheduled(self):
        quizzes = [quiz(scheduled_for=NOW - timedelta(days=10))]
        assert aggregation_service.quiz_counts(quizzes)["scheduled"] == 1


class TestStudentStats:
    """Test cases for student headline numbers."""
    
    def test_no_responses(self):
        stats = aggregation_service.student_stats([quiz(), quiz()], [])
        assert stats == {"available_count": 2, "completed_count": 0, "average_score": 0}
    
    def test_average(self):
        responses = [response(80), response(90), response(70)]
        assert aggregation_service.student_stats([], responses)["average_score"] == 80
    
    def test_average_rounds_half_up(self):
        responses = [response(Decimal("72.50")), response(Decimal("73.00")), response(Decimal("72.00"))]
        # mean 72.5
        assert aggregation_service.student_stats([], responses)["average_score"] == 73
    
    def test_attempted_quizzes_are_not_available(self):
        done = quiz()
        pending = quiz()
        draft = quiz(published=False)
        stats = aggregation_service.student_stats(
            [done, pending, draft],
            [response(55, quiz_id=done.id)]
        )
        assert stats["available_count"] == 1
        assert stats["completed_count"] == 1
        assert stats["average_score"] == 55


class TestRecentResults:
    """Test cases for the recent results view."""
    
    def test_limit_and_order(self):
        responses = [
            response(50 + i, submitted_at=NOW - timedelta(days=d))
            for i, d in enumerate([3, 0, 6, 1, 5, 2, 4])
        ]
        original = list(responses)
        
        recent = aggregation_service.recent_results(responses, 5)
        items = list(recent)
        
        assert len(items) == 5
        assert len(recent) == 5
        stamps = [r.submitted_at for r in items]
        assert stamps == sorted(stamps, reverse=True)
        assert stamps[0] == NOW
        assert responses == original
    
    def test_default_limit_is_five(self):
        responses = [response(60, submitted_at=NOW - timedelta(hours=h)) for h in range(8)]
        assert len(list(aggregation_service.recent_results(responses))) == 5
    
    def test_restartable(self):
        responses = [response(60, submitted_at=NOW - timedelta(hours=h)) for h in range(3)]
        recent = aggregation_service.recent_results(responses, 5)
        assert list(recent) == list(recent)
        assert len(list(recent)) == 3
    
    def test_independent_of_later_input_changes(self):
        responses = [response(60, submitted_at=NOW - timedelta(hours=h)) for h in range(3)]
        recent = aggregation_service.recent_results(responses, 2)
        responses.clear()
        assert len(list(recent)) == 2
    
    def test_zero_limit(self):
        assert list(aggregation_service.recent_results([response(10)], 0)) == []
    
    def test_negative_limit(self):
        with pytest.raises(ValueError):
            aggregation_service.recent_results([], -1)

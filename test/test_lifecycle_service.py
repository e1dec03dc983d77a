"""
Test cases for quiz lifecycle rules.
"""
import uuid
from datetime import datetime, timedelta, timezone

import pytest

from quizbro.schemas.quiz import QuizRecord
from quizbro.services.lifecycle_service import lifecycle_service, Availability

NOW = datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)


def quiz(published=True, scheduled_for=None):
    return QuizRecord(
        id=uuid.uuid4(),
        title="Algebra",
        duration=20,
        is_published=published,
        scheduled_for=scheduled_for,
        created_by=uuid.uuid4(),
        created_at=NOW - timedelta(days=7)
    )


class TestAvailability:
    """Test cases for schedule classification."""
    
    @pytest.mark.parametrize("now", [
        NOW - timedelta(days=365),
        NOW,
        NOW + timedelta(days=365),
    ])
    def test_unscheduled_quiz_is_time_independent(self, now):
        assert lifecycle_service.availability(quiz(), now) == Availability.AVAILABLE
        assert lifecycle_service.availability(quiz(published=False), now) == Availability.NOT_PUBLISHED
    
    def test_future_schedule(self):
        q = quiz(scheduled_for=NOW + timedelta(days=1))
        assert lifecycle_service.availability(q, NOW) == Availability.SCHEDULED_FUTURE
    
    def test_past_schedule(self):
        q = quiz(scheduled_for=NOW - timedelta(days=1))
        assert lifecycle_service.availability(q, NOW) == Availability.AVAILABLE
    
    def test_boundary_is_inclusive(self):
        q = quiz(scheduled_for=NOW)
        assert lifecycle_service.availability(q, NOW) == Availability.AVAILABLE
        assert lifecycle_service.availability(q, NOW - timedelta(microseconds=1)) == Availability.SCHEDULED_FUTURE
    
    def test_unpublished_wins_over_elapsed_schedule(self):
        q = quiz(published=False, scheduled_for=NOW - timedelta(days=1))
        assert lifecycle_service.availability(q, NOW) == Availability.NOT_PUBLISHED
    
    def test_naive_timestamps_are_utc(self):
        q = quiz(scheduled_for=datetime(2026, 3, 1, 10, 0))
        assert lifecycle_service.availability(q, NOW) == Availability.SCHEDULED_FUTURE
        assert lifecycle_service.availability(q, datetime(2026, 3, 1, 10, 0)) == Availability.AVAILABLE
    
    def test_offset_timestamps_are_compared_in_utc(self):
        # 11:00+02:00 is 09:00 UTC, already passed
        q = quiz(scheduled_for=datetime(2026, 3, 1, 11, 0, tzinfo=timezone(timedelta(hours=2))))
        assert lifecycle_service.availability(q, NOW) == Availability.AVAILABLE


class TestVisibility:
    """Test cases for student visibility."""
    
    def test_published_and_unattempted(self):
        assert lifecycle_service.visible_to_student(quiz(), set()) is True
    
    def test_draft_is_hidden(self):
        assert lifecycle_service.visible_to_student(quiz(published=False), set()) is False
    
    def test_attempted_is_hidden_regardless_of_schedule(self):
        q = quiz(scheduled_for=NOW + timedelta(days=3))
        assert lifecycle_service.visible_to_student(q, {q.id}) is False
    
    def test_scheduled_future_is_still_visible(self):
        q = quiz(scheduled_for=NOW + timedelta(days=3))
        assert lifecycle_service.visible_to_student(q, set()) is True


class TestAttemptable:
    """Test cases for attempt eligibility."""
    
    def test_published_yesterday_not_attempted(self):
        q = quiz(scheduled_for=NOW - timedelta(days=1))
        assert lifecycle_service.attemptable(q, NOW, set()) is True
    
    def test_scheduled_tomorrow(self):
        q = quiz(scheduled_for=NOW + timedelta(days=1))
        assert lifecycle_service.attemptable(q, NOW, set()) is False
        assert lifecycle_service.availability(q, NOW) == Availability.SCHEDULED_FUTURE
    
    @pytest.mark.parametrize("scheduled_for", [
        None,
        NOW - timedelta(days=1),
        NOW + timedelta(days=1),
    ])
    def test_attempted_is_never_attemptable(self, scheduled_for):
        q = quiz(scheduled_for=scheduled_for)
        assert lifecycle_service.attemptable(q, NOW, {q.id, uuid.uuid4()}) is False
    
    def test_unpublished_is_never_attemptable(self):
        assert lifecycle_service.attemptable(quiz(published=False), NOW, set()) is False

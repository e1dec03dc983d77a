"""
Pydantic schemas for quiz records and teacher-facing summaries
"""
from pydantic import BaseModel, Field
from typing import Optional
from uuid import UUID
from datetime import datetime


class QuizRecord(BaseModel):
    """Validated quiz row as consumed by the lifecycle engine"""
    id: UUID
    title: str
    description: Optional[str] = None
    duration: int = Field(..., gt=0, description="Duration in minutes")
    is_published: bool
    scheduled_for: Optional[datetime] = None
    created_by: UUID
    created_at: datetime
    
    class Config:
        from_attributes = True


class QuizSummary(QuizRecord):
    """Quiz record with related-record counts materialized by the store"""
    question_count: int = 0
    response_count: int = 0


class QuizCounts(BaseModel):
    """Teacher dashboard headline numbers"""
    total: int
    published: int
    scheduled: int


class TeacherQuizCard(QuizSummary):
    """Quiz as listed on the teacher dashboard"""
    status_label: str  # Published | Draft


class StudentQuizCard(QuizRecord):
    """Quiz as listed in the student's available list"""
    availability: str
    attemptable: bool
    status_label: str  # Available | Scheduled

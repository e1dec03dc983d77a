"""
Pydantic schemas for quiz responses and student statistics
"""
from pydantic import BaseModel, Field
from typing import Optional
from uuid import UUID
from datetime import datetime


class ResponseRecord(BaseModel):
    """Validated response row, with the quiz title and duration embedded"""
    id: UUID
    quiz_id: UUID
    user_id: UUID
    total_marks: float = Field(..., ge=0.0, le=100.0, description="Score percentage")
    submitted_at: datetime
    quiz_title: Optional[str] = None
    quiz_duration: Optional[int] = None
    
    class Config:
        from_attributes = True


class ResponseSubmission(BaseModel):
    """Schema for submitting a completed quiz"""
    total_marks: float = Field(..., ge=0.0, le=100.0, description="Score percentage")


class StudentStats(BaseModel):
    """Student dashboard headline numbers"""
    available_count: int
    completed_count: int
    average_score: int

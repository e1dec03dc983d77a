"""
Pydantic schemas for the role-specific dashboards
"""
from enum import Enum
from pydantic import BaseModel, model_validator
from typing import List, Optional

from quizbro.schemas.quiz import QuizCounts, TeacherQuizCard, StudentQuizCard
from quizbro.schemas.response import ResponseRecord, StudentStats


class DashboardVariant(str, Enum):
    TEACHER = "teacher"
    STUDENT = "student"
    UNKNOWN_ROLE = "unknown_role"
    LOADING = "loading"


class TeacherDashboard(BaseModel):
    counts: QuizCounts
    quizzes: List[TeacherQuizCard]


class StudentDashboard(BaseModel):
    stats: StudentStats
    available_quizzes: List[StudentQuizCard]
    recent_results: List[ResponseRecord]


class DashboardResponse(BaseModel):
    """Exactly one of teacher/student is set, matching variant"""
    variant: DashboardVariant
    email: Optional[str] = None
    teacher: Optional[TeacherDashboard] = None
    student: Optional[StudentDashboard] = None
    message: Optional[str] = None
    
    @model_validator(mode="after")
    def check_variant_payload(self):
        has_teacher = self.teacher is not None
        has_student = self.student is not None
        
        if has_teacher != (self.variant == DashboardVariant.TEACHER):
            raise ValueError(f"teacher payload does not match variant {self.variant.value}")
        if has_student != (self.variant == DashboardVariant.STUDENT):
            raise ValueError(f"student payload does not match variant {self.variant.value}")
        return self

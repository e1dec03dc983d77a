"""
Response model - one immutable submission per student per quiz
"""
from sqlalchemy import Column, DateTime, Numeric, ForeignKey, UniqueConstraint, Uuid, func
from quizbro.database import Base
import uuid


class Response(Base):
    """
    Responses table - created once at submission time, never updated
    """
    __tablename__ = "responses"
    __table_args__ = (
        UniqueConstraint("quiz_id", "user_id", name="uq_responses_quiz_user"),
    )
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    quiz_id = Column(Uuid, ForeignKey("quizzes.id"), nullable=False, index=True)
    user_id = Column(Uuid, ForeignKey("profiles.id"), nullable=False, index=True)
    total_marks = Column(Numeric(5, 2), nullable=False)  # percentage 0-100
    submitted_at = Column(DateTime, server_default=func.now())
    
    def __repr__(self):
        return f"<Response(user_id={self.user_id}, quiz_id={self.quiz_id}, marks={self.total_marks})>"

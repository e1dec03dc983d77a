"""
Quiz model - quizzes authored by teachers
"""
from sqlalchemy import Column, String, Text, Integer, Boolean, DateTime, ForeignKey, Uuid, func
from quizbro.database import Base
import uuid


class Quiz(Base):
    """
    Quizzes table - draft or published, optionally scheduled for later
    """
    __tablename__ = "quizzes"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    duration = Column(Integer, nullable=False)  # minutes
    is_published = Column(Boolean, nullable=False, default=False)
    scheduled_for = Column(DateTime)  # NULL means available once published
    created_by = Column(Uuid, ForeignKey("profiles.id"), nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now())
    
    def __repr__(self):
        return f"<Quiz(id={self.id}, title={self.title}, published={self.is_published})>"

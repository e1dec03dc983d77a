"""
Question model - counted per quiz on the teacher dashboard
"""
from sqlalchemy import Column, Text, Integer, ForeignKey, Uuid
from quizbro.database import Base
import uuid


class Question(Base):
    __tablename__ = "questions"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    quiz_id = Column(Uuid, ForeignKey("quizzes.id"), nullable=False, index=True)
    question_text = Column(Text, nullable=False)
    marks = Column(Integer, default=1)
    position = Column(Integer, default=0)
    
    def __repr__(self):
        return f"<Question(id={self.id}, quiz_id={self.quiz_id})>"

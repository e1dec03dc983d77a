"""
Database models package
"""
from quizbro.models.profile import Profile, AuthSession
from quizbro.models.quiz import Quiz
from quizbro.models.question import Question
from quizbro.models.response import Response

__all__ = ["Profile", "AuthSession", "Quiz", "Question", "Response"]

"""
Profile and session models - identity and role for the session provider
"""
from sqlalchemy import Column, String, DateTime, ForeignKey, Uuid, func
from quizbro.database import Base
import uuid


class Profile(Base):
    """
    Profiles table - one row per registered user, role is NULL while provisioning
    """
    __tablename__ = "profiles"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20))  # teacher | student
    created_at = Column(DateTime, server_default=func.now())
    
    def __repr__(self):
        return f"<Profile(id={self.id}, email={self.email}, role={self.role})>"


class AuthSession(Base):
    """
    Auth sessions table - bearer tokens issued on sign-in
    """
    __tablename__ = "auth_sessions"
    
    token = Column(String(128), primary_key=True)
    user_id = Column(Uuid, ForeignKey("profiles.id"), nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now())
    
    def __repr__(self):
        return f"<AuthSession(user_id={self.user_id})>"

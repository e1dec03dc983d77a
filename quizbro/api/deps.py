"""
Shared FastAPI dependencies - current session, role guards and the clock
"""
from datetime import datetime, timezone
from typing import Optional
from fastapi import Depends, Header
from sqlalchemy.orm import Session

from quizbro.database import get_db
from quizbro.exceptions import PermissionDenied
from quizbro.schemas.session import Role, SessionInfo
from quizbro.services.session_service import session_service


def get_now() -> datetime:
    """Reference time for lifecycle checks, evaluated per request"""
    return datetime.now(timezone.utc)


def get_bearer_token(authorization: Optional[str] = Header(None)) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token.strip()


def get_current_session(
    token: Optional[str] = Depends(get_bearer_token),
    db: Session = Depends(get_db)
) -> SessionInfo:
    return session_service.current_session(db, token)


def require_teacher(session: SessionInfo = Depends(get_current_session)) -> SessionInfo:
    if session.role != Role.TEACHER:
        raise PermissionDenied("Teacher account required")
    return session


def require_student(session: SessionInfo = Depends(get_current_session)) -> SessionInfo:
    if session.role != Role.STUDENT:
        raise PermissionDenied("Student account required")
    return session

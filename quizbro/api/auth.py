"""
Authentication API endpoints
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional
import logging

from quizbro.database import get_db
from quizbro.exceptions import AuthenticationFailed
from quizbro.schemas.session import SignUpRequest, SignInRequest, SessionInfo, SignOutResponse
from quizbro.services.session_service import session_service
from quizbro.api.deps import get_bearer_token, get_current_session

router = APIRouter(prefix="/api/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/signup", response_model=SessionInfo, status_code=201)
async def sign_up(request: SignUpRequest, db: Session = Depends(get_db)):
    """
    Create an account as teacher or student
    
    Returns the new session, including its bearer token
    """
    return session_service.sign_up(
        db,
        request.email,
        request.password,
        request.role,
        confirm_password=request.confirm_password
    )


@router.post("/signin", response_model=SessionInfo)
async def sign_in(request: SignInRequest, db: Session = Depends(get_db)):
    return session_service.sign_in(db, request.email, request.password)


@router.post("/signout", response_model=SignOutResponse)
async def sign_out(
    token: Optional[str] = Depends(get_bearer_token),
    db: Session = Depends(get_db)
):
    if not token:
        raise AuthenticationFailed("Not signed in")
    
    session_service.sign_out(db, token)
    return SignOutResponse(message="Signed out")


@router.get("/me", response_model=SessionInfo)
async def me(session: SessionInfo = Depends(get_current_session)):
    """Current identity and role"""
    return session

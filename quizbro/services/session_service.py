"""
Session provider - sign-up, sign-in, sign-out and current identity
"""
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from werkzeug.security import generate_password_hash, check_password_hash

from quizbro.config import settings
from quizbro.exceptions import AuthenticationFailed, UpstreamFailure
from quizbro.models import Profile, AuthSession
from quizbro.schemas.session import Role, SessionInfo

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    """Naive UTC, as stored in the auth_sessions table"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class SessionService:
    """Password accounts with opaque bearer tokens that expire after SESSION_TTL_MINUTES"""
    
    SELECTABLE_ROLES = (Role.TEACHER.value, Role.STUDENT.value)
    
    def sign_up(
        self,
        db: Session,
        email: str,
        password: str,
        role: Optional[str] = None,
        confirm_password: Optional[str] = None
    ) -> SessionInfo:
        """
        Register an account and open a session for it
        
        Raises:
            AuthenticationFailed: invalid email, weak or mismatched password,
                bad role or email already registered
        """
        email = (email or "").strip().lower()
        role = role or settings.DEFAULT_ROLE
        
        if "@" not in email:
            raise AuthenticationFailed("Please enter a valid email address")
        if confirm_password is not None and confirm_password != password:
            raise AuthenticationFailed("Passwords do not match")
        if len(password or "") < settings.MIN_PASSWORD_LENGTH:
            raise AuthenticationFailed(
                f"Password should be at least {settings.MIN_PASSWORD_LENGTH} characters"
            )
        if role not in self.SELECTABLE_ROLES:
            raise AuthenticationFailed(f"Invalid role: {role}")
        
        try:
            if db.query(Profile).filter(Profile.email == email).first():
                raise AuthenticationFailed("User already registered")
            
            profile = Profile(
                email=email,
                password_hash=generate_password_hash(password),
                role=role
            )
            db.add(profile)
            db.flush()
            
            token = self._issue_token(db, profile)
            db.commit()
        except IntegrityError as e:
            # Concurrent sign-up won the unique email index
            db.rollback()
            raise AuthenticationFailed("User already registered") from e
        except SQLAlchemyError as e:
            logger.error(f"Sign-up failed for {email}: {str(e)}")
            db.rollback()
            raise UpstreamFailure("Failed to create account") from e
        
        logger.info(f"Account created: {profile.id} ({role})")
        return self._to_session_info(profile, token)
    
    def sign_in(self, db: Session, email: str, password: str) -> SessionInfo:
        """Check credentials and open a new session, dropping the user's expired ones"""
        email = (email or "").strip().lower()
        
        try:
            profile = db.query(Profile).filter(Profile.email == email).first()
            
            if not profile or not check_password_hash(profile.password_hash, password or ""):
                logger.warning(f"Failed sign-in for {email}")
                raise AuthenticationFailed("Invalid login credentials")
            
            purged = db.query(AuthSession).filter(
                AuthSession.user_id == profile.id,
                AuthSession.created_at < self._expiry_cutoff()
            ).delete(synchronize_session=False)
            
            token = self._issue_token(db, profile)
            db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Sign-in failed for {email}: {str(e)}")
            db.rollback()
            raise UpstreamFailure("Failed to sign in") from e
        
        logger.info(f"Signed in: {profile.id} (purged {purged} expired session(s))")
        return self._to_session_info(profile, token)
    
    def sign_out(self, db: Session, token: str) -> None:
        try:
            session = db.query(AuthSession).filter(AuthSession.token == token).first()
            if not session:
                raise AuthenticationFailed("Session not found")
            
            user_id = session.user_id
            db.delete(session)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise UpstreamFailure("Failed to sign out") from e
        
        logger.info(f"Signed out: {user_id}")
    
    def current_session(self, db: Session, token: Optional[str]) -> SessionInfo:
        """Resolve a bearer token to the signed-in identity"""
        if not token:
            raise AuthenticationFailed("Not signed in")
        
        try:
            row = db.query(AuthSession, Profile).join(
                Profile, Profile.id == AuthSession.user_id
            ).filter(AuthSession.token == token).first()
            
            if not row:
                raise AuthenticationFailed("Not signed in")
            
            session, profile = row
            if session.created_at is None or session.created_at < self._expiry_cutoff():
                db.delete(session)
                db.commit()
                logger.info(f"Session expired for {profile.id}")
                raise AuthenticationFailed("Session expired, please sign in again")
        except SQLAlchemyError as e:
            db.rollback()
            raise UpstreamFailure("Failed to load session") from e
        
        return self._to_session_info(profile, token)
    
    def _expiry_cutoff(self) -> datetime:
        return _utcnow() - timedelta(minutes=settings.SESSION_TTL_MINUTES)
    
    def _issue_token(self, db: Session, profile: Profile) -> str:
        token = secrets.token_urlsafe(settings.SESSION_TOKEN_BYTES)
        db.add(AuthSession(token=token, user_id=profile.id, created_at=_utcnow()))
        return token
    
    def _to_session_info(self, profile: Profile, token: Optional[str]) -> SessionInfo:
        # Profiles still being provisioned have no role yet
        role = Role(profile.role) if profile.role in self.SELECTABLE_ROLES else Role.UNKNOWN
        return SessionInfo(
            user_id=profile.id,
            email=profile.email,
            role=role,
            token=token
        )


# Global instance
session_service = SessionService()

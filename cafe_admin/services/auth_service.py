"""
Admin authentication and server-side sessions
"""
import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, Tuple

from starlette.concurrency import run_in_threadpool

from cafe_admin.core.errors import InvalidCredentials, Unauthorized, ValidationError
from cafe_admin.core.security import (
    create_session_token,
    decode_session_token,
    verify_password,
)
from cafe_admin.core.store import Store

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class AdminSession:
    """Authenticated admin principal bound to one cookie"""
    session_id: str
    admin_id: int
    username: str
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return (now or _utcnow()) >= self.expires_at


class SessionManager:
    """
    Registry of live admin sessions.

    The client only holds a signed token with the session id; logout and
    expiry are enforced here, so a destroyed session stays dead even if its
    cookie is replayed. Expiry is absolute from creation.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", max_age_seconds: int = 86400):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.ttl = timedelta(seconds=max_age_seconds)
        self._sessions: Dict[str, AdminSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self, admin_id: int, username: str) -> Tuple[AdminSession, str]:
        """
        Open a session for an admin.

        Returns:
            (session, cookie value)
        """
        self.purge_expired()

        now = _utcnow()
        session = AdminSession(
            session_id=secrets.token_urlsafe(32),
            admin_id=admin_id,
            username=username,
            created_at=now,
            expires_at=now + self.ttl
        )
        self._sessions[session.session_id] = session

        token = create_session_token(
            session.session_id,
            admin_id,
            session.expires_at,
            self.secret_key,
            self.algorithm
        )
        return session, token

    def resolve(self, token: Optional[str], now: Optional[datetime] = None) -> Optional[AdminSession]:
        """Live session for a cookie value, or None"""
        if not token:
            return None

        payload = decode_session_token(token, self.secret_key, self.algorithm)
        if not payload:
            return None

        session = self._sessions.get(payload.get("sid"))
        if session is None:
            return None

        if session.is_expired(now):
            self._sessions.pop(session.session_id, None)
            return None

        return session

    def destroy(self, token: Optional[str]) -> None:
        """Forget the session behind a cookie value; unknown tokens are ignored"""
        if not token:
            return

        payload = decode_session_token(token, self.secret_key, self.algorithm)
        if payload:
            self._sessions.pop(payload.get("sid"), None)

    def purge_expired(self, now: Optional[datetime] = None) -> int:
        expired = [sid for sid, s in self._sessions.items() if s.is_expired(now)]
        for sid in expired:
            del self._sessions[sid]
        return len(expired)


def ensure_admin(session: Optional[AdminSession]) -> AdminSession:
    """Services call this before acting on behalf of an admin"""
    if session is None or session.is_expired():
        raise Unauthorized()
    return session


class AuthService:
    def __init__(self, store: Store, sessions: SessionManager):
        self.store = store
        self.sessions = sessions

    async def login(self, username: Optional[str], password: Optional[str]) -> Tuple[AdminSession, str]:
        if not username or not password:
            raise ValidationError("Username and password required")

        admin = await self.store.find_admin(username)
        if not admin:
            logger.info(f"[Auth] ❌ Unknown admin '{username}'")
            raise InvalidCredentials()

        # bcrypt is CPU bound
        if not await run_in_threadpool(verify_password, password, admin.password):
            logger.info(f"[Auth] ❌ Wrong password for '{username}'")
            raise InvalidCredentials()

        session, token = self.sessions.create(admin.id, admin.username)
        logger.info(f"[Auth] ✅ Admin '{admin.username}' logged in")
        return session, token

    def logout(self, token: Optional[str]) -> None:
        self.sessions.destroy(token)
        logger.info("[Auth] Session closed")

from datetime import datetime, timezone
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext

# Hashing context for admin passwords
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a password with bcrypt"""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against its stored hash"""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        # Unknown or malformed hash in the table
        return False


def create_session_token(
    session_id: str,
    admin_id: int,
    expires_at: datetime,
    secret_key: str,
    algorithm: str = "HS256"
) -> str:
    """
    Sign the cookie value for a server-side session.

    The token only carries the session id; the session record itself stays
    in the SessionManager.
    """
    to_encode = {
        "sid": session_id,
        "sub": str(admin_id),
        "exp": expires_at.astimezone(timezone.utc),
    }
    return jwt.encode(to_encode, secret_key, algorithm=algorithm)


def decode_session_token(
    token: str,
    secret_key: str,
    algorithm: str = "HS256"
) -> Optional[dict]:
    """
    Verify and decode a session cookie.

    Returns:
        The payload when the signature and expiry are valid, None otherwise
    """
    try:
        return jwt.decode(token, secret_key, algorithms=[algorithm])
    except JWTError:
        return None

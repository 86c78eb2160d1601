from typing import Optional, Dict, Any
from datetime import datetime, timedelta, timezone
import logging
import os
import bcrypt
import jwt
from services.storage_svc import Storage

logger = logging.getLogger(__name__)

JWT_SECRET = os.getenv("JWT_SECRET", "change-this-secret-in-production")
JWT_ALGORITHM = "HS256"
SESSION_HOURS = 24
# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


class AuthError(Exception):
    """Raised on invalid credentials."""


# ============================================================================
# Password Hashing
# ============================================================================

def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """Hash a password using bcrypt"""
    hashed = bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt())
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against a stored bcrypt hash"""
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
    except ValueError:
        # Not a bcrypt hash
        return False


# ============================================================================
# User Management Functions
# ============================================================================

def public_user(user: Dict[str, Any]) -> Dict[str, Any]:
    return {"id": user["id"], "username": user["username"]}


def register_user(storage: Storage, username: str, password: str, user_id: Optional[str] = None) -> Dict[str, Any]:
    """
    Create a user with a salted password hash.
    Raises ValueError if the username is already taken.
    """
    username = username.strip()
    if storage.get_user_by_username(username):
        raise ValueError("User already exists")

    user = storage.create_user({
        "id": user_id,
        "username": username,
        "passwordHash": hash_password(password),
    })
    logger.info(f"👤 Registered user {user['id']}")
    return public_user(user)


def create_session_token(user: Dict[str, Any]) -> Dict[str, Any]:
    """Sign a 24-hour session JWT for the user."""
    issued_at = datetime.now(timezone.utc)
    expiration = issued_at + timedelta(hours=SESSION_HOURS)

    payload = {
        "uid": user["id"],
        "username": user["username"],
        "exp": expiration,
        "iat": issued_at,
    }
    token = jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)

    return {"token": token, "expiresAt": expiration.isoformat()}


def login_user(storage: Storage, username: str, password: str) -> Dict[str, Any]:
    """Verify credentials and return the user plus a session token."""
    user = storage.get_user_by_username(username.strip())
    if not user or not verify_password(password, user.get("passwordHash", "")):
        raise AuthError("Invalid credentials")

    return {"user": public_user(user), **create_session_token(user)}


def decode_session_token(token: str) -> Optional[Dict[str, Any]]:
    """Return the token claims, or None if it is invalid or expired."""
    try:
        return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.info("Session token expired")
        return None
    except jwt.InvalidTokenError:
        return None

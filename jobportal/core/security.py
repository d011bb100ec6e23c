import hashlib
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import bcrypt
from jose import JWTError, jwt

from jobportal.config import settings

CANDIDATE = "candidate"
EMPLOYER = "employer"
ROLES = (CANDIDATE, EMPLOYER)


@dataclass(frozen=True)
class Actor:
    """Identity attached to a request once its bearer token checks out."""

    id: str
    email: str | None
    phone: str | None
    role: str


def _prehash(password: str) -> bytes:
    """Pre-hash to avoid bcrypt's 72-byte limit."""
    return hashlib.sha256(password.encode()).digest()


def hash_password(password: str) -> str:
    return bcrypt.hashpw(_prehash(password), bcrypt.gensalt()).decode()


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(_prehash(plain), hashed.encode())
    except ValueError:
        return False


def token_lifetime(role: str) -> timedelta:
    if role == EMPLOYER:
        return timedelta(minutes=settings.employer_token_expire_minutes)
    return timedelta(minutes=settings.candidate_token_expire_minutes)


def create_access_token(
    user_id: str,
    email: str | None,
    phone: str | None,
    role: str,
    expires_delta: timedelta | None = None,
) -> str:
    expire = datetime.now(timezone.utc) + (expires_delta if expires_delta is not None else token_lifetime(role))
    to_encode = {"id": user_id, "email": email, "phone": phone, "role": role, "exp": expire}
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> Actor | None:
    """Verify signature and expiry. Returns None when the token is unusable."""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        return None
    user_id = payload.get("id")
    if not user_id:
        return None
    return Actor(
        id=str(user_id),
        email=payload.get("email"),
        phone=payload.get("phone"),
        role=payload.get("role") or "",
    )


def generate_id() -> str:
    return str(uuid4())

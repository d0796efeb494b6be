# faqaas/utils/security.py
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

ALGORITHM = "HS256"
ADMIN_SUBJECT = "admin"
ADMIN_EMAIL = "admin"
ADMIN_SESSION_DURATION = timedelta(hours=24)
# Leeway for matching the expiry claim
TOKEN_LEEWAY = timedelta(minutes=1)
BCRYPT_ROUNDS = 12


def get_password_hash(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(plain_password.encode(), hashed_password.encode())
    except ValueError:
        # Not a bcrypt hash at all
        return False


def is_admin_login(email: str, password: str, admin_password_hash: str) -> bool:
    if email != ADMIN_EMAIL:
        return False
    return verify_password(password, admin_password_hash)


def create_access_token(key: str, expires_at: datetime) -> str:
    payload = {"sub": ADMIN_SUBJECT, "exp": expires_at}
    return jwt.encode(payload, key, algorithm=ALGORITHM)


def new_admin_session(key: str) -> tuple[str, datetime]:
    """Mints a token for a fresh admin session; returns it with its expiry."""
    expires_at = datetime.now(timezone.utc) + ADMIN_SESSION_DURATION
    return create_access_token(key, expires_at), expires_at


def is_valid_admin_token(token: str | None, key: str) -> bool:
    if not token:
        return False
    try:
        payload = jwt.decode(
            token,
            key,
            algorithms=[ALGORITHM],
            leeway=TOKEN_LEEWAY,
            options={"require": ["exp", "sub"]},
        )
    except jwt.InvalidTokenError:
        return False
    return payload.get("sub") == ADMIN_SUBJECT

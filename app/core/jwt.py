from datetime import datetime, timedelta, timezone
from jose import jwt, JWTError

from app.core.config import JWT_SECRET, JWT_ALGORITHM, JWT_EXPIRE_DAYS


# -------- CREATE TOKEN --------
def create_access_token(subject_id: int, expires_delta: timedelta | None = None) -> str:
    """Generate a signed JWT carrying the admin id as `sub`"""
    expire = datetime.now(timezone.utc) + (
        expires_delta if expires_delta is not None else timedelta(days=JWT_EXPIRE_DAYS)
    )
    to_encode = {"sub": str(subject_id), "exp": expire}
    return jwt.encode(to_encode, JWT_SECRET, algorithm=JWT_ALGORITHM)


# -------- DECODE TOKEN --------
def decode_access_token(token: str) -> int | None:
    """Return the subject id, or None for malformed, tampered or expired tokens"""
    try:
        payload = jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except JWTError:
        return None

    sub = payload.get("sub")
    if not isinstance(sub, str) or not sub.isdigit():
        return None
    return int(sub)

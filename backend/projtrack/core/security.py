"""Password hashing and bearer-token helpers."""
from __future__ import annotations
from datetime import datetime, timedelta, timezone

import bcrypt
from jose import JWTError, jwt

from projtrack.core.config import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES, BCRYPT_ROUNDS
from projtrack.domain.errors import AuthenticationError


# ------------------------------------------------------------------
# Password hashing (direct bcrypt, no passlib)
# ------------------------------------------------------------------
def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8"),
        )
    except ValueError:
        # Malformed hash or a password bcrypt refuses (over 72 bytes)
        return False


# ------------------------------------------------------------------
# JWT
# ------------------------------------------------------------------
def create_token(user_id: str, username: str | None, user_type: str) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {
        "sub": user_id,
        "username": username,
        "type": user_type,
        "exp": expire,
    }
    return jwt.encode(payload, SECRET_KEY, algorithm=ALGORITHM)


def decode_token(token: str) -> dict:
    try:
        return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError as e:
        raise AuthenticationError(f"Invalid token: {e}")

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
from jose import JWTError, jwt
from pydantic import BaseModel, ValidationError

from .config import settings

ALGORITHM = "HS256"
AUDIENCE = "equiptrack-dashboard"
ISSUER = "equiptrack"

ROLE_SUPER_ADMIN = "SUPER_ADMIN"
ROLE_USER = "USER"
ROLES = (ROLE_SUPER_ADMIN, ROLE_USER)

# bcrypt only looks at the first 72 bytes of a secret.
_BCRYPT_MAX_BYTES = 72


class AccessToken(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int


class TokenPayload(BaseModel):
    sub: str
    role: str
    exp: datetime
    iat: datetime
    aud: str
    iss: str
    name: str | None = None
    email: str | None = None
    employeeId: str | None = None

    @property
    def subject_id(self) -> int:
        return int(self.sub)


def _now() -> datetime:
    return datetime.now(tz=timezone.utc)


def _secret_bytes(plain: str) -> bytes:
    return plain.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(plain: str, rounds: int | None = None) -> str:
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_secret_bytes(plain), salt).decode("utf-8")


def verify_password(plain: str, hashed: str | None) -> bool:
    if not hashed:
        return False
    try:
        return bcrypt.checkpw(_secret_bytes(plain), hashed.encode("utf-8"))
    except ValueError:
        # Malformed hash stored in the database.
        return False


def issue_access_token(subject: int | str, role: str, **claims: Any) -> AccessToken:
    if role not in ROLES:
        raise ValueError(f"Unknown role {role!r}")
    now = _now()
    expires_delta = timedelta(minutes=settings.JWT_ACCESS_TTL_MIN)
    payload: dict[str, Any] = {
        "sub": str(subject),
        "role": role,
        "iat": int(now.timestamp()),
        "exp": int((now + expires_delta).timestamp()),
        "aud": AUDIENCE,
        "iss": ISSUER,
    }
    payload.update({key: value for key, value in claims.items() if value is not None})
    token = jwt.encode(payload, settings.JWT_SECRET, algorithm=ALGORITHM)
    return AccessToken(access_token=token, expires_in=int(expires_delta.total_seconds()))


def decode_token(token: str) -> TokenPayload:
    try:
        decoded = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[ALGORITHM],
            audience=AUDIENCE,
            issuer=ISSUER,
        )
    except JWTError as exc:
        raise ValueError("Invalid token") from exc
    try:
        payload = TokenPayload.model_validate(decoded)
    except ValidationError as exc:
        raise ValueError("Invalid token payload") from exc
    if payload.role not in ROLES or not payload.sub.isdigit():
        raise ValueError("Invalid token payload")
    return payload

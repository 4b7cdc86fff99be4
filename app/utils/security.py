# app/utils/security.py
from datetime import datetime, timedelta, timezone
from enum import Enum

import jwt

from app.utils.settings import JWT_SECRET, JWT_ALGORITHM, JWT_EXPIRES_MINUTES


class Role(str, Enum):
    """Role uzytkownika w kolejnosci uprawnien: user < admin < superadmin."""

    USER = "user"
    ADMIN = "admin"
    SUPERADMIN = "superadmin"

    @property
    def rank(self) -> int:
        return _ROLE_RANK[self]

    @classmethod
    def parse(cls, value: str | None) -> "Role":
        # w bazie bywa "Admin", "SuperAdmin" itp.
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.USER

    def allows(self, required: "Role") -> bool:
        return self.rank >= required.rank


_ROLE_RANK = {Role.USER: 0, Role.ADMIN: 1, Role.SUPERADMIN: 2}


def create_access_token(user_id: str, expires_minutes: int | None = None) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "id": user_id,
        "iat": now,
        "exp": now + timedelta(minutes=JWT_EXPIRES_MINUTES if expires_minutes is None else expires_minutes),
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    """Rzuca jwt.InvalidTokenError przy zlym podpisie / wygasnieciu."""
    return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])

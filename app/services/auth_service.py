# app/services/auth_service.py
import jwt
from sqlalchemy.orm import Session

from app.data.models.user import UserModel
from app.domain.errors import UnauthorizedError, ForbiddenError
from app.repos.user_repo import UserRepo
from app.utils.logging import get_logger
from app.utils.security import Role, decode_access_token

logger = get_logger(__name__)


class AuthService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def authenticate(self, authorization: str | None) -> UserModel:
        """Naglowek 'Authorization: Bearer <token>' -> rekord usera."""
        scheme, _, token = (authorization or "").partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            raise UnauthorizedError("Not authorized, no token")

        try:
            payload = decode_access_token(token.strip())
        except jwt.InvalidTokenError as e:
            logger.info(f"Rejected token: {e}")
            raise UnauthorizedError("Not authorized, token failed")

        user_id = payload.get("id")
        user = self.repo.get_user(str(user_id)) if user_id else None
        if not user:
            raise UnauthorizedError("Not authorized, user not found")
        return user

    @staticmethod
    def authorize(user: UserModel, required: Role) -> UserModel:
        if not Role.parse(user.role).allows(required):
            raise ForbiddenError(f"Not authorized as {required.value}")
        return user

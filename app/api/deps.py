# app/api/deps.py
from typing import Annotated

from fastapi import Depends, HTTPException, Header, Path
from pydantic import AfterValidator
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.data.models.user import UserModel
from app.domain.errors import DomainError
from app.domain.schemas import OBJECT_ID_PATTERN, normalize_object_id
from app.services.auth_service import AuthService
from app.utils.security import Role

ObjectIdPath = Annotated[
    str,
    Path(pattern=OBJECT_ID_PATTERN, description="Id (24 hex)"),
    AfterValidator(normalize_object_id),
]


def get_current_user(
    authorization: str | None = Header(None),
    db: Session = Depends(get_db),
) -> UserModel:
    try:
        return AuthService(db).authenticate(authorization)
    except DomainError as e:
        raise HTTPException(
            status_code=e.status_code,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )


def require_role(required: Role):
    def dependency(user: UserModel = Depends(get_current_user)) -> UserModel:
        try:
            return AuthService.authorize(user, required)
        except DomainError as e:
            raise HTTPException(status_code=e.status_code, detail=e.message)

    return dependency


require_admin = require_role(Role.ADMIN)

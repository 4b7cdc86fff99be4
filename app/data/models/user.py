from sqlalchemy import Column, String

from app.data.database import Base
from app.data.models.base import IdentityMixin


class UserModel(IdentityMixin, Base):
    __tablename__ = "users"

    name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True)
    # "Admin", "superadmin", ... - parsowane do Role
    role = Column(String, nullable=False, default="user")

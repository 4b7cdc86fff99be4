from sqlalchemy import Column, String, Text

from app.data.database import Base
from app.data.models.base import IdentityMixin

ACTIVITY_CATEGORIES = (
    "User Login",
    "Product Added",
    "Product Updated",
    "Product Deleted",
    "Page Viewed",
    "Settings Changed",
    "Add to card",
    "Password Changed",
    "Profile Updated",
    "Other",
)


class ActivityLogModel(IdentityMixin, Base):
    __tablename__ = "activity_logs"

    category = Column(String, nullable=False, default="Other")
    description = Column(Text, nullable=True)
    user_email = Column(String, nullable=True)
    user_name = Column(String, nullable=True)

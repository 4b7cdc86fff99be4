from sqlalchemy import Column, String, ForeignKey, UniqueConstraint

from app.data.database import Base
from app.data.models.base import IdentityMixin


class WishlistItemModel(IdentityMixin, Base):
    __tablename__ = "wishlist_items"

    user_id = Column(String(24), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(String(24), nullable=False)

    __table_args__ = (UniqueConstraint("user_id", "product_id", name="u_wishlist_user_product"),)

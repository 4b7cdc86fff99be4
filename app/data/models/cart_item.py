from sqlalchemy import Column, String, Integer, ForeignKey, UniqueConstraint

from app.data.database import Base
from app.data.models.base import IdentityMixin


class CartItemModel(IdentityMixin, Base):
    __tablename__ = "cart_items"

    user_id = Column(String(24), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    # bez FK - produkt moze zostac usuniety, wiersz zostaje (ukryty w podsumowaniu)
    product_id = Column(String(24), nullable=False)

    quantity = Column(Integer, nullable=False, default=1)

    __table_args__ = (UniqueConstraint("user_id", "product_id", name="u_cart_user_product"),)

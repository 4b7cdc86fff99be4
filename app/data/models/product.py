# app/data/models/product.py
from sqlalchemy import Column, String, Float, Integer, Boolean, Text

from app.data.database import Base
from app.data.models.base import IdentityMixin


class ProductModel(IdentityMixin, Base):
    __tablename__ = "products"

    name = Column(String, nullable=False)
    category = Column(String, nullable=False, index=True)
    type = Column(String, nullable=False, index=True)
    brand = Column(String, nullable=True)
    # NULL dozwolone wielokrotnie, wartosc unikalna
    sku = Column(String, nullable=True, unique=True)

    price = Column(Float, nullable=False)
    old_price = Column(Float, nullable=True)
    rating = Column(Float, nullable=False, default=0)
    badge = Column(String, nullable=True)
    image = Column(String, nullable=False, default="")

    description = Column(Text, nullable=False, default="")
    stock = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True, index=True)

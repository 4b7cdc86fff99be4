# app/repos/cart_repo.py
from typing import List

from sqlalchemy import select, delete
from sqlalchemy.orm import Session

from app.data.models.cart_item import CartItemModel


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_items(self, user_id: str) -> List[CartItemModel]:
        stmt = (
            select(CartItemModel)
            .where(CartItemModel.user_id == user_id)
            .order_by(CartItemModel.created_at, CartItemModel.id)
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_item(self, item_id: str, user_id: str) -> CartItemModel | None:
        #tylko wlasny item usera
        stmt = select(CartItemModel).where(
            CartItemModel.id == item_id,
            CartItemModel.user_id == user_id,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get_item_by_product(self, user_id: str, product_id: str) -> CartItemModel | None:
        stmt = select(CartItemModel).where(
            CartItemModel.user_id == user_id,
            CartItemModel.product_id == product_id,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def add_item(self, item: CartItemModel) -> None:
        self.db.add(item)
        self.db.flush()

    def delete_item(self, item_id: str, user_id: str) -> int:
        result = self.db.execute(
            delete(CartItemModel).where(
                CartItemModel.id == item_id,
                CartItemModel.user_id == user_id,
            )
        )
        return result.rowcount

    def clear(self, user_id: str) -> int:
        result = self.db.execute(delete(CartItemModel).where(CartItemModel.user_id == user_id))
        return result.rowcount

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()

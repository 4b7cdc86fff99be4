# app/repos/wishlist_repo.py
from typing import List

from sqlalchemy import select, delete
from sqlalchemy.orm import Session

from app.data.models.wishlist_item import WishlistItemModel


class WishlistRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_items(self, user_id: str) -> List[WishlistItemModel]:
        stmt = (
            select(WishlistItemModel)
            .where(WishlistItemModel.user_id == user_id)
            .order_by(WishlistItemModel.created_at, WishlistItemModel.id)
        )
        return list(self.db.execute(stmt).scalars().all())

    def add_item(self, item: WishlistItemModel) -> WishlistItemModel:
        self.db.add(item)
        self.db.flush()
        return item

    def delete_by_product(self, user_id: str, product_id: str) -> int:
        result = self.db.execute(
            delete(WishlistItemModel).where(
                WishlistItemModel.user_id == user_id,
                WishlistItemModel.product_id == product_id,
            )
        )
        return result.rowcount

    def clear(self, user_id: str) -> int:
        result = self.db.execute(delete(WishlistItemModel).where(WishlistItemModel.user_id == user_id))
        return result.rowcount

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()

    def refresh(self, item: WishlistItemModel) -> None:
        self.db.refresh(item)

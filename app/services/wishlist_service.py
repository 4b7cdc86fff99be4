# app/services/wishlist_service.py
from typing import Dict, Any, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.data.models.wishlist_item import WishlistItemModel
from app.domain.errors import NotFoundError, ConflictError
from app.repos.product_repo import ProductRepo
from app.repos.wishlist_repo import WishlistRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


class WishlistService:
    def __init__(self, db: Session):
        self.repo = WishlistRepo(db)
        self.products = ProductRepo(db)

    def get_wishlist(self, user_id: str) -> List[Dict[str, Any]]:
        items = self.repo.get_items(user_id)
        products = self.products.get_products(i.product_id for i in items)

        result = []
        for item in items:
            product = products.get(item.product_id)
            if product is None or not product.is_active:
                continue
            result.append(
                {
                    "id": item.id,
                    "user_id": item.user_id,
                    "product": product,
                    "created_at": item.created_at,
                    "updated_at": item.updated_at,
                }
            )
        return result

    def add_item(self, user_id: str, product_id: str) -> WishlistItemModel:
        product = self.products.get_active_product(product_id)
        if not product:
            raise NotFoundError("Product not found")

        #bez sprawdzania duplikatu - decyduje unikalny indeks
        try:
            item = self.repo.add_item(WishlistItemModel(user_id=user_id, product_id=product_id))
            self.repo.commit()
        except IntegrityError:
            self.repo.rollback()
            raise ConflictError("Product already in wishlist")

        self.repo.refresh(item)
        logger.info(f"Product {product_id} added to wishlist of user {user_id}")
        return item

    def remove_item(self, user_id: str, product_id: str) -> Dict[str, Any]:
        removed = self.repo.delete_by_product(user_id, product_id)
        if not removed:
            self.repo.rollback()
            raise NotFoundError("Wishlist item not found")

        self.repo.commit()
        logger.info(f"Product {product_id} removed from wishlist of user {user_id}")
        return {"message": "Removed from wishlist", "product_id": product_id}

    def clear(self, user_id: str) -> Dict[str, Any]:
        removed = self.repo.clear(user_id)
        self.repo.commit()
        logger.info(f"Wishlist of user {user_id} cleared ({removed} items)")
        return {"message": "Wishlist cleared"}

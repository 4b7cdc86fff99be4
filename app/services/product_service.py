# app/services/product_service.py
import math
from typing import Dict, Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel
from app.data.models.user import UserModel
from app.domain.errors import NotFoundError, ConflictError
from app.domain.schemas import ProductCreate, ProductUpdate, ProductFilter
from app.repos.product_repo import ProductRepo
from app.services.activity_service import ActivityService
from app.utils.logging import get_logger

logger = get_logger(__name__)

# pola schematu -> kolumny modelu sa 1:1
_PRODUCT_FIELDS = (
    "name", "category", "type", "brand", "sku", "price", "old_price",
    "rating", "badge", "image", "description", "stock", "is_active",
)


class ProductService:
    """
    Katalog produktow: listing z filtrami, CRUD i miekkie wylaczanie (toggle).
    SKU unikalne - sprawdzane przed zapisem, unikalny indeks jako backstop.
    """

    def __init__(self, db: Session, activity_service: ActivityService | None = None):
        self.repo = ProductRepo(db)
        self.activity = activity_service or ActivityService()

    #query
    def list_products(self, flt: ProductFilter) -> Dict[str, Any]:
        items, total = self.repo.search(flt)
        return {
            "items": items,
            "page": flt.page,
            "limit": flt.limit,
            "total": total,
            "pages": math.ceil(total / flt.limit),
        }

    def get_product(self, product_id: str) -> ProductModel:
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFoundError("Product not found")
        return product

    #commands
    def create_product(self, payload: ProductCreate, actor: UserModel | None = None) -> ProductModel:
        if payload.sku and self.repo.find_by_sku(payload.sku):
            raise ConflictError(f"Product with sku '{payload.sku}' already exists")

        product = ProductModel(**payload.model_dump(include=set(_PRODUCT_FIELDS)))
        self._save(product, payload.sku, new=True)

        logger.info(f"Product {product.id} created ({product.name})")
        self.activity.record("Product Added", f"{product.name} ({product.id})", actor)
        return product

    def update_product(self, product_id: str, payload: ProductUpdate, actor: UserModel | None = None) -> ProductModel:
        product = self.get_product(product_id)
        changes = payload.model_dump(exclude_unset=True, include=set(_PRODUCT_FIELDS))

        sku = changes.get("sku")
        if sku and self.repo.find_by_sku(sku, exclude_id=product.id):
            raise ConflictError(f"Product with sku '{sku}' already exists")

        for field, value in changes.items():
            setattr(product, field, value)
        self._save(product, sku)

        logger.info(f"Product {product.id} updated: {sorted(changes)}")
        self.activity.record("Product Updated", f"{product.name} ({product.id})", actor)
        return product

    def toggle_active(self, product_id: str, actor: UserModel | None = None) -> ProductModel:
        product = self.get_product(product_id)
        product.is_active = not product.is_active
        self._save(product, None)

        state = "activated" if product.is_active else "deactivated"
        logger.info(f"Product {product.id} {state}")
        self.activity.record("Product Updated", f"{product.name} ({product.id}) {state}", actor)
        return product

    def delete_product(self, product_id: str, actor: UserModel | None = None) -> Dict[str, Any]:
        product = self.get_product(product_id)
        name = product.name

        self.repo.delete_product(product)
        self.repo.commit()

        logger.info(f"Product {product_id} deleted")
        self.activity.record("Product Deleted", f"{name} ({product_id})", actor)
        return {"message": "Product deleted", "id": product_id}

    def _save(self, product: ProductModel, sku: str | None, new: bool = False):
        try:
            if new:
                self.repo.add_product(product)
            self.repo.commit()
        except IntegrityError:
            # ktos zajal sku miedzy sprawdzeniem a zapisem
            self.repo.rollback()
            raise ConflictError(f"Product with sku '{sku}' already exists")
        self.repo.refresh(product)

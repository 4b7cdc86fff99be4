# app/repos/product_repo.py
from typing import Dict, Iterable, List, Tuple

from sqlalchemy import select, func, or_
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel
from app.domain.schemas import ProductFilter, ProductSort

_SORT_COLUMNS = {
    ProductSort.PRICE_LOW: (ProductModel.price.asc(), ProductModel.id.asc()),
    ProductSort.PRICE_HIGH: (ProductModel.price.desc(), ProductModel.id.asc()),
    ProductSort.RATING_HIGH: (ProductModel.rating.desc(), ProductModel.id.asc()),
    ProductSort.NEWEST: (ProductModel.created_at.desc(), ProductModel.id.desc()),
    ProductSort.OLDEST: (ProductModel.created_at.asc(), ProductModel.id.asc()),
}


def _like_pattern(term: str) -> str:
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_product(self, product_id: str) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def get_active_product(self, product_id: str) -> ProductModel | None:
        stmt = select(ProductModel).where(
            ProductModel.id == product_id,
            ProductModel.is_active.is_(True),
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get_products(self, product_ids: Iterable[str]) -> Dict[str, ProductModel]:
        ids = set(product_ids)
        if not ids:
            return {}
        stmt = select(ProductModel).where(ProductModel.id.in_(ids))
        return {p.id: p for p in self.db.execute(stmt).scalars().all()}

    def find_by_sku(self, sku: str, exclude_id: str | None = None) -> ProductModel | None:
        stmt = select(ProductModel).where(ProductModel.sku == sku)
        if exclude_id:
            stmt = stmt.where(ProductModel.id != exclude_id)
        return self.db.execute(stmt).scalars().first()

    def search(self, flt: ProductFilter) -> Tuple[List[ProductModel], int]:
        conditions = []

        if flt.active == "true":
            conditions.append(ProductModel.is_active.is_(True))
        elif flt.active == "false":
            conditions.append(ProductModel.is_active.is_(False))

        if flt.type and flt.type != "all":
            conditions.append(ProductModel.type == flt.type)
        if flt.category and flt.category != "all":
            conditions.append(ProductModel.category == flt.category)

        if flt.search:
            pattern = _like_pattern(flt.search)
            conditions.append(
                or_(
                    ProductModel.name.ilike(pattern, escape="\\"),
                    ProductModel.category.ilike(pattern, escape="\\"),
                    ProductModel.type.ilike(pattern, escape="\\"),
                    ProductModel.brand.ilike(pattern, escape="\\"),
                    ProductModel.sku.ilike(pattern, escape="\\"),
                )
            )

        total = self.db.execute(
            select(func.count()).select_from(ProductModel).where(*conditions)
        ).scalar_one()

        stmt = (
            select(ProductModel)
            .where(*conditions)
            .order_by(*_SORT_COLUMNS[flt.sort])
            .offset((flt.page - 1) * flt.limit)
            .limit(flt.limit)
        )
        items = list(self.db.execute(stmt).scalars().all())
        return items, total

    def add_product(self, product: ProductModel) -> None:
        self.db.add(product)
        self.db.flush()

    def delete_product(self, product: ProductModel) -> None:
        self.db.delete(product)

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()

    def refresh(self, product: ProductModel) -> None:
        self.db.refresh(product)

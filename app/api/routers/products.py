# app/api/routers/products.py
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.api.deps import ObjectIdPath, require_admin
from app.data.database import get_db
from app.data.models.user import UserModel
from app.domain.errors import DomainError
from app.domain.schemas import (
    ProductCreate,
    ProductUpdate,
    ProductFilter,
    ProductOut,
    ProductPageOut,
    ProductDeletedOut,
)
from app.services.product_service import ProductService
from app.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/products", tags=["products"])

def get_service(db: Session):
    return ProductService(db=db)


def product_filter(
    search: str | None = Query(None),
    type: str | None = Query(None),
    category: str | None = Query(None),
    sort: str | None = Query(None, description="price-low|price-high|rating-high|newest|oldest"),
    page: str | None = Query(None),
    limit: str | None = Query(None),
    active: str | None = Query(None, description="true|false|all"),
) -> ProductFilter:
    #nieprawidlowe page/limit/sort nie sa bledem - ProductFilter je normalizuje
    return ProductFilter(
        search=search,
        type=type,
        category=category,
        sort=sort,
        page=page,
        limit=limit,
        active=active,
    )


# Public
@router.get("", response_model=ProductPageOut)
def list_products(
    flt: ProductFilter = Depends(product_filter),
    db: Session = Depends(get_db),
):
    try:
        return get_service(db).list_products(flt)
    except Exception:
        logger.exception("Error fetching products")
        raise HTTPException(status_code=500, detail="Error fetching products")


@router.get("/{product_id}", response_model=ProductOut)
def get_product(
    product_id: ObjectIdPath,
    db: Session = Depends(get_db),
):
    try:
        return get_service(db).get_product(product_id)
    except DomainError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception:
        logger.exception("Error fetching product")
        raise HTTPException(status_code=500, detail="Error fetching product")


# Admin
@router.post("", response_model=ProductOut, status_code=201)
def create_product(
    payload: ProductCreate,
    admin: UserModel = Depends(require_admin),
    db: Session = Depends(get_db),
):
    try:
        return get_service(db).create_product(payload, actor=admin)
    except DomainError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception:
        logger.exception("Error creating product")
        raise HTTPException(status_code=500, detail="Error creating product")


@router.put("/{product_id}", response_model=ProductOut)
def update_product(
    payload: ProductUpdate,
    product_id: ObjectIdPath,
    admin: UserModel = Depends(require_admin),
    db: Session = Depends(get_db),
):
    try:
        return get_service(db).update_product(product_id, payload, actor=admin)
    except DomainError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception:
        logger.exception("Error updating product")
        raise HTTPException(status_code=500, detail="Error updating product")


@router.patch("/{product_id}/toggle", response_model=ProductOut)
def toggle_product_active(
    product_id: ObjectIdPath,
    admin: UserModel = Depends(require_admin),
    db: Session = Depends(get_db),
):
    try:
        return get_service(db).toggle_active(product_id, actor=admin)
    except DomainError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception:
        logger.exception("Error toggling product active")
        raise HTTPException(status_code=500, detail="Error toggling product active")


@router.delete("/{product_id}", response_model=ProductDeletedOut)
def delete_product(
    product_id: ObjectIdPath,
    admin: UserModel = Depends(require_admin),
    db: Session = Depends(get_db),
):
    try:
        return get_service(db).delete_product(product_id, actor=admin)
    except DomainError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception:
        logger.exception("Error deleting product")
        raise HTTPException(status_code=500, detail="Error deleting product")

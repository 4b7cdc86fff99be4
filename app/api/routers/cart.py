# app/api/routers/cart.py
from fastapi import APIRouter, Depends, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.api.deps import ObjectIdPath, get_current_user
from app.data.database import get_db
from app.data.models.user import UserModel
from app.domain.errors import DomainError, CartConflictError
from app.domain.schemas import (
    AddToCartIn,
    UpdateQuantityIn,
    CartSummaryOut,
    CartClearedOut,
)
from app.services.cart_service import CartService
from app.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(db: Session):
    return CartService(db=db)


@router.get("", response_model=CartSummaryOut)
def get_cart(
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.get_summary(user.id)
    except Exception:
        logger.exception("Error fetching cart")
        raise HTTPException(status_code=500, detail="Error fetching cart")


@router.post("", response_model=CartSummaryOut, status_code=201)
def add_to_cart(
    payload: AddToCartIn,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.add_item(user, payload.product_id, payload.quantity)
    except CartConflictError as e:
        #wyscig - 409 razem z aktualnym koszykiem
        summary = CartSummaryOut.model_validate(e.summary, from_attributes=True)
        content = {"detail": e.message, **summary.model_dump(by_alias=True)}
        return JSONResponse(status_code=409, content=jsonable_encoder(content))
    except DomainError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception:
        logger.exception("Error adding to cart")
        raise HTTPException(status_code=500, detail="Error adding to cart")


@router.patch("/{item_id}", response_model=CartSummaryOut)
def update_cart_quantity(
    payload: UpdateQuantityIn,
    item_id: ObjectIdPath,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.update_quantity(user.id, item_id, payload.quantity)
    except DomainError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception:
        logger.exception("Error updating cart quantity")
        raise HTTPException(status_code=500, detail="Error updating cart quantity")


@router.delete("/{item_id}", response_model=CartSummaryOut)
def remove_cart_item(
    item_id: ObjectIdPath,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.remove_item(user.id, item_id)
    except DomainError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception:
        logger.exception("Error removing cart item")
        raise HTTPException(status_code=500, detail="Error removing cart item")


@router.delete("", response_model=CartClearedOut)
def clear_cart(
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.clear(user.id)
    except Exception:
        logger.exception("Error clearing cart")
        raise HTTPException(status_code=500, detail="Error clearing cart")

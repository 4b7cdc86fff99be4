# app/api/routers/wishlist.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.deps import ObjectIdPath, get_current_user
from app.data.database import get_db
from app.data.models.user import UserModel
from app.domain.errors import DomainError
from app.domain.schemas import (
    AddToWishlistIn,
    WishlistItemOut,
    WishlistEntryOut,
    WishlistRemovedOut,
    MessageOut,
)
from app.services.wishlist_service import WishlistService
from app.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/wishlist", tags=["wishlist"])


@router.get("", response_model=List[WishlistEntryOut])
def get_wishlist(
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return WishlistService(db).get_wishlist(user.id)
    except Exception:
        logger.exception("Error fetching wishlist")
        raise HTTPException(status_code=500, detail="Error fetching wishlist")


@router.post("", response_model=WishlistItemOut, status_code=201)
def add_to_wishlist(
    payload: AddToWishlistIn,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return WishlistService(db).add_item(user.id, payload.product_id)
    except DomainError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception:
        logger.exception("Error adding to wishlist")
        raise HTTPException(status_code=500, detail="Error adding to wishlist")


@router.delete("/{product_id}", response_model=WishlistRemovedOut)
def remove_wishlist_item(
    product_id: ObjectIdPath,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return WishlistService(db).remove_item(user.id, product_id)
    except DomainError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception:
        logger.exception("Error removing wishlist item")
        raise HTTPException(status_code=500, detail="Error removing wishlist item")


@router.delete("", response_model=MessageOut)
def clear_wishlist(
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return WishlistService(db).clear(user.id)
    except Exception:
        logger.exception("Error clearing wishlist")
        raise HTTPException(status_code=500, detail="Error clearing wishlist")

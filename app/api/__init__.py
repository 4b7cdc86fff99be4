# app/api/__init__.py
from fastapi import APIRouter

from app.api.routers import products, cart, wishlist

api_router = APIRouter(prefix="/api")
api_router.include_router(products.router)
api_router.include_router(cart.router)
api_router.include_router(wishlist.router)

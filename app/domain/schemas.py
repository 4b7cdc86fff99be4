# app/domain/schemas.py
from datetime import datetime
from enum import Enum
from typing import List

from pydantic import BaseModel, Field, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from app.utils.settings import PRODUCT_PAGE_LIMIT_DEFAULT, PRODUCT_PAGE_LIMIT_MAX

OBJECT_ID_PATTERN = r"^[0-9a-fA-F]{24}$"

#kolumna quantity to Integer (32 bit)
QUANTITY_MAX = 2**31 - 1


def normalize_object_id(value: str) -> str:
    #id w bazie zawsze malymi literami
    return value.lower()


class ApiModel(BaseModel):
    """JSON w camelCase, na wejsciu przyjmujemy tez snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# =====================================================
# PRODUCTS
# =====================================================
class ProductOut(ApiModel):
    id: str
    name: str
    category: str
    type: str
    brand: str | None = None
    sku: str | None = None
    price: float
    old_price: float | None = None
    rating: float = 0
    badge: str | None = None
    image: str = ""
    description: str = ""
    stock: int = 0
    is_active: bool = True
    created_at: datetime
    updated_at: datetime


class ProductCreate(ApiModel):
    """Schema dla tworzenia produktu (stringi przycinane)."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)
    brand: str | None = None
    sku: str | None = None
    price: float = Field(..., ge=0, allow_inf_nan=False)
    old_price: float | None = Field(None, ge=0, allow_inf_nan=False)
    rating: float = Field(0, ge=0, allow_inf_nan=False)
    badge: str | None = None
    image: str = ""
    description: str = ""
    stock: int = 0
    is_active: bool = True

    @field_validator("brand", "sku", "badge")
    @classmethod
    def _blank_as_none(cls, value):
        return value or None


class ProductUpdate(ApiModel):
    """
    Schema dla czesciowej aktualizacji - zmieniane sa tylko pola przeslane
    w body (exclude_unset). Pusty string czysci brand/sku/badge.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = Field(None, min_length=1)
    category: str | None = Field(None, min_length=1)
    type: str | None = Field(None, min_length=1)
    brand: str | None = None
    sku: str | None = None
    price: float | None = Field(None, ge=0, allow_inf_nan=False)
    old_price: float | None = Field(None, ge=0, allow_inf_nan=False)
    rating: float | None = Field(None, ge=0, allow_inf_nan=False)
    badge: str | None = None
    image: str | None = None
    description: str | None = None
    stock: int | None = None
    is_active: bool | None = None

    @field_validator("name", "category", "type", "price", "rating", "stock", "is_active")
    @classmethod
    def _not_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value

    @field_validator("brand", "sku", "badge")
    @classmethod
    def _blank_as_none(cls, value):
        return value or None

    @field_validator("image", "description")
    @classmethod
    def _none_as_blank(cls, value):
        return value or ""


class ProductSort(str, Enum):
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    RATING_HIGH = "rating-high"
    NEWEST = "newest"
    OLDEST = "oldest"


class ProductFilter(BaseModel):
    """Parametry listingu, nieprawidlowe wartosci zamieniane na domyslne."""

    search: str | None = None
    type: str | None = None
    category: str | None = None
    active: str = "true"
    sort: ProductSort = ProductSort.PRICE_HIGH
    page: int = 1
    limit: int = PRODUCT_PAGE_LIMIT_DEFAULT

    @field_validator("search", "type", "category", mode="before")
    @classmethod
    def _strip(cls, value):
        if value is None:
            return None
        value = str(value).strip()
        return value or None

    @field_validator("active", mode="before")
    @classmethod
    def _active(cls, value):
        if value is None:
            return "true"
        value = str(value).strip().lower()
        return value if value in ("true", "false") else "all"

    @field_validator("sort", mode="before")
    @classmethod
    def _sort(cls, value):
        try:
            return ProductSort(value)
        except ValueError:
            return ProductSort.PRICE_HIGH

    @field_validator("page", mode="before")
    @classmethod
    def _page(cls, value):
        try:
            return max(int(value), 1)
        except (TypeError, ValueError):
            return 1

    @field_validator("limit", mode="before")
    @classmethod
    def _limit(cls, value):
        try:
            value = int(value)
        except (TypeError, ValueError):
            return PRODUCT_PAGE_LIMIT_DEFAULT
        return min(max(value, 1), PRODUCT_PAGE_LIMIT_MAX)


class ProductPageOut(ApiModel):
    items: List[ProductOut]
    page: int
    limit: int
    total: int
    pages: int


class ProductDeletedOut(ApiModel):
    message: str
    id: str


# =====================================================
# CART
# =====================================================
class AddToCartIn(ApiModel):
    """Schema dla dodawania produktu do koszyka."""

    product_id: str = Field(..., pattern=OBJECT_ID_PATTERN, description="Id produktu (24 hex)")
    quantity: int = Field(1, description="Ilosc, nieprawidlowa wartosc -> 1")

    @field_validator("product_id")
    @classmethod
    def _lower_id(cls, value):
        return normalize_object_id(value)

    @field_validator("quantity", mode="before")
    @classmethod
    def _coerce_quantity(cls, value):
        try:
            return min(max(int(value), 1), QUANTITY_MAX)
        except (TypeError, ValueError, OverflowError):
            return 1


class UpdateQuantityIn(ApiModel):
    quantity: int = Field(..., ge=1, le=QUANTITY_MAX, description="Nowa ilosc (>= 1)")


class CartLineOut(ApiModel):
    id: str
    user_id: str
    product: ProductOut
    quantity: int
    created_at: datetime
    updated_at: datetime


class CartSummaryOut(ApiModel):
    """Podsumowanie koszyka (response)."""

    items: List[CartLineOut] = []
    count: int = 0
    total: float = 0


class CartClearedOut(CartSummaryOut):
    message: str


# =====================================================
# WISHLIST
# =====================================================
class AddToWishlistIn(ApiModel):
    product_id: str = Field(..., pattern=OBJECT_ID_PATTERN, description="Id produktu (24 hex)")

    @field_validator("product_id")
    @classmethod
    def _lower_id(cls, value):
        return normalize_object_id(value)


class WishlistItemOut(ApiModel):
    id: str
    user_id: str
    product_id: str
    created_at: datetime
    updated_at: datetime


class WishlistEntryOut(ApiModel):
    id: str
    user_id: str
    product: ProductOut
    created_at: datetime
    updated_at: datetime


class WishlistRemovedOut(ApiModel):
    message: str
    product_id: str


# =====================================================
# COMMON
# =====================================================
class MessageOut(ApiModel):
    message: str


class HealthOut(ApiModel):
    status: str
    database: str

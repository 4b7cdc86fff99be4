import math
from typing import Dict, Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.data.models.cart_item import CartItemModel
from app.data.models.user import UserModel
from app.domain.errors import NotFoundError, CartConflictError
from app.domain.schemas import QUANTITY_MAX
from app.repos.cart_repo import CartRepo
from app.repos.product_repo import ProductRepo
from app.services.activity_service import ActivityService
from app.utils.logging import get_logger

logger = get_logger(__name__)


def _as_number(value) -> float:
    #zle dane w bazie nie moga wywalic podsumowania
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


class CartService:
    """
    Koszyk usera = wiersze CartItem (tylko ilosc, bez snapshotu ceny).
    Kazda komenda (add, update, remove) zwraca swiezo przeliczone
    podsumowanie z aktualnymi cenami produktow.
    """

    def __init__(self, db: Session, activity_service: ActivityService | None = None):
        self.repo = CartRepo(db)
        self.products = ProductRepo(db)
        self.activity = activity_service or ActivityService()

    #query - odczyt
    def get_summary(self, user_id: str) -> Dict[str, Any]:
        items = self.repo.get_items(user_id)
        products = self.products.get_products(i.product_id for i in items)

        #produkty usuniete / nieaktywne ukrywamy, wiersz zostaje w bazie
        lines = []
        for item in items:
            product = products.get(item.product_id)
            if product is None or not product.is_active:
                continue
            lines.append((item, product))

        count = sum(int(_as_number(i.quantity)) for i, _ in lines)
        total = sum(_as_number(i.quantity) * _as_number(p.price) for i, p in lines)

        return {
            "items": [
                {
                    "id": i.id,
                    "user_id": i.user_id,
                    "product": p,
                    "quantity": i.quantity,
                    "created_at": i.created_at,
                    "updated_at": i.updated_at,
                }
                for i, p in lines
            ],
            "count": count,
            "total": round(total, 2),
        }

    #commands
    def add_item(self, user: UserModel, product_id: str, quantity: int = 1) -> Dict[str, Any]:
        qty = min(max(quantity or 1, 1), QUANTITY_MAX)

        product = self.products.get_active_product(product_id)
        if not product:
            raise NotFoundError("Product not found")

        # read-then-write, unikalny indeks (user, product) jako backstop
        existing = self.repo.get_item_by_product(user.id, product_id)

        try:
            if existing:
                logger.info(
                    f"Product {product_id} already in cart of user {user.id}, "
                    f"quantity {existing.quantity} -> {existing.quantity + qty}"
                )
                #suma nie moze przekroczyc zakresu kolumny
                existing.quantity = min(max((existing.quantity or 0) + qty, 1), QUANTITY_MAX)
            else:
                logger.info(f"Adding product {product_id} to cart of user {user.id}")
                self.repo.add_item(
                    CartItemModel(
                        user_id=user.id,
                        product_id=product_id,
                        quantity=qty,
                    )
                )
            self.repo.commit()
        except IntegrityError:
            # rownolegly add wygral wyscig - jego zapis jest spojny, oddajemy swiezy odczyt
            self.repo.rollback()
            logger.warning(f"Concurrent add of product {product_id} for user {user.id}, returning current cart")
            raise CartConflictError("Cart item already exists", summary=self.get_summary(user.id))

        self.activity.record("Add to card", f"{product.name} x{qty}", user)

        return self.get_summary(user.id)

    def update_quantity(self, user_id: str, item_id: str, quantity: int) -> Dict[str, Any]:
        item = self.repo.get_item(item_id, user_id)
        if not item:
            raise NotFoundError("Cart item not found")

        item.quantity = quantity
        self.repo.commit()

        logger.info(f"Cart item {item_id} quantity set to {quantity}")

        return self.get_summary(user_id)

    def remove_item(self, user_id: str, item_id: str) -> Dict[str, Any]:
        removed = self.repo.delete_item(item_id, user_id)
        if not removed:
            self.repo.rollback()
            raise NotFoundError("Cart item not found")

        self.repo.commit()

        logger.info(f"Cart item {item_id} removed for user {user_id}")

        return self.get_summary(user_id)

    def clear(self, user_id: str) -> Dict[str, Any]:
        removed = self.repo.clear(user_id)
        self.repo.commit()

        logger.info(f"Cart of user {user_id} cleared ({removed} items)")

        #koszyk na pewno pusty - bez przeliczania
        return {"message": "Cart cleared", "items": [], "count": 0, "total": 0}

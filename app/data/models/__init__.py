#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from app.data.models.user import UserModel
from app.data.models.product import ProductModel
from app.data.models.cart_item import CartItemModel
from app.data.models.wishlist_item import WishlistItemModel
from app.data.models.activity_log import ActivityLogModel

__all__ = ["UserModel", "ProductModel", "CartItemModel", "WishlistItemModel", "ActivityLogModel"]

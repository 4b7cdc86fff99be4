# app/data/seed.py
from app.data.database import SessionLocal
from app.data.models.product import ProductModel
from app.data.models.user import UserModel
from app.repos.user_repo import UserRepo
from app.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

DEMO_PRODUCTS = [
    {
        "name": "Rhino Roofing Sheet 3m",
        "category": "Roofing Sheets",
        "type": "Roofing",
        "brand": "Rhino",
        "sku": "RF-3000",
        "price": 24.5,
        "old_price": 27.0,
        "rating": 4.5,
        "badge": "SAVE 10%",
        "description": "Galvanised corrugated sheet, 0.4mm",
        "stock": 120,
    },
    {
        "name": "Portland Cement 50kg",
        "category": "Cement",
        "type": "Cement",
        "brand": "Dangote",
        "sku": "CM-5000",
        "price": 9.99,
        "rating": 4.2,
        "description": "General purpose cement bag",
        "stock": 300,
    },
    {
        "name": "Steel Nails 3in (1kg)",
        "category": "Fasteners",
        "type": "Hardware",
        "sku": "NL-0300",
        "price": 3.25,
        "stock": 500,
    },
]

ADMIN_USER = {"name": "Store Admin", "email": "admin@example.com", "role": "admin"}


def seed() -> bool:
    db = SessionLocal()
    try:
        # not forcing: only seed if empty
        if db.query(ProductModel).first():
            logger.info("Products already present, skipping seed")
            return False

        for data in DEMO_PRODUCTS:
            db.add(ProductModel(**data))
        if not UserRepo(db).get_by_email(ADMIN_USER["email"]):
            db.add(UserModel(**ADMIN_USER))
        db.commit()
        logger.info(f"Seeded {len(DEMO_PRODUCTS)} products")
        return True
    finally:
        db.close()


if __name__ == "__main__":
    configure_logging()
    from app.main import init_db

    init_db()
    seed()

import os
import tempfile

#konfiguracja musi byc ustawiona przed importem app.*
_tmpdir = tempfile.mkdtemp(prefix="store-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{_tmpdir}/test.db"
os.environ["CELERY_TASK_ALWAYS_EAGER"] = "true"
os.environ["JWT_SECRET"] = "test-secret"

import pytest
from fastapi.testclient import TestClient

from app.data.database import Base, engine, SessionLocal
from app.data.models.product import ProductModel
from app.data.models.user import UserModel
from app.main import app
from app.utils.security import create_access_token


@pytest.fixture(autouse=True)
def clean_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def bearer(user: UserModel) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture
def headers_for():
    return bearer


@pytest.fixture
def make_user(db):
    def _make(email: str, role: str = "user", name: str = "Test User") -> UserModel:
        user = UserModel(name=name, email=email, role=role)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture
def user(make_user):
    return make_user("user@example.com")


@pytest.fixture
def other_user(make_user):
    return make_user("other@example.com")


@pytest.fixture
def admin(make_user):
    # role zapisana "po staremu" - wielkosc liter nie ma znaczenia
    return make_user("admin@example.com", role="Admin", name="Admin")


@pytest.fixture
def user_headers(user):
    return bearer(user)


@pytest.fixture
def admin_headers(admin):
    return bearer(admin)


@pytest.fixture
def make_product(db):
    def _make(**overrides) -> ProductModel:
        data = {
            "name": "Roofing Sheet",
            "category": "Roofing Sheets",
            "type": "Roofing",
            "price": 10.0,
        }
        data.update(overrides)
        product = ProductModel(**data)
        db.add(product)
        db.commit()
        db.refresh(product)
        return product

    return _make

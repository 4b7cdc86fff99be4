import pytest

from app.data.models.user import UserModel
from app.domain.errors import ForbiddenError
from app.services.auth_service import AuthService
from app.utils.security import Role, create_access_token, decode_access_token


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("admin", Role.ADMIN),
        ("Admin", Role.ADMIN),
        ("SuperAdmin", Role.SUPERADMIN),
        (" superadmin ", Role.SUPERADMIN),
        ("customer", Role.USER),
        (None, Role.USER),
    ],
)
def test_role_parse(raw, expected):
    assert Role.parse(raw) is expected


def test_role_ordering():
    assert Role.SUPERADMIN.allows(Role.ADMIN)
    assert Role.ADMIN.allows(Role.ADMIN)
    assert not Role.ADMIN.allows(Role.SUPERADMIN)
    assert not Role.USER.allows(Role.ADMIN)


def test_authorize_superadmin_only():
    admin = UserModel(name="a", email="a@example.com", role="admin")
    root = UserModel(name="r", email="r@example.com", role="SUPERADMIN")

    assert AuthService.authorize(root, Role.SUPERADMIN) is root
    with pytest.raises(ForbiddenError):
        AuthService.authorize(admin, Role.SUPERADMIN)


def test_token_roundtrip():
    token = create_access_token("0123456789abcdef01234567")
    assert decode_access_token(token)["id"] == "0123456789abcdef01234567"


def test_expired_token_is_rejected(client, user):
    token = create_access_token(user.id, expires_minutes=-5)
    resp = client.get("/api/cart", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Not authorized, token failed"


def test_token_for_unknown_user_is_rejected(client):
    token = create_access_token("0123456789abcdef01234567")
    resp = client.get("/api/wishlist", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Not authorized, user not found"


def test_non_bearer_scheme_is_rejected(client, user):
    token = create_access_token(user.id)
    resp = client.get("/api/cart", headers={"Authorization": f"Basic {token}"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Not authorized, no token"


def test_zero_expiry_is_not_replaced_by_default(client, user):
    token = create_access_token(user.id, expires_minutes=0)

    resp = client.get("/api/cart", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Not authorized, token failed"

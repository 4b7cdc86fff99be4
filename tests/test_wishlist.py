from sqlalchemy import select

from app.data.models.wishlist_item import WishlistItemModel

MISSING_ID = "0123456789abcdef01234567"


def _add(client, headers, product_id):
    return client.post("/api/wishlist", json={"productId": product_id}, headers=headers)


def test_wishlist_requires_token(client):
    assert client.get("/api/wishlist").status_code == 401
    assert client.delete("/api/wishlist").status_code == 401


def test_add_and_get_wishlist(client, user, user_headers, make_product):
    product = make_product(name="Cement")

    resp = _add(client, user_headers, product.id)
    assert resp.status_code == 201
    item = resp.json()
    assert item["productId"] == product.id
    assert item["userId"] == user.id

    resp = client.get("/api/wishlist", headers=user_headers)
    assert resp.status_code == 200
    entries = resp.json()
    assert len(entries) == 1
    assert entries[0]["id"] == item["id"]
    assert entries[0]["product"]["name"] == "Cement"


def test_duplicate_add_conflicts_and_keeps_original(client, db, user, user_headers, make_product):
    product = make_product()
    first = _add(client, user_headers, product.id).json()

    resp = _add(client, user_headers, product.id)
    assert resp.status_code == 409
    assert resp.json()["detail"] == "Product already in wishlist"

    rows = db.execute(select(WishlistItemModel).where(WishlistItemModel.user_id == user.id)).scalars().all()
    assert [r.id for r in rows] == [first["id"]]


def test_add_validates_product(client, user_headers, make_product):
    inactive = make_product(is_active=False)

    assert _add(client, user_headers, "123").status_code == 400
    assert _add(client, user_headers, MISSING_ID).status_code == 404
    assert _add(client, user_headers, inactive.id).status_code == 404


def test_inactive_product_hidden_until_reactivated(client, db, user_headers, make_product):
    product = make_product()
    _add(client, user_headers, product.id)

    product.is_active = False
    db.commit()
    assert client.get("/api/wishlist", headers=user_headers).json() == []

    product.is_active = True
    db.commit()
    assert len(client.get("/api/wishlist", headers=user_headers).json()) == 1


def test_remove_item(client, user_headers, make_product):
    product = make_product()
    _add(client, user_headers, product.id)

    resp = client.delete(f"/api/wishlist/{product.id}", headers=user_headers)
    assert resp.status_code == 200
    assert resp.json() == {"message": "Removed from wishlist", "productId": product.id}

    # pojedyncze usuniecie jest scisle
    assert client.delete(f"/api/wishlist/{product.id}", headers=user_headers).status_code == 404
    assert client.delete("/api/wishlist/bad-id", headers=user_headers).status_code == 400


def test_clear_wishlist(client, user_headers, other_user, headers_for, make_product):
    product = make_product()
    _add(client, user_headers, product.id)
    _add(client, headers_for(other_user), product.id)

    resp = client.delete("/api/wishlist", headers=user_headers)
    assert resp.status_code == 200
    assert resp.json() == {"message": "Wishlist cleared"}
    assert client.get("/api/wishlist", headers=user_headers).json() == []
    assert len(client.get("/api/wishlist", headers=headers_for(other_user)).json()) == 1


def test_clear_empty_wishlist_succeeds(client, user_headers):
    resp = client.delete("/api/wishlist", headers=user_headers)
    assert resp.status_code == 200
    assert resp.json() == {"message": "Wishlist cleared"}


def test_uppercase_product_id_is_normalised(client, user_headers, make_product):
    product = make_product()

    resp = _add(client, user_headers, product.id.upper())
    assert resp.status_code == 201
    assert resp.json()["productId"] == product.id
    assert _add(client, user_headers, product.id).status_code == 409

    resp = client.delete(f"/api/wishlist/{product.id.upper()}", headers=user_headers)
    assert resp.status_code == 200
    assert resp.json()["productId"] == product.id

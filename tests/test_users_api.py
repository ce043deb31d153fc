"""Tests for sign-up, sign-in, the current-user endpoints and the auth failure destination."""

from __future__ import annotations

from database import Favourite, User


def test_signup_issues_token(client):
    response = client.post(
        "/api/v1/users/signup",
        json={"name": "Alice", "email": "alice@test.com", "password": "secret123"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["email"] == "alice@test.com"
    assert body["authentication_token"]
    assert "password" not in body and "hashed_password" not in body


def test_signup_rejects_duplicate_email(client, make_user):
    make_user(email="taken@test.com")

    response = client.post(
        "/api/v1/users/signup",
        json={"name": "Bob", "email": "taken@test.com", "password": "secret123"},
    )

    assert response.status_code == 400


def test_signup_requires_name(client):
    response = client.post(
        "/api/v1/users/signup",
        json={"name": "", "email": "noname@test.com", "password": "secret123"},
    )

    assert response.status_code == 422


def test_sign_in_returns_existing_token(client, make_user):
    user = make_user(email="carol@test.com", password="hunter22")

    response = client.post(
        "/api/v1/users/sign_in", json={"email": "carol@test.com", "password": "hunter22"}
    )

    assert response.status_code == 200
    assert response.json()["authentication_token"] == user.authentication_token


def test_sign_in_rejects_bad_password(client, make_user):
    make_user(email="dave@test.com", password="hunter22")

    response = client.post(
        "/api/v1/users/sign_in", json={"email": "dave@test.com", "password": "wrong-one"}
    )

    assert response.status_code == 401


def test_me_returns_the_caller(client, make_user, auth_headers):
    user = make_user(name="Erin")

    response = client.get("/api/v1/users/me", headers=auth_headers(user))

    assert response.status_code == 200
    assert response.json() == {"id": user.id, "name": "Erin", "email": user.email}


def test_deleting_user_cascades_favourites(client, db, make_user, make_product, auth_headers):
    user = make_user()
    other = make_user()
    product = make_product()
    db.add_all(
        [
            Favourite(user_id=user.id, product_id=product.id),
            Favourite(user_id=other.id, product_id=product.id),
        ]
    )
    db.commit()
    user_id = user.id
    headers = auth_headers(user)

    response = client.delete("/api/v1/users/me", headers=headers)

    assert response.status_code == 204
    db.expire_all()
    assert db.get(User, user_id) is None
    assert db.query(Favourite).filter_by(user_id=user_id).count() == 0
    assert db.query(Favourite).filter_by(user_id=other.id).count() == 1


def test_authentication_failure_endpoint(client):
    response = client.get("/api/v1/authentication_failure")

    assert response.status_code == 401
    assert "error" in response.json()


def test_products_are_listed_with_type(client, make_product):
    product = make_product(name="sneaker", type_name="shoes")

    listed = client.get("/api/v1/products/")
    single = client.get(f"/api/v1/products/{product.id}")
    missing = client.get("/api/v1/products/999")
    out_of_range = client.get("/api/v1/products/99999999999999999999")

    assert listed.status_code == 200
    assert [item["name"] for item in listed.json()] == ["sneaker"]
    assert single.json()["type"]["name"] == "shoes"
    assert missing.status_code == 404
    assert out_of_range.status_code == 404

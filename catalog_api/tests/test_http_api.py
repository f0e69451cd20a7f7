from __future__ import annotations

from collections.abc import Iterator

import pytest
from flask import Flask
from flask.testing import FlaskClient
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from catalog_api.app import create_app
from catalog_api.domain import new_id
from catalog_api.infrastructure.container import Container
from catalog_api.interfaces.http.controllers.misc_controller import MiscController
from catalog_api.shared.config import load_config

USER = {"name": "Alice", "email": "alice@example.com", "password": "s3cret"}


@pytest.fixture()
def client(session_factory: sessionmaker[Session]) -> Iterator[FlaskClient]:
    app = create_app(Container(load_config(), session_factory))
    app.config.update(TESTING=True)
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def auth_headers(client: FlaskClient) -> dict[str, str]:
    assert client.post("/users", json=USER).status_code == 201
    resp = client.post(
        "/users/generate_token", json={"email": USER["email"], "password": USER["password"]}
    )
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.get_json()['access_token']}"}


def test_register_user(client: FlaskClient) -> None:
    resp = client.post("/users", json=USER)

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["name"] == "Alice"
    assert body["email"] == "alice@example.com"
    assert "password" not in body
    assert "password_hash" not in body


def test_register_duplicate_user(client: FlaskClient) -> None:
    client.post("/users", json=USER)

    resp = client.post("/users", json=USER)

    assert resp.status_code == 409
    assert resp.get_json()["error"] == "user_already_exists"


@pytest.mark.parametrize(
    ("payload", "code"),
    [
        ({"email": "a@b.c", "password": "pw"}, "name_required"),
        ({"name": "Alice", "password": "pw"}, "email_required"),
        ({"name": "Alice", "email": "a@b.c"}, "password_required"),
    ],
)
def test_register_missing_fields(client: FlaskClient, payload: dict, code: str) -> None:
    resp = client.post("/users", json=payload)

    assert resp.status_code == 400
    assert resp.get_json()["error"] == code


def test_register_wrong_types(client: FlaskClient) -> None:
    resp = client.post("/users", json={"name": 1, "email": "a@b.c", "password": "pw"})

    assert resp.status_code == 422
    assert resp.get_json()["error"] == "validation_error"


def test_generate_token_wrong_password(client: FlaskClient) -> None:
    client.post("/users", json=USER)

    resp = client.post("/users/generate_token", json={"email": USER["email"], "password": "nope"})

    assert resp.status_code == 401
    assert resp.get_json() == {"error": "unauthorized"}


def test_generate_token_unknown_user(client: FlaskClient) -> None:
    resp = client.post("/users/generate_token", json={"email": "ghost@x.y", "password": "pw"})

    assert resp.status_code == 404
    assert resp.get_json()["error"] == "user_not_found"


@pytest.mark.parametrize(
    "headers",
    [
        {},
        {"Authorization": "Bearer"},
        {"Authorization": "Basic YWxpY2U6czNjcmV0"},
        {"Authorization": "Bearer not.a.token"},
        {"Authorization": "Bearer garbage"},
    ],
)
def test_products_require_valid_token(client: FlaskClient, headers: dict[str, str]) -> None:
    resp = client.get("/products", headers=headers)

    assert resp.status_code == 401
    assert resp.get_json() == {"error": "unauthorized"}


def test_product_crud(client: FlaskClient, auth_headers: dict[str, str]) -> None:
    created = client.post("/products", json={"name": "Keyboard", "price": 149.0}, headers=auth_headers)
    assert created.status_code == 201
    product = created.get_json()
    assert product["name"] == "Keyboard"
    assert product["price"] == 149.0
    product_url = f"/products/{product['id']}"

    fetched = client.get(product_url, headers=auth_headers)
    assert fetched.status_code == 200
    assert fetched.get_json() == product

    updated = client.put(product_url, json={"name": "Mouse", "price": 59.9}, headers=auth_headers)
    assert updated.status_code == 200
    assert updated.get_json()["name"] == "Mouse"
    assert updated.get_json()["created_at"] == product["created_at"]

    listed = client.get("/products", headers=auth_headers)
    assert listed.status_code == 200
    assert [p["id"] for p in listed.get_json()] == [product["id"]]

    deleted = client.delete(product_url, headers=auth_headers)
    assert deleted.status_code == 200

    assert client.get(product_url, headers=auth_headers).status_code == 404


def test_list_products_paging_and_sort(client: FlaskClient, auth_headers: dict[str, str]) -> None:
    for i in range(1, 6):
        client.post("/products", json={"name": f"Product {i}", "price": i}, headers=auth_headers)

    page = client.get("/products?page=2&limit=2&sort=asc", headers=auth_headers).get_json()
    newest = client.get("/products?sort=desc", headers=auth_headers).get_json()
    bogus = client.get("/products?page=x&limit=y", headers=auth_headers).get_json()

    assert [p["name"] for p in page] == ["Product 3", "Product 4"]
    assert newest[0]["name"] == "Product 5"
    assert len(bogus) == 5


@pytest.mark.parametrize(
    ("payload", "code"),
    [
        ({"price": 10}, "name_required"),
        ({"name": "Keyboard"}, "price_required"),
        ({"name": "Keyboard", "price": -10}, "invalid_price"),
    ],
)
def test_create_product_invalid(
    client: FlaskClient, auth_headers: dict[str, str], payload: dict, code: str
) -> None:
    resp = client.post("/products", json=payload, headers=auth_headers)

    assert resp.status_code == 400
    assert resp.get_json()["error"] == code


def test_create_product_wrong_types(client: FlaskClient, auth_headers: dict[str, str]) -> None:
    resp = client.post("/products", json={"name": "Keyboard", "price": "cheap"}, headers=auth_headers)

    assert resp.status_code == 422


def test_product_malformed_id(client: FlaskClient, auth_headers: dict[str, str]) -> None:
    resp = client.get("/products/not-a-uuid", headers=auth_headers)

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "malformed_identifier"


def test_product_unknown_id(client: FlaskClient, auth_headers: dict[str, str]) -> None:
    missing = f"/products/{new_id()}"

    assert client.get(missing, headers=auth_headers).status_code == 404
    assert client.put(missing, json={"name": "x", "price": 1}, headers=auth_headers).status_code == 404
    assert client.delete(missing, headers=auth_headers).status_code == 404


def test_health(client: FlaskClient) -> None:
    resp = client.get("/api/health")

    assert resp.status_code == 200
    assert resp.get_json() == {"ok": True, "database": "ok"}
    assert resp.headers["X-Content-Type-Options"] == "nosniff"
    assert resp.headers["X-Request-ID"]


def test_health_reports_database_failure() -> None:
    def failing_probe() -> bool:
        raise OperationalError("SELECT 1", {}, Exception("down"))

    controller = MiscController(database_probe=failing_probe)
    with Flask(__name__).test_request_context("/api/health"):
        resp, status = controller.health()

    assert status == 503
    assert resp.get_json()["database"] == "error"


@pytest.mark.parametrize("price", [True, "12", None])
def test_create_product_rejects_non_numeric_price(
    client: FlaskClient, auth_headers: dict[str, str], price: object
) -> None:
    resp = client.post("/products", json={"name": "Keyboard", "price": price}, headers=auth_headers)

    assert resp.status_code == 422
    assert resp.get_json()["error"] == "validation_error"


def test_list_products_out_of_range_page(client: FlaskClient, auth_headers: dict[str, str]) -> None:
    for i in range(1, 4):
        client.post("/products", json={"name": f"Product {i}", "price": i}, headers=auth_headers)

    huge = client.get("/products?page=99999999999999999999&limit=10", headers=auth_headers)
    far = client.get("/products?page=9223372036854775807&limit=10", headers=auth_headers)

    assert huge.status_code == 200
    assert len(huge.get_json()) == 3
    assert far.status_code == 200
    assert far.get_json() == []


def test_schema_is_created_on_injected_database() -> None:
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    app = create_app(Container(load_config(), factory))

    try:
        with app.test_client() as test_client:
            assert test_client.post("/users", json=USER).status_code == 201
            assert test_client.get("/api/health").status_code == 200
    finally:
        engine.dispose()

# tests/test_products.py
import pytest

NOT_FOUND = {"error": "Product not found"}
INVALID = {"error": "Name & numeric price are required"}


def test_root_greeting_needs_no_key(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/plain")
    assert r.text == "Hello World! Go to /api/products to see all products."


def test_list_returns_seed(client, auth):
    r = client.get("/api/products", headers=auth)
    assert r.status_code == 200
    body = r.json()
    assert [p["id"] for p in body] == ["1", "2", "3"]
    assert body[0] == {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    }
    assert body[2]["inStock"] is False


def test_get_by_id(client, auth):
    r = client.get("/api/products/2", headers=auth)
    assert r.status_code == 200
    assert r.json()["name"] == "Smartphone"


def test_create_desk_scenario(client, auth):
    r = client.post("/api/products", json={"name": "Desk", "price": 150}, headers=auth)
    assert r.status_code == 201
    desk = r.json()
    assert desk["name"] == "Desk"
    assert desk["price"] == 150
    assert desk["description"] is None
    assert desk["category"] is None
    assert desk["inStock"] is False
    assert desk["id"] not in ("1", "2", "3")

    listed = client.get("/api/products", headers=auth).json()
    assert len(listed) == 4
    # appended at the end
    assert listed[-1] == desk


def test_create_then_get_round_trip(client, auth):
    payload = {"name": "Kettle", "description": "1.7L", "price": 29.99, "category": "kitchen", "inStock": 1}
    created = client.post("/api/products", json=payload, headers=auth).json()
    fetched = client.get(f"/api/products/{created['id']}", headers=auth).json()
    assert fetched == created
    assert fetched["inStock"] is True
    assert fetched["price"] == 29.99


def test_created_ids_are_distinct(client, auth):
    ids = [
        client.post("/api/products", json={"name": f"P{n}", "price": n}, headers=auth).json()["id"]
        for n in range(10)
    ]
    listed = [p["id"] for p in client.get("/api/products", headers=auth).json()]
    assert len(set(ids)) == 10
    assert set(ids) <= set(listed)
    assert len(set(listed)) == len(listed)


def test_replace_is_full_replace(client, auth):
    r = client.put("/api/products/1", json={"name": "Laptop Pro", "price": 1300}, headers=auth)
    assert r.status_code == 200
    body = r.json()
    assert body["id"] == "1"
    assert body["name"] == "Laptop Pro"
    assert body["price"] == 1300
    assert body["description"] is None
    assert body["category"] is None
    assert body["inStock"] is False

    # position in the sequence is kept
    listed = client.get("/api/products", headers=auth).json()
    assert listed[0] == body


def test_replace_ignores_id_in_body(client, auth):
    r = client.put("/api/products/2", json={"id": "99", "name": "Phone", "price": 1}, headers=auth)
    assert r.json()["id"] == "2"
    assert client.get("/api/products/99", headers=auth).status_code == 404


def test_delete_then_delete_again(client, auth):
    r = client.delete("/api/products/2", headers=auth)
    assert r.status_code == 204
    assert r.content == b""

    r2 = client.delete("/api/products/2", headers=auth)
    assert r2.status_code == 404
    assert r2.json() == NOT_FOUND

    # remaining order preserved
    assert [p["id"] for p in client.get("/api/products", headers=auth).json()] == ["1", "3"]


@pytest.mark.parametrize("method", ["get", "delete"])
def test_unknown_id_is_404(client, auth, method):
    r = getattr(client, method)("/api/products/nope", headers=auth)
    assert r.status_code == 404
    assert r.json() == NOT_FOUND


def test_replace_unknown_id_is_404_even_with_bad_body(client, auth):
    r = client.put("/api/products/nope", json={}, headers=auth)
    assert r.status_code == 404
    assert r.json() == NOT_FOUND


@pytest.mark.parametrize(
    "payload",
    [
        {"price": 10},
        {"name": "", "price": 10},
        {"name": 123, "price": 10},
        {"name": "Desk"},
        {"name": "Desk", "price": "150"},
        {"name": "Desk", "price": True},
        {"name": "Desk", "price": None},
        {},
    ],
)
def test_create_and_replace_validation(client, auth, payload):
    r = client.post("/api/products", json=payload, headers=auth)
    assert r.status_code == 400
    assert r.json() == INVALID

    r = client.put("/api/products/1", json=payload, headers=auth)
    assert r.status_code == 400
    assert r.json() == INVALID

    # nothing changed
    listed = client.get("/api/products", headers=auth).json()
    assert len(listed) == 3
    assert listed[0]["name"] == "Laptop"


def test_missing_body_is_validation_error(client, auth):
    r = client.post("/api/products", headers=auth)
    assert r.status_code == 400
    assert r.json() == INVALID


def test_non_object_body_is_validation_error(client, auth):
    r = client.post("/api/products", json=[{"name": "Desk", "price": 1}], headers=auth)
    assert r.status_code == 400
    assert r.json() == INVALID


def test_malformed_json_is_400(client, auth):
    headers = {**auth, "content-type": "application/json"}
    r = client.post("/api/products", content=b'{"name": "Desk", ', headers=headers)
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid JSON body"}


@pytest.mark.parametrize("price", [0, -5, 0.5])
def test_any_number_is_a_price(client, auth, price):
    r = client.post("/api/products", json={"name": "Odd", "price": price}, headers=auth)
    assert r.status_code == 201
    assert r.json()["price"] == price


@pytest.mark.parametrize(
    "value,expected",
    [
        (True, True),
        ("yes", True),
        ("false", True),
        (1, True),
        ([], True),
        (False, False),
        (0, False),
        ("", False),
        (None, False),
    ],
)
def test_in_stock_is_coerced(client, auth, value, expected):
    r = client.post("/api/products", json={"name": "X", "price": 1, "inStock": value}, headers=auth)
    assert r.json()["inStock"] is expected


def test_huge_integer_price_is_accepted(client, auth):
    big = 10**400
    r = client.post("/api/products", json={"name": "Big", "price": big, "inStock": big}, headers=auth)
    assert r.status_code == 201
    assert r.json()["price"] == big
    assert r.json()["inStock"] is True


@pytest.mark.parametrize("body", [[1], "Desk", 5, None])
def test_replace_unknown_id_is_404_for_any_body(client, auth, body):
    r = client.put("/api/products/nope", json=body, headers=auth)
    assert r.status_code == 404
    assert r.json() == NOT_FOUND


@pytest.mark.parametrize("body", [[1], "Desk", 5])
def test_replace_known_id_with_non_object_is_400(client, auth, body):
    r = client.put("/api/products/1", json=body, headers=auth)
    assert r.status_code == 400
    assert r.json() == INVALID
    assert client.get("/api/products/1", headers=auth).json()["name"] == "Laptop"


def test_create_with_scalar_body_is_400(client, auth):
    r = client.post("/api/products", json="Desk", headers=auth)
    assert r.status_code == 400
    assert r.json() == INVALID

def test_category_lifecycle(client, employee_headers):
    resp = client.post("/v1/categories", json={"Title": "Shoes"})
    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "title": "Shoes"}

    resp = client.get("/v1/categories")
    assert resp.status_code == 200
    assert {"id": 1, "title": "Shoes"} in resp.json()

    resp = client.put(
        "/v1/categories/1",
        json={"Id": 1, "Title": "Footwear"},
        headers=employee_headers,
    )
    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "title": "Footwear"}
    assert client.get("/v1/categories/1").json()["title"] == "Footwear"

    resp = client.delete("/v1/categories/1", headers=employee_headers)
    assert resp.status_code == 200
    assert resp.json() == {"message": "Category deleted"}

    resp = client.get("/v1/categories/1")
    assert resp.status_code == 200
    assert resp.json() is None


def test_create_ignores_client_id(client):
    resp = client.post("/v1/categories", json={"id": 42, "title": "Books"})
    assert resp.status_code == 200
    assert resp.json()["id"] == 1

    resp = client.get("/v1/categories/1")
    assert resp.json() == {"id": 1, "title": "Books"}


def test_list_sets_cache_headers(client, category):
    resp = client.get("/v1/categories")
    assert resp.headers["cache-control"] == "public, max-age=30"
    assert "User-Agent" in [v.strip() for v in resp.headers["vary"].split(",")]


def test_create_validation_errors_are_keyed_by_field(client):
    resp = client.post("/v1/categories", json={"title": "ab"})
    assert resp.status_code == 400
    body = resp.json()
    assert "message" in body
    assert list(body["errors"]) == ["title"]

    resp = client.post("/v1/categories", json={"title": "x" * 61})
    assert resp.status_code == 400

    resp = client.post("/v1/categories", json={})
    assert resp.status_code == 400
    assert "title" in resp.json()["errors"]


def test_update_id_mismatch_is_not_found(client, category, employee_headers):
    resp = client.put(
        "/v1/categories/1", json={"id": 2, "title": "Footwear"}, headers=employee_headers
    )
    assert resp.status_code == 404
    assert resp.json() == {"message": "Category not found"}

    # Несовпадение id проверяется раньше валидации
    resp = client.put("/v1/categories/1", json={"id": 2, "title": "x"}, headers=employee_headers)
    assert resp.status_code == 404

    resp = client.put("/v1/categories/1", json={"title": "Footwear"}, headers=employee_headers)
    assert resp.status_code == 404


def test_update_missing_category(client, employee_headers):
    resp = client.put(
        "/v1/categories/7", json={"id": 7, "title": "Footwear"}, headers=employee_headers
    )
    assert resp.status_code == 404


def test_update_invalid_payload(client, category, employee_headers):
    resp = client.put("/v1/categories/1", json={"id": 1, "title": "x"}, headers=employee_headers)
    assert resp.status_code == 400
    assert "title" in resp.json()["errors"]


def test_update_and_delete_require_employee(client, category, manager_headers):
    resp = client.put("/v1/categories/1", json={"id": 1, "title": "Footwear"})
    assert resp.status_code == 401
    assert resp.headers["www-authenticate"] == "Bearer"

    resp = client.delete("/v1/categories/1")
    assert resp.status_code == 401

    resp = client.delete("/v1/categories/1", headers=manager_headers)
    assert resp.status_code == 403
    assert resp.json() == {"message": "Not enough permissions"}

    assert client.get("/v1/categories/1").json() == category


def test_delete_missing_category_leaves_store_unchanged(client, category, employee_headers):
    resp = client.delete("/v1/categories/99", headers=employee_headers)
    assert resp.status_code == 404
    assert resp.json() == {"message": "Category not found"}
    assert client.get("/v1/categories").json() == [category]


def test_delete_category_with_products_is_conflict(client, category, employee_headers):
    resp = client.post(
        "/v1/products",
        json={
            "title": "Sneakers",
            "description": "Running shoes",
            "price": 99.9,
            "image": "sneakers.png",
            "category_id": category["id"],
        },
        headers=employee_headers,
    )
    assert resp.status_code == 200

    resp = client.delete(f"/v1/categories/{category['id']}", headers=employee_headers)
    assert resp.status_code == 409
    assert client.get(f"/v1/categories/{category['id']}").json() == category


def test_title_length_bounds_are_inclusive(client, employee_headers):
    for title in ("abc", "x" * 60):
        resp = client.post("/v1/categories", json={"title": title})
        assert resp.status_code == 200
        assert resp.json()["title"] == title

    resp = client.put("/v1/categories/1", json={"id": 1, "title": "y" * 60}, headers=employee_headers)
    assert resp.status_code == 200

from storeapi.models import Category, Product


def test_list_empty(client):
    resp = client.get("/api/categories")
    assert resp.status_code == 200
    assert resp.get_json() == {"Message": "No Categories found", "Data": []}


def test_create_and_list(client):
    resp = client.post("/api/categories", json={"name": "Books"})
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["Message"] == "Category created successfully."
    assert body["Data"]["name"] == "Books"

    resp = client.get("/api/categories")
    assert [c["name"] for c in resp.get_json()["Data"]] == ["Books"]


def test_create_duplicate_name_conflicts(client, category):
    resp = client.post("/api/categories", json={"name": "Books"})
    assert resp.status_code == 409
    assert resp.get_json()["Message"] == "Category with name 'Books' already exists."


def test_create_requires_name(client):
    assert client.post("/api/categories", json={"name": "   "}).status_code == 400
    assert client.post("/api/categories", json={}).status_code == 400


def test_create_without_body(client):
    resp = client.post("/api/categories")
    assert resp.status_code == 400
    assert resp.get_json()["Message"] == "Request body is missing"


def test_get_by_id_includes_products(client, product):
    resp = client.get(f"/api/categories/{product.category_id}")
    assert resp.status_code == 200
    data = resp.get_json()["Data"]
    assert data["name"] == "Books"
    assert [p["name"] for p in data["products"]] == ["Dune"]


def test_get_missing_is_404(client):
    resp = client.get("/api/categories/123")
    assert resp.status_code == 404
    assert resp.get_json()["Message"] == "Category with ID 123 not found"


def test_update(client, session, category):
    category_id = category.id
    resp = client.put(f"/api/categories/{category_id}", json={"id": category_id, "name": "Novels"})
    assert resp.status_code == 200
    assert resp.get_json()["Data"]["name"] == "Novels"

    session.expire_all()
    assert session.get(Category, category_id).name == "Novels"


def test_update_id_mismatch(client, category):
    resp = client.put(f"/api/categories/{category.id}", json={"id": category.id + 1, "name": "X"})
    assert resp.status_code == 400
    assert "mismatch" in resp.get_json()["Message"]


def test_update_missing_is_404_and_creates_nothing(client, session):
    resp = client.put("/api/categories/77", json={"name": "Ghost"})
    assert resp.status_code == 404
    session.expire_all()
    assert session.query(Category).count() == 0


def test_update_to_taken_name_conflicts(client, session, category):
    session.add(Category(name="Games"))
    session.commit()

    resp = client.put(f"/api/categories/{category.id}", json={"name": "Games"})
    assert resp.status_code == 409


def test_delete(client, session, product):
    category_id = product.category_id
    resp = client.delete(f"/api/categories/{category_id}")
    assert resp.status_code == 200
    assert resp.get_json() == {"Message": f"Category ID {category_id} deleted successfully."}

    session.expire_all()
    assert session.query(Category).count() == 0
    assert session.query(Product).count() == 0


def test_delete_missing_is_404(client):
    assert client.delete("/api/categories/5").status_code == 404

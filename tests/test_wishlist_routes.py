from storeapi.models import Product, Wishlist, WishlistProduct


def _memberships(session):
    session.expire_all()
    return session.query(WishlistProduct).count()


def test_list_empty(client):
    resp = client.get("/api/wishlists")
    assert resp.status_code == 200
    assert resp.get_json() == {"Message": "No wishlists found", "Data": []}


def test_create_and_get(client):
    resp = client.post("/api/wishlists", json={"name": "Birthday"})
    assert resp.status_code == 201
    assert resp.get_json()["Data"] == {"id": 1, "name": "Birthday", "products": []}

    resp = client.get("/api/wishlists/Birthday")
    assert resp.status_code == 200
    assert resp.get_json()["Message"] == "Successfully retrieved the wishlist"


def test_create_duplicate_name_conflicts(client, wishlist):
    resp = client.post("/api/wishlists", json={"name": "Birthday"})
    assert resp.status_code == 409
    assert resp.get_json()["Message"] == "Wishlist with this name already exists."


def test_create_requires_name(client):
    resp = client.post("/api/wishlists", json={"name": ""})
    assert resp.status_code == 400
    assert resp.get_json()["Message"] == "Wishlist name is required."


def test_get_missing_is_404(client):
    resp = client.get("/api/wishlists/Nope")
    assert resp.status_code == 404
    assert resp.get_json()["Message"] == "Wishlist 'Nope' not found."


def test_add_remove_scenario(client, session, product, wishlist):
    product_id = product.id
    url = f"/api/wishlists/Birthday/products/{product_id}"

    resp = client.post(url)
    assert resp.status_code == 201
    assert [p["id"] for p in resp.get_json()["Data"]["products"]] == [product_id]
    assert _memberships(session) == 1

    resp = client.post(url)
    assert resp.status_code == 409
    assert resp.get_json()["Message"] == "Product is already in the wishlist."
    assert _memberships(session) == 1

    resp = client.delete(url)
    assert resp.status_code == 200
    assert resp.get_json()["Data"]["products"] == []
    assert _memberships(session) == 0

    # removing a non-member is a no-op
    resp = client.delete(url)
    assert resp.status_code == 200
    assert resp.get_json()["Message"] == "Product removed from wishlist successfully."
    assert _memberships(session) == 0


def test_add_to_missing_wishlist(client, product):
    resp = client.post(f"/api/wishlists/Nope/products/{product.id}")
    assert resp.status_code == 404


def test_add_missing_product(client, session, wishlist):
    resp = client.post("/api/wishlists/Birthday/products/999")
    assert resp.status_code == 404
    assert resp.get_json()["Message"] == "Product with ID 999 not found"
    assert _memberships(session) == 0


def test_remove_from_missing_wishlist(client):
    assert client.delete("/api/wishlists/Nope/products/1").status_code == 404


def test_list_shows_products(client, product, wishlist):
    client.post(f"/api/wishlists/Birthday/products/{product.id}")

    resp = client.get("/api/wishlists")
    data = resp.get_json()["Data"]
    assert resp.status_code == 200
    assert data[0]["name"] == "Birthday"
    assert data[0]["products"][0]["name"] == "Dune"


def test_delete_wishlist_removes_memberships(client, session, product, wishlist):
    client.post(f"/api/wishlists/Birthday/products/{product.id}")
    assert _memberships(session) == 1

    resp = client.delete("/api/wishlists/Birthday")
    assert resp.status_code == 200
    assert resp.get_json() == {"Message": "Wishlist deleted successfully."}

    assert _memberships(session) == 0
    assert session.query(Wishlist).count() == 0
    assert session.query(Product).count() == 1
    assert client.get("/api/wishlists/Birthday").status_code == 404


def test_delete_missing_wishlist(client):
    resp = client.delete("/api/wishlists/Nope")
    assert resp.status_code == 404
    assert resp.get_json()["Message"] == "Wishlist Nope not found"


def test_same_product_in_two_wishlists(client, session, product, wishlist):
    client.post("/api/wishlists", json={"name": "Christmas"})

    assert client.post(f"/api/wishlists/Birthday/products/{product.id}").status_code == 201
    assert client.post(f"/api/wishlists/Christmas/products/{product.id}").status_code == 201
    assert _memberships(session) == 2

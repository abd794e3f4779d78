# backend/tests/test_api.py
"""
Tests de los endpoints HTTP: códigos de estado, forma de las respuestas y
traducción de NotFoundError a 404.
"""

import pytest_asyncio

API = "/api/v1"

DUNE = {
    "name": "Dune",
    "author": "Herbert",
    "synopsis": "...",
    "amount_stock": 10,
    "pages": 412,
    "year": 1965,
    "price": 30,
    "categories": [1, 2],
    "photos": [{"link": "a.jpg"}],
}


@pytest_asyncio.fixture
async def seeded(client):
    """Crea las categorías 1 y 2 a través de la API."""
    for name in ("Ficción", "Ciencia ficción"):
        response = await client.post(f"{API}/categories/", json={"name": name})
        assert response.status_code == 201
    return client


async def _create_dune(client):
    response = await client.post(f"{API}/products/", json=DUNE)
    assert response.status_code == 201
    return response.json()


async def test_root(client):
    response = await client.get("/")
    assert response.status_code == 200
    assert "Bookstore" in response.json()["message"]


# =============================================================================
# Productos
# =============================================================================

async def test_create_product_returns_public_detail(seeded):
    body = await _create_dune(seeded)

    assert body["name"] == "Dune"
    assert body["price"] == 30.0
    assert body["categories"] == [{"id": 1, "name": "Ficción"}, {"id": 2, "name": "Ciencia ficción"}]
    assert len(body["photos"]) == 1
    assert body["photos"][0]["link"] == "a.jpg"


async def test_create_product_with_unknown_category_is_404(seeded):
    response = await seeded.post(f"{API}/products/", json={**DUNE, "categories": [1, 3]})

    assert response.status_code == 404
    assert "Category" in response.json()["detail"]
    assert (await seeded.get(f"{API}/products/")).json() == []


async def test_list_products_public_view(seeded):
    await _create_dune(seeded)

    response = await seeded.get(f"{API}/products/")

    assert response.status_code == 200
    [product] = response.json()
    assert product["categories"] == [{"id": 1}, {"id": 2}]
    assert set(product["photos"][0]) == {"id", "link"}


async def test_get_product_and_missing_product(seeded):
    created = await _create_dune(seeded)

    ok = await seeded.get(f"{API}/products/{created['id']}")
    missing = await seeded.get(f"{API}/products/999")

    assert ok.status_code == 200
    assert ok.json()["author"] == "Herbert"
    assert missing.status_code == 404


async def test_admin_views(seeded):
    created = await _create_dune(seeded)

    one = await seeded.get(f"{API}/products/admin/{created['id']}")
    listing = await seeded.get(f"{API}/products/admin")

    assert one.status_code == 200
    assert one.json()["categories"] == [1, 2]
    assert one.json()["photos_ids"] == [created["photos"][0]["id"]]
    assert listing.json() == [one.json()]
    assert (await seeded.get(f"{API}/products/admin/999")).status_code == 404


async def test_update_product(seeded):
    created = await _create_dune(seeded)

    response = await seeded.put(
        f"{API}/products/{created['id']}",
        json={"price": 0, "categories": [2], "photos": [{"link": "b.jpg"}]},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["price"] == 0.0
    assert body["name"] == "Dune"
    assert [c["id"] for c in body["categories"]] == [2]
    assert [p["link"] for p in body["photos"]] == ["a.jpg", "b.jpg"]


async def test_update_missing_product_is_404(seeded):
    response = await seeded.put(f"{API}/products/42", json={"name": "x"})
    assert response.status_code == 404


async def test_delete_product(seeded):
    created = await _create_dune(seeded)

    response = await seeded.delete(f"{API}/products/{created['id']}")

    assert response.status_code == 204
    assert (await seeded.get(f"{API}/products/{created['id']}")).status_code == 404
    assert (await seeded.delete(f"{API}/products/{created['id']}")).status_code == 404


async def test_decrement_stock_clamps(seeded):
    created = await _create_dune(seeded)

    response = await seeded.post(f"{API}/products/{created['id']}/decrement-stock", json={"amount": 15})

    assert response.status_code == 200
    assert response.json()["amount_stock"] == 0


async def test_decrement_stock_missing_product_is_404(client):
    response = await client.post(f"{API}/products/5/decrement-stock", json={"amount": 1})
    assert response.status_code == 404


# =============================================================================
# Categorías
# =============================================================================

async def test_categories_crud(seeded):
    listing = await seeded.get(f"{API}/categories/")
    one = await seeded.get(f"{API}/categories/2")

    assert [c["name"] for c in listing.json()] == ["Ficción", "Ciencia ficción"]
    assert one.json() == {"id": 2, "name": "Ciencia ficción"}
    assert (await seeded.get(f"{API}/categories/9")).status_code == 404


async def test_products_by_category(seeded):
    created = await _create_dune(seeded)

    response = await seeded.get(f"{API}/categories/1/products")

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == 1
    assert [p["id"] for p in body["products"]] == [created["id"]]
    assert body["products"][0]["photos"][0]["link"] == "a.jpg"
    assert (await seeded.get(f"{API}/categories/9/products")).status_code == 404


# =============================================================================
# Pedidos y más vendidos
# =============================================================================

async def test_register_order_decrements_stock(seeded):
    created = await _create_dune(seeded)

    response = await seeded.post(f"{API}/orders/", json={"product_id": created["id"], "quantity": 4})

    assert response.status_code == 201
    assert response.json()["quantity"] == 4
    product = (await seeded.get(f"{API}/products/{created['id']}")).json()
    assert product["amount_stock"] == 6
    orders = (await seeded.get(f"{API}/products/{created['id']}/orders")).json()
    assert [o["id"] for o in orders] == [response.json()["id"]]


async def test_register_order_for_missing_product_is_404(client):
    response = await client.post(f"{API}/orders/", json={"product_id": 77})
    assert response.status_code == 404


async def test_top_selling_at_most_four(seeded):
    ids = []
    for i in range(5):
        response = await seeded.post(f"{API}/products/", json={**DUNE, "name": f"Libro {i}"})
        ids.append(response.json()["id"])
    for product_id in ids:
        await seeded.post(f"{API}/orders/", json={"product_id": product_id})

    response = await seeded.get(f"{API}/products/top-selling")

    assert response.status_code == 200
    assert [p["id"] for p in response.json()] == list(reversed(ids))[:4]


async def test_delete_product_removes_its_orders(seeded):
    created = await _create_dune(seeded)
    await seeded.post(f"{API}/orders/", json={"product_id": created["id"]})

    await seeded.delete(f"{API}/products/{created['id']}")

    assert (await seeded.get(f"{API}/products/top-selling")).json() == []

# backend/tests/test_clients.py
"""
Tests del alta y consulta de clientes.
"""

import pytest

from bookstore.core.exceptions import NotFoundError
from bookstore.schemas.client_schema import ClientCreate
from bookstore.services.client_service import client_service

API = "/api/v1"

ADDRESS = {
    "street": "Rua das Flores",
    "number": "100",
    "city": "São Paulo",
    "state": "SP",
    "zip_code": "01000-000",
}


class TestClientService:

    async def test_create_and_read(self, db):
        created = await client_service.create_client(
            db, ClientCreate(name="Ana", email="ana@example.com", address=ADDRESS)
        )

        fetched = await client_service.get_client_by_id(db, created.id)

        assert fetched.name == "Ana"
        assert fetched.address.city == "São Paulo"

    async def test_unknown_client(self, db):
        with pytest.raises(NotFoundError) as exc_info:
            await client_service.get_client_by_id(db, 3)
        assert exc_info.value.entity == "Client"

    async def test_list_all(self, db):
        for name in ("Ana", "Bruno"):
            await client_service.create_client(
                db, ClientCreate(name=name, email=f"{name.lower()}@example.com", address=ADDRESS)
            )

        clients = await client_service.get_all_clients(db)

        assert [c.name for c in clients] == ["Ana", "Bruno"]


async def test_client_endpoints(client):
    response = await client.post(
        f"{API}/clients/",
        json={"name": "Ana", "email": "ana@example.com", "phone": "1199999", "address": ADDRESS},
    )
    assert response.status_code == 201
    created = response.json()
    assert created["address"]["zip_code"] == "01000-000"

    listing = await client.get(f"{API}/clients/")
    one = await client.get(f"{API}/clients/{created['id']}")
    missing = await client.get(f"{API}/clients/999")

    assert [c["id"] for c in listing.json()] == [created["id"]]
    assert one.json()["email"] == "ana@example.com"
    assert missing.status_code == 404


async def test_invalid_email_is_rejected(client):
    response = await client.post(
        f"{API}/clients/",
        json={"name": "Ana", "email": "not-an-email", "address": ADDRESS},
    )
    assert response.status_code == 422

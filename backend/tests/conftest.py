# backend/tests/conftest.py
"""
Fixtures compartidas por los tests.

Cada test obtiene una base de datos SQLite en memoria nueva (StaticPool para que
todas las sesiones compartan la misma conexión) con todas las tablas creadas.
La dependencia get_db de la API se sobrescribe para usar esa base de datos.
"""

import os

os.environ.setdefault("DATABASE_URI", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from bookstore.api import deps
from bookstore.db.base import Base, Category, ProductOrder
from bookstore.main import app
from bookstore.schemas.product_schema import ProductCreate
from bookstore.schemas.photo_schema import PhotoCreate


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[deps.get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def categories(db):
    """Categorías 1 (Ficción) y 2 (Ciencia ficción) ya existentes."""
    items = [Category(id=1, name="Ficción"), Category(id=2, name="Ciencia ficción")]
    db.add_all(items)
    await db.commit()
    return items


@pytest.fixture
def dune_data():
    return ProductCreate(
        name="Dune",
        author="Herbert",
        synopsis="...",
        amount_stock=10,
        pages=412,
        year=1965,
        price=30,
        categories=[1, 2],
        photos=[PhotoCreate(link="a.jpg")],
    )


@pytest.fixture
def make_product_data():
    def _make(name="Libro", **overrides):
        data = dict(
            name=name,
            author="Autor",
            synopsis="Sinopsis",
            amount_stock=5,
            pages=100,
            year=2000,
            price=20,
        )
        data.update(overrides)
        return ProductCreate(**data)
    return _make


@pytest_asyncio.fixture
async def add_order(db):
    """Inserta directamente una fila de pedido para un producto."""
    async def _add(product_id, quantity=1):
        order = ProductOrder(product_id=product_id, quantity=quantity)
        db.add(order)
        await db.commit()
        return order
    return _add

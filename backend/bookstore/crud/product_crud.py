# backend/bookstore/crud/product_crud.py

"""
Operaciones CRUD para el modelo Product.

Este módulo implementa las operaciones de Create, Read, Update, Delete para productos,
siendo el corazón del catálogo. Maneja la tabla intermedia con categorías y las
consultas con relaciones precargadas (fotos, categorías, pedidos).

Estrategias implementadas:
- selectinload() para cargar relaciones de manera eficiente y evitar N+1 queries
- populate_existing en las lecturas con relaciones, para que una relectura
  dentro de la misma sesión refleje los cambios en las asociaciones
- Las escrituras hacen flush y no commit: el servicio decide cuándo confirmar
"""

from typing import List, Optional, Sequence
from sqlalchemy import select, delete, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from bookstore.db.models.product_model import Product, CategoryProduct
from bookstore.db.models.order_model import ProductOrder

# Campos escalares que se pueden crear/actualizar directamente sobre el modelo
PRODUCT_SCALAR_FIELDS = ("name", "author", "synopsis", "amount_stock", "pages", "year", "price")

# ========================================
# OPERACIONES DE LECTURA (READ)
# ========================================

def _with_details(query):
    """Añade la precarga de fotos y categorías a una consulta de productos."""
    return query.options(
        selectinload(Product.photos),
        selectinload(Product.categories),
    ).execution_options(populate_existing=True)


async def get_product(db: AsyncSession, product_id: int, for_update: bool = False) -> Optional[Product]:
    """
    Obtiene un producto por su ID, sin relaciones.

    Con for_update=True la fila se bloquea (SELECT ... FOR UPDATE) hasta el
    final de la transacción en los motores que lo soportan.
    """
    query = select(Product).filter(Product.id == product_id)
    if for_update:
        # Relee la fila aunque el producto ya esté en la sesión
        query = query.with_for_update().execution_options(populate_existing=True)
    result = await db.execute(query)
    return result.scalars().first()


async def get_product_with_details(db: AsyncSession, product_id: int) -> Optional[Product]:
    """Obtiene un producto por su ID con fotos y categorías precargadas."""
    result = await db.execute(_with_details(select(Product).filter(Product.id == product_id)))
    return result.scalars().first()


async def get_products(db: AsyncSession) -> List[Product]:
    """Obtiene todos los productos con fotos y categorías, sin paginación."""
    result = await db.execute(_with_details(select(Product).order_by(Product.id)))
    return result.scalars().all()


async def get_top_selling_products(db: AsyncSession, limit: int) -> List[Product]:
    """
    Obtiene los productos con pedidos, ordenados por su pedido más reciente
    (mayor ID de pedido primero) y limitados en la propia consulta.
    """
    latest_order = (
        select(
            ProductOrder.product_id.label("product_id"),
            func.max(ProductOrder.id).label("last_order_id"),
        )
        .group_by(ProductOrder.product_id)
        .subquery()
    )
    query = (
        select(Product)
        .join(latest_order, latest_order.c.product_id == Product.id)
        .order_by(latest_order.c.last_order_id.desc())
        .limit(limit)
    )
    result = await db.execute(_with_details(query))
    return result.scalars().all()


# ========================================
# OPERACIONES DE ESCRITURA (CREATE, UPDATE, DELETE)
# ========================================

async def create_product(db: AsyncSession, product_data: dict) -> Product:
    """Inserta la fila del producto con sus campos escalares y devuelve el objeto con ID."""
    db_product = Product(**{key: product_data[key] for key in PRODUCT_SCALAR_FIELDS if key in product_data})
    db.add(db_product)
    await db.flush()
    return db_product


def update_product_fields(db_product: Product, update_data: dict) -> Product:
    """
    Sobrescribe los campos escalares presentes en update_data.
    Los valores None se tratan como ausentes; 0 y "" se aplican.
    """
    for key in PRODUCT_SCALAR_FIELDS:
        value = update_data.get(key)
        if value is not None:
            setattr(db_product, key, value)
    return db_product


async def add_categories_to_product(db: AsyncSession, product_id: int, category_ids: Sequence[int]) -> None:
    """Inserta una fila en la tabla intermedia por cada categoría."""
    if not category_ids:
        return
    db.add_all([CategoryProduct(product_id=product_id, category_id=category_id) for category_id in category_ids])
    await db.flush()


async def remove_categories_from_product(db: AsyncSession, product_id: int) -> None:
    await db.execute(delete(CategoryProduct).where(CategoryProduct.product_id == product_id))


async def delete_orders_by_product(db: AsyncSession, product_id: int) -> None:
    await db.execute(delete(ProductOrder).where(ProductOrder.product_id == product_id))


async def delete_product(db: AsyncSession, product_id: int) -> None:
    """Elimina la fila del producto. Las filas dependientes deben borrarse antes."""
    await db.execute(delete(Product).where(Product.id == product_id))

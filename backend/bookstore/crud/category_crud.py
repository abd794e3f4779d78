# backend/bookstore/crud/category_crud.py

"""
Operaciones CRUD para el modelo Category.

Este módulo implementa las operaciones de lectura y creación de categorías,
proporcionando una capa de abstracción entre los servicios y la base de datos.
"""

from typing import List, Optional, Sequence
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from bookstore.db.models.category_model import Category
from bookstore.db.models.product_model import Product
from bookstore.schemas import category_schema

# ========================================
# OPERACIONES DE LECTURA (READ)
# ========================================

async def get_category(db: AsyncSession, category_id: int) -> Optional[Category]:
    """
    Obtiene una categoría por su ID.

    Args:
        db: Sesión asíncrona de SQLAlchemy
        category_id: ID único de la categoría

    Returns:
        Objeto Category si existe, None si no se encuentra
    """
    result = await db.execute(select(Category).filter(Category.id == category_id))
    return result.scalars().first()


async def get_categories(db: AsyncSession) -> List[Category]:
    """Obtiene todas las categorías ordenadas por ID."""
    result = await db.execute(select(Category).order_by(Category.id))
    return result.scalars().all()


async def get_categories_by_ids(db: AsyncSession, category_ids: Sequence[int]) -> List[Category]:
    """Obtiene las categorías cuyos IDs están en la lista dada."""
    if not category_ids:
        return []
    result = await db.execute(select(Category).filter(Category.id.in_(category_ids)))
    return result.scalars().all()


async def get_category_with_products(db: AsyncSession, category_id: int) -> Optional[Category]:
    """
    Obtiene una categoría con sus productos, y cada producto con sus fotos y categorías.

    Si la categoría ya está en la sesión se expira su colección de productos
    para que la consulta la vuelva a cargar. No se usa populate_existing: la
    carga de Product.categories alcanza de nuevo a esta misma categoría y la
    dejaría sin productos cargados.
    """
    category = await get_category(db, category_id)
    if not category:
        return None
    db.expire(category, ["products"])

    result = await db.execute(
        select(Category)
        .options(
            selectinload(Category.products).options(
                selectinload(Product.photos),
                selectinload(Product.categories),
            )
        )
        .filter(Category.id == category_id)
    )
    return result.scalars().first()


# ========================================
# OPERACIONES DE ESCRITURA (CREATE)
# ========================================

async def create_category(db: AsyncSession, category: category_schema.CategoryCreate) -> Category:
    """Añade una nueva categoría a la sesión."""
    db_category = Category(name=category.name)
    db.add(db_category)
    await db.flush()  # Asigna el ID; el commit lo hace el servicio
    return db_category

# backend/bookstore/services/category_service.py
"""
Servicio para operaciones de negocio relacionadas con categorías.

Además de las operaciones básicas, ofrece la validación de existencia de
categorías que usa el servicio de productos antes de cualquier escritura.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Sequence
import logging

from bookstore.core.exceptions import NotFoundError
from bookstore.db.database import unit_of_work
from bookstore.db.models.category_model import Category
from bookstore.crud import category_crud
from bookstore.schemas import category_schema

logger = logging.getLogger(__name__)

class CategoryService:
    """
    Servicio para operaciones de negocio relacionadas con categorías.
    """

    # ========================================
    # OPERACIONES DE CONSULTA
    # ========================================

    async def get_category_by_id(self, db: AsyncSession, category_id: int) -> Category:
        """
        Obtiene una categoría por su ID.

        Raises:
            NotFoundError: si la categoría no existe
        """
        category = await category_crud.get_category(db, category_id=category_id)
        if not category:
            logger.warning(f"Categoría {category_id} no encontrada")
            raise NotFoundError("Category", category_id)
        return category

    async def get_all_categories(self, db: AsyncSession) -> List[Category]:
        return await category_crud.get_categories(db)

    async def ensure_categories_exist(self, db: AsyncSession, category_ids: Sequence[int]) -> None:
        """
        Verifica que todos los IDs de categoría existan.

        Se llama antes de cualquier escritura para que un ID inválido no deje
        un producto creado a medias.

        Raises:
            NotFoundError: con los IDs que no existen
        """
        if not category_ids:
            return
        found = await category_crud.get_categories_by_ids(db, category_ids)
        found_ids = {category.id for category in found}
        missing = [category_id for category_id in category_ids if category_id not in found_ids]
        if missing:
            logger.warning(f"Categorías inexistentes: {missing}")
            raise NotFoundError("Category", missing if len(missing) > 1 else missing[0])

    # ========================================
    # OPERACIONES DE ESCRITURA
    # ========================================

    async def create_new_category(self, db: AsyncSession, category_in: category_schema.CategoryCreate) -> Category:
        async with unit_of_work(db):
            category = await category_crud.create_category(db, category=category_in)
        logger.info(f"Categoría creada: {category.id} '{category.name}'")
        return category


# Instancia única del servicio para ser usada en toda la aplicación
category_service = CategoryService()

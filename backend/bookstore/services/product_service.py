# backend/bookstore/services/product_service.py

"""
Capa de servicios para operaciones de negocio relacionadas con productos.

Esta capa implementa el patrón Service Layer para el dominio de productos,
orquestando operaciones CRUD sobre varias tablas (productos, tabla intermedia
categoría-producto, fotos y pedidos).

Responsabilidades principales:
- Validar que las categorías referenciadas existen antes de escribir
- Crear y actualizar productos manteniendo la tabla intermedia con categorías
- Delegar la persistencia de fotos en photo_crud
- Eliminar un producto junto con sus fotos, asociaciones y pedidos
- Descontar stock sin permitir valores negativos
- Dar forma a las vistas pública y de administración

Cada operación de escritura se ejecuta dentro de unit_of_work(): o se confirma
completa o no se confirma nada.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Dict, Any
import logging

from bookstore.core.config import settings
from bookstore.core.exceptions import NotFoundError
from bookstore.db.database import unit_of_work
from bookstore.db.models.category_model import Category
from bookstore.db.models.product_model import Product
from bookstore.crud import product_crud, photo_crud, category_crud
from bookstore.schemas import product_schema
from bookstore.services.category_service import category_service

# Configurar logger
logger = logging.getLogger(__name__)


def _unique_ids(ids: List[int]) -> List[int]:
    """Elimina IDs repetidos conservando el orden."""
    return list(dict.fromkeys(ids))


class ProductService:
    """
    Servicio para operaciones de negocio relacionadas con productos.

    Todas las funciones reciben la sesión de base de datos; el servicio no
    guarda estado propio.
    """

    # ========================================
    # OPERACIONES DE CONSULTA
    # ========================================

    async def check_product_exists(self, db: AsyncSession, product_id: int, for_update: bool = False) -> Product:
        """Devuelve el producto o lanza NotFoundError."""
        product = await product_crud.get_product(db, product_id, for_update=for_update)
        if not product:
            logger.warning(f"Producto {product_id} no encontrado")
            raise NotFoundError("Product", product_id)
        return product

    async def get_product_by_id(self, db: AsyncSession, product_id: int) -> Product:
        """Vista pública: campos escalares, fotos (id, link) y categorías (id, name)."""
        product = await product_crud.get_product_with_details(db, product_id)
        if not product:
            logger.warning(f"Producto {product_id} no encontrado")
            raise NotFoundError("Product", product_id)
        return product

    async def get_all_products(self, db: AsyncSession) -> List[Product]:
        return await product_crud.get_products(db)

    async def get_top_selling_products(self, db: AsyncSession) -> List[Product]:
        """
        Productos más vendidos, ordenados por el ID de su pedido más reciente.

        El límite se aplica en la consulta (settings.TOP_SELLING_LIMIT).
        """
        return await product_crud.get_top_selling_products(db, limit=settings.TOP_SELLING_LIMIT)

    async def get_products_by_category(self, db: AsyncSession, category_id: int) -> Category:
        """Devuelve la categoría con sus productos, cada uno con fotos y categorías."""
        category = await category_crud.get_category_with_products(db, category_id)
        if not category:
            logger.warning(f"Categoría {category_id} no encontrada")
            raise NotFoundError("Category", category_id)
        return category

    async def get_product_for_admin_by_id(self, db: AsyncSession, product_id: int) -> Dict[str, Any]:
        """Vista de administración: campos escalares más IDs de fotos y categorías."""
        product = await self.get_product_by_id(db, product_id)
        return product.to_admin_dict()

    async def get_products_admin(self, db: AsyncSession) -> List[Dict[str, Any]]:
        products = await product_crud.get_products(db)
        return [product.to_admin_dict() for product in products]

    # ========================================
    # OPERACIONES DE ESCRITURA CON ORQUESTACIÓN
    # ========================================

    async def create_product(self, db: AsyncSession, product_in: product_schema.ProductCreate) -> Product:
        """
        Crea un producto con sus categorías y fotos.

        1. Valida que todas las categorías existen (NotFoundError si no).
        2. Inserta el producto.
        3. Inserta una fila en la tabla intermedia por categoría.
        4. Crea las fotos asociadas al nuevo producto.
        5. Devuelve la vista pública completa releída de la base de datos.
        """
        category_ids = _unique_ids(product_in.categories)
        await category_service.ensure_categories_exist(db, category_ids)

        async with unit_of_work(db):
            product = await product_crud.create_product(db, product_in.model_dump(exclude={"categories", "photos"}))
            await product_crud.add_categories_to_product(db, product.id, category_ids)
            await photo_crud.create_photos(db, product_in.photos, product.id)

        logger.info(f"Producto creado: {product.id} '{product.name}' con {len(category_ids)} categorías y {len(product_in.photos)} fotos")
        return await self.get_product_by_id(db, product.id)

    async def update_product(self, db: AsyncSession, product_id: int, product_in: product_schema.ProductUpdate) -> Product:
        """
        Actualiza un producto de forma parcial.

        - categories enviado: reemplazo completo de las asociaciones.
        - photos enviado: se añaden a las existentes.
        - Campos escalares enviados con valor no nulo: se sobrescriben (0 incluido).
        """
        update_data = product_in.model_dump(exclude_unset=True)

        product = await self.check_product_exists(db, product_id)

        category_ids = None
        if update_data.get("categories") is not None:
            category_ids = _unique_ids(update_data["categories"])
            await category_service.ensure_categories_exist(db, category_ids)

        async with unit_of_work(db):
            if category_ids is not None:
                await product_crud.remove_categories_from_product(db, product_id)
                await product_crud.add_categories_to_product(db, product_id, category_ids)

            if product_in.photos is not None:
                await photo_crud.create_photos(db, product_in.photos, product_id)

            product_crud.update_product_fields(product, update_data)
            await db.flush()

        logger.info(f"Producto actualizado: {product_id} (campos: {sorted(update_data)})")
        return await self.get_product_by_id(db, product_id)

    async def delete_product(self, db: AsyncSession, product_id: int) -> None:
        """
        Elimina un producto y todo lo que depende de él, en este orden:
        fotos, filas de la tabla intermedia, pedidos y finalmente el producto.
        """
        await self.check_product_exists(db, product_id)

        async with unit_of_work(db):
            await photo_crud.delete_photos_by_product(db, product_id)
            await product_crud.remove_categories_from_product(db, product_id)
            await product_crud.delete_orders_by_product(db, product_id)
            await product_crud.delete_product(db, product_id)

        logger.info(f"Producto eliminado: {product_id}")

    async def decrement_product_stock(self, db: AsyncSession, product_id: int, amount: int) -> Product:
        """Resta amount al stock del producto; el resultado nunca baja de 0."""
        async with unit_of_work(db):
            product = await self.check_product_exists(db, product_id, for_update=True)
            await self.apply_stock_decrement(db, product, amount)
        return product

    async def apply_stock_decrement(self, db: AsyncSession, product: Product, amount: int) -> None:
        """
        Descuenta stock sobre un producto ya cargado, sin confirmar.
        PRECONDICIÓN: se ejecuta dentro de una unidad de trabajo.
        """
        previous = product.amount_stock
        product.amount_stock = max(previous - amount, 0)
        await db.flush()
        logger.info(f"Stock del producto {product.id}: {previous} -> {product.amount_stock}")


# ========================================
# INSTANCIA SINGLETON DEL SERVICIO
# ========================================

# Instancia única del servicio para ser usada en toda la aplicación
product_service = ProductService()

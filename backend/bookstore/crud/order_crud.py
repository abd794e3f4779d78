# backend/bookstore/crud/order_crud.py
"""
Operaciones CRUD para el modelo ProductOrder.
"""

from typing import List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.db.models.order_model import ProductOrder

async def create_product_order(db: AsyncSession, product_id: int, quantity: int) -> ProductOrder:
    """Añade un pedido de producto a la sesión. El commit lo hace la transacción de nivel superior."""
    db_order = ProductOrder(product_id=product_id, quantity=quantity)
    db.add(db_order)
    await db.flush()
    return db_order

async def get_orders_by_product(db: AsyncSession, product_id: int) -> List[ProductOrder]:
    """Obtiene los pedidos de un producto, del más reciente al más antiguo."""
    query = select(ProductOrder).filter(ProductOrder.product_id == product_id).order_by(ProductOrder.id.desc())
    result = await db.execute(query)
    return result.scalars().all()

# backend/bookstore/services/order_service.py
"""
Servicio para el registro de ventas de productos.

Un pedido inserta una fila en product_orders y descuenta el stock del
producto en la misma transacción. Estas filas alimentan el ranking de
productos más vendidos.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
import logging

from bookstore.db.database import unit_of_work
from bookstore.db.models.order_model import ProductOrder
from bookstore.crud import order_crud
from bookstore.schemas.order_schema import ProductOrderCreate
from bookstore.services.product_service import product_service

logger = logging.getLogger(__name__)

class OrderService:

    async def register_order(self, db: AsyncSession, order_in: ProductOrderCreate) -> ProductOrder:
        """
        Registra la venta de un producto y descuenta su stock (sin bajar de 0).

        Raises:
            NotFoundError: si el producto no existe
        """
        async with unit_of_work(db):
            product = await product_service.check_product_exists(db, order_in.product_id, for_update=True)
            order = await order_crud.create_product_order(db, product_id=product.id, quantity=order_in.quantity)
            await product_service.apply_stock_decrement(db, product, order_in.quantity)

        await db.refresh(order)
        logger.info(f"Pedido {order.id} registrado: producto {order.product_id} x{order.quantity}")
        return order

    async def get_orders_by_product(self, db: AsyncSession, product_id: int) -> List[ProductOrder]:
        await product_service.check_product_exists(db, product_id)
        return await order_crud.get_orders_by_product(db, product_id)


order_service = OrderService()

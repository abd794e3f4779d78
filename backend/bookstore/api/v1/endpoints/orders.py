"""
Endpoints para el registro de ventas de productos.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from bookstore.api import deps
from bookstore.schemas.order_schema import ProductOrderCreate, ProductOrderResponse
from bookstore.services.order_service import order_service

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/", response_model=ProductOrderResponse, status_code=status.HTTP_201_CREATED)
async def create_order(
    *,
    db: AsyncSession = Depends(deps.get_db),
    order_in: ProductOrderCreate,
) -> ProductOrderResponse:
    """
    Registra la venta de un producto.

    Descuenta el stock del producto en la misma transacción; si el stock no
    alcanza, queda en 0.
    """
    logger.info(f"🛒 PEDIDO: Producto {order_in.product_id} x{order_in.quantity}")
    return await order_service.register_order(db, order_in)

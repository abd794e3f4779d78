# backend/bookstore/schemas/order_schema.py
"""
Se encarga de definir los esquemas Pydantic para el modelo ProductOrder.
"""

from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime

class ProductOrderCreate(BaseModel):
    """Esquema para registrar la venta de un producto."""
    product_id: int = Field(..., description="ID del producto vendido")
    quantity: int = Field(default=1, description="Unidades vendidas", gt=0)


class ProductOrderResponse(BaseModel):
    """Esquema de respuesta para un pedido de producto."""
    id: int
    product_id: int
    quantity: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

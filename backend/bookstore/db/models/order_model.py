# backend/bookstore/db/models/order_model.py
"""
Este archivo contiene el modelo de pedido de producto para la aplicación.

Cada fila registra una venta de un producto; el ranking de más vendidos
se calcula a partir de estas filas.
"""

from sqlalchemy import Column, Integer, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from bookstore.db.database import Base

class ProductOrder(Base):
    __tablename__ = "product_orders"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    product = relationship("Product", back_populates="orders")

    def __repr__(self):
        return f"<ProductOrder(id={self.id}, product_id={self.product_id}, quantity={self.quantity})>"

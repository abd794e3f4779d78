# backend/bookstore/db/models/category_model.py
"""
Se encarga de definir los modelos de categoría para la aplicación.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from bookstore.db.database import Base

class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)

    # La pertenencia se gestiona solo a través de filas de category_products
    products = relationship(
        "Product",
        secondary="category_products",
        back_populates="categories",
        order_by="Product.id",
        viewonly=True,
        sync_backref=False
    )

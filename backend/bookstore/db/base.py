# backend/bookstore/db/base.py
"""
Punto único de importación de todos los modelos ORM.

Importar este módulo garantiza que Base.metadata conoce todas las tablas y que
las relaciones declaradas con strings ("Product", "Photo", ...) se pueden resolver.
"""

from bookstore.db.database import Base
from bookstore.db.models.category_model import Category
from bookstore.db.models.product_model import Product, Photo, CategoryProduct
from bookstore.db.models.order_model import ProductOrder
from bookstore.db.models.client_model import Client, Address

__all__ = [
    "Base",
    "Category",
    "Product",
    "Photo",
    "CategoryProduct",
    "ProductOrder",
    "Client",
    "Address",
]

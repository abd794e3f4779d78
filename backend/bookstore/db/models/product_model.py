# backend/bookstore/db/models/product_model.py
from sqlalchemy import Column, Integer, String, ForeignKey, Text, Numeric
from sqlalchemy.orm import relationship

from bookstore.db.database import Base

class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    author = Column(String(255), nullable=False, index=True)
    synopsis = Column(Text, nullable=False)
    amount_stock = Column(Integer, nullable=False, default=0)
    pages = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)

    photos = relationship("Photo", back_populates="product", order_by="Photo.id")

    categories = relationship(
        "Category",
        secondary="category_products",
        back_populates="products",
        order_by="Category.id",
        viewonly=True,
        sync_backref=False
    )

    orders = relationship("ProductOrder", back_populates="product")

    def to_dict(self):
        """Convierte el objeto Product en un diccionario con sus campos escalares."""
        return {
            "id": self.id,
            "name": self.name,
            "author": self.author,
            "synopsis": self.synopsis,
            "amount_stock": self.amount_stock,
            "pages": self.pages,
            "year": self.year,
            "price": float(self.price) if self.price is not None else 0.0,
        }

    def to_admin_dict(self):
        """
        Proyección reducida para edición administrativa: campos escalares más
        los IDs de fotos y categorías, sin links ni nombres.
        Requiere photos y categories precargados.
        """
        data = self.to_dict()
        data["photos_ids"] = [photo.id for photo in self.photos]
        data["categories"] = [category.id for category in self.categories]
        return data


class Photo(Base):
    __tablename__ = "photos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    link = Column(Text, nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)

    product = relationship("Product", back_populates="photos")


class CategoryProduct(Base):
    __tablename__ = "category_products"

    product_id = Column(Integer, ForeignKey("products.id"), primary_key=True)
    category_id = Column(Integer, ForeignKey("categories.id"), primary_key=True)

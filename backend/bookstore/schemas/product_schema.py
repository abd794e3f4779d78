# backend/bookstore/schemas/product_schema.py
"""
Esquemas Pydantic para el modelo Product.

Vistas de salida disponibles:
- ProductResponse: solo campos escalares (p. ej. tras descontar stock)
- ProductDetailResponse: vista pública de un producto, con fotos (id, link) y categorías (id, name)
- ProductListItem: vista pública de listados, con fotos (id, link) y solo IDs de categorías
- ProductAdminResponse: vista de administración, con arrays planos de IDs
"""

from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict

from .category_schema import CategoryResponse, CategoryRef
from .photo_schema import PhotoCreate, PhotoResponse

# ========================================
# ESQUEMA BASE
# ========================================

class ProductBase(BaseModel):
    """Propiedades comunes compartidas entre esquemas de producto."""
    name: str
    author: str
    synopsis: str
    amount_stock: int = 0
    pages: int
    year: int
    price: float


# ========================================
# ESQUEMAS PARA OPERACIONES
# ========================================

class ProductCreate(ProductBase):
    """Esquema para crear un producto junto con sus categorías y fotos."""
    categories: List[int] = Field(default_factory=list, description="IDs de categorías existentes")
    photos: List[PhotoCreate] = Field(default_factory=list)


class ProductUpdate(BaseModel):
    """
    Esquema para actualizar un producto. Todos los campos son opcionales.

    Un campo cuenta como enviado si aparece en el cuerpo con un valor no nulo,
    por lo que price=0 o amount_stock=0 son actualizaciones válidas.
    - categories: si se envía, reemplaza por completo las categorías actuales.
    - photos: si se envía, las fotos se añaden a las existentes.
    """
    name: Optional[str] = None
    author: Optional[str] = None
    synopsis: Optional[str] = None
    amount_stock: Optional[int] = None
    pages: Optional[int] = None
    year: Optional[int] = None
    price: Optional[float] = None
    categories: Optional[List[int]] = None
    photos: Optional[List[PhotoCreate]] = None


class StockDecrement(BaseModel):
    """Cantidad a descontar del stock. No se valida el signo."""
    amount: int


# ========================================
# ESQUEMAS DE RESPUESTA
# ========================================

class ProductResponse(ProductBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


class ProductDetailResponse(ProductResponse):
    photos: List[PhotoResponse] = []
    categories: List[CategoryResponse] = []


class ProductListItem(ProductResponse):
    photos: List[PhotoResponse] = []
    categories: List[CategoryRef] = []


class ProductAdminResponse(ProductResponse):
    """Proyección reducida para contextos de edición administrativa."""
    photos_ids: List[int] = []
    categories: List[int] = []


class CategoryWithProductsResponse(CategoryResponse):
    """Una categoría junto con sus productos (cada uno con fotos y categorías)."""
    products: List[ProductDetailResponse] = []

# backend/bookstore/schemas/category_schema.py

"""
Esquemas Pydantic para el modelo Category.

Patrón de esquemas utilizado:
- CategoryBase: Propiedades comunes compartidas
- CategoryCreate: Para crear nuevas categorías (POST)
- CategoryResponse: Para respuestas de la API (GET)
- CategoryRef: Referencia mínima (solo ID) usada en listados de productos
"""

from pydantic import BaseModel, ConfigDict

# ========================================
# ESQUEMA BASE
# ========================================

class CategoryBase(BaseModel):
    """Propiedades comunes compartidas entre esquemas de categoría."""
    name: str


# ========================================
# ESQUEMAS PARA OPERACIONES
# ========================================

class CategoryCreate(CategoryBase):
    """Esquema para crear una nueva categoría. El ID lo asigna la base de datos."""
    pass


# ========================================
# ESQUEMAS DE RESPUESTA
# ========================================

class CategoryResponse(CategoryBase):
    """Esquema para las respuestas de la API al leer categorías."""
    id: int

    model_config = ConfigDict(from_attributes=True)


class CategoryRef(BaseModel):
    """Solo el ID de la categoría, para el listado público de productos."""
    id: int

    model_config = ConfigDict(from_attributes=True)

"""
Endpoints REST para operaciones de categorías.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from bookstore.api import deps
from bookstore.schemas import category_schema
from bookstore.schemas.product_schema import CategoryWithProductsResponse
from bookstore.services.category_service import category_service
from bookstore.services.product_service import product_service

router = APIRouter()

@router.post("/", response_model=category_schema.CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    *,
    db: AsyncSession = Depends(deps.get_db),
    category_in: category_schema.CategoryCreate
) -> category_schema.CategoryResponse:
    """Crea una nueva categoría."""
    return await category_service.create_new_category(db=db, category_in=category_in)

@router.get("/", response_model=List[category_schema.CategoryResponse])
async def read_categories(
    db: AsyncSession = Depends(deps.get_db),
) -> List[category_schema.CategoryResponse]:
    """Obtiene todas las categorías."""
    return await category_service.get_all_categories(db=db)

@router.get("/{category_id}", response_model=category_schema.CategoryResponse)
async def read_category(
    *,
    db: AsyncSession = Depends(deps.get_db),
    category_id: int,
) -> category_schema.CategoryResponse:
    """Obtiene los detalles de una categoría específica por su ID."""
    return await category_service.get_category_by_id(db=db, category_id=category_id)

@router.get("/{category_id}/products", response_model=CategoryWithProductsResponse)
async def read_category_products(
    *,
    db: AsyncSession = Depends(deps.get_db),
    category_id: int,
) -> CategoryWithProductsResponse:
    """Obtiene la categoría junto con sus productos."""
    return await product_service.get_products_by_category(db, category_id)

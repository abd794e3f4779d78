# backend/bookstore/api/v1/endpoints/products.py

"""
Endpoints REST para operaciones CRUD de productos (libros).

Los NotFoundError lanzados por el servicio se convierten en 404 mediante el
exception handler registrado en main.py.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
import logging

from bookstore.api import deps
from bookstore.schemas import product_schema
from bookstore.schemas.order_schema import ProductOrderResponse
from bookstore.services.product_service import product_service
from bookstore.services.order_service import order_service

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/", response_model=product_schema.ProductDetailResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    *,
    db: AsyncSession = Depends(deps.get_db),
    product_in: product_schema.ProductCreate,
) -> product_schema.ProductDetailResponse:
    """Crea un nuevo producto con sus categorías y fotos."""
    logger.info(f"🆕 PRODUCTO: Creando producto '{product_in.name}'")
    product = await product_service.create_product(db, product_in)
    logger.info(f"✅ PRODUCTO: Creado exitosamente ID {product.id}")
    return product


@router.get("/", response_model=List[product_schema.ProductListItem])
async def read_products(
    db: AsyncSession = Depends(deps.get_db),
) -> List[product_schema.ProductListItem]:
    """Lista todos los productos (vista pública)."""
    products = await product_service.get_all_products(db)
    logger.debug(f"📋 PRODUCTOS: Encontrados {len(products)} resultados")
    return products


@router.get("/top-selling", response_model=List[product_schema.ProductDetailResponse])
async def read_top_selling_products(
    db: AsyncSession = Depends(deps.get_db),
) -> List[product_schema.ProductDetailResponse]:
    """Obtiene los productos más vendidos."""
    return await product_service.get_top_selling_products(db)


@router.get("/admin", response_model=List[product_schema.ProductAdminResponse])
async def read_products_admin(
    db: AsyncSession = Depends(deps.get_db),
) -> List[product_schema.ProductAdminResponse]:
    """Lista todos los productos con IDs de fotos y categorías (vista de administración)."""
    return await product_service.get_products_admin(db)


@router.get("/admin/{product_id}", response_model=product_schema.ProductAdminResponse)
async def read_product_admin(
    *,
    db: AsyncSession = Depends(deps.get_db),
    product_id: int,
) -> product_schema.ProductAdminResponse:
    """Obtiene un producto en la vista de administración."""
    return await product_service.get_product_for_admin_by_id(db, product_id)


@router.get("/{product_id}", response_model=product_schema.ProductDetailResponse)
async def read_product(
    *,
    db: AsyncSession = Depends(deps.get_db),
    product_id: int,
) -> product_schema.ProductDetailResponse:
    """Obtiene los detalles de un producto por ID."""
    logger.debug(f"🔍 PRODUCTO: Buscando producto ID {product_id}")
    return await product_service.get_product_by_id(db, product_id)


@router.put("/{product_id}", response_model=product_schema.ProductDetailResponse)
async def update_product(
    *,
    db: AsyncSession = Depends(deps.get_db),
    product_id: int,
    product_in: product_schema.ProductUpdate,
) -> product_schema.ProductDetailResponse:
    """Actualiza un producto existente."""
    logger.info(f"🔄 PRODUCTO: Actualizando producto ID {product_id}")
    product = await product_service.update_product(db, product_id, product_in)
    logger.info(f"✅ PRODUCTO: Actualizado exitosamente ID {product_id}")
    return product


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    *,
    db: AsyncSession = Depends(deps.get_db),
    product_id: int,
) -> Response:
    """Elimina un producto junto con sus fotos, categorías asociadas y pedidos."""
    logger.info(f"🗑️ PRODUCTO: Eliminando producto ID {product_id}")
    await product_service.delete_product(db, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{product_id}/decrement-stock", response_model=product_schema.ProductResponse)
async def decrement_product_stock(
    *,
    db: AsyncSession = Depends(deps.get_db),
    product_id: int,
    stock_in: product_schema.StockDecrement,
) -> product_schema.ProductResponse:
    """Descuenta stock del producto (nunca por debajo de 0)."""
    logger.info(f"📦 STOCK: Descontando {stock_in.amount} del producto ID {product_id}")
    return await product_service.decrement_product_stock(db, product_id, stock_in.amount)


@router.get("/{product_id}/orders", response_model=List[ProductOrderResponse])
async def read_product_orders(
    *,
    db: AsyncSession = Depends(deps.get_db),
    product_id: int,
) -> List[ProductOrderResponse]:
    """Lista los pedidos de un producto, del más reciente al más antiguo."""
    return await order_service.get_orders_by_product(db, product_id)

# backend/bookstore/api/v1/api_router.py
"""
Este archivo contiene el router principal para la API versión 1.

Se encarga de registrar y configurar todos los routers de la versión 1 de la API.
"""

from fastapi import APIRouter

# Importación de routers especializados por dominio de negocio
from bookstore.api.v1.endpoints import (
    products,
    categories,
    clients,
    orders
)

# ========================================
# CONFIGURACIÓN DEL ROUTER PRINCIPAL V1
# ========================================

api_router_v1 = APIRouter()

# ========================================
# REGISTRO DE ROUTERS POR DOMINIO DE NEGOCIO
# ========================================

# ROUTER DE CATEGORÍAS
# Alta y consulta de categorías, y productos por categoría
api_router_v1.include_router(
    categories.router,              # Router con endpoints de categorías
    prefix="/categories",           # Prefijo: /api/v1/categories
    tags=["Categories"]             # Tag para documentación OpenAPI/Swagger
)

# ROUTER DE PRODUCTOS
# CRUD de libros, vistas de administración, más vendidos y stock
api_router_v1.include_router(
    products.router,
    prefix="/products",
    tags=["Products"]
)

# ROUTER DE CLIENTES
api_router_v1.include_router(
    clients.router,
    prefix="/clients",
    tags=["Clients"]
)

# ROUTER DE PEDIDOS
# Registro de ventas (descuenta stock y alimenta el ranking de más vendidos)
api_router_v1.include_router(
    orders.router,
    prefix="/orders",
    tags=["Orders"]
)

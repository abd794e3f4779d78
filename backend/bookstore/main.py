# backend/bookstore/main.py
"""
Punto de entrada principal de la aplicación FastAPI.

Este módulo configura y inicializa la aplicación FastAPI completa,
incluyendo el logging, el registro de rutas, la traducción de errores de
dominio a respuestas HTTP y los eventos del ciclo de vida de la aplicación.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from bookstore.core.config import settings  # Configuración centralizada de la aplicación
from bookstore.core.exceptions import NotFoundError
from bookstore.db.base import Base  # Importa todos los modelos para que metadata esté completa
from bookstore.db.database import engine
from bookstore.api.v1.api_router import api_router_v1  # Router principal de la API v1

# ========================================
# CONFIGURACIÓN DE LOGGING
# ========================================

logging.basicConfig(level=settings.LOG_LEVEL, format=settings.LOG_FORMAT)
logger = logging.getLogger(__name__)

# ========================================
# CONFIGURACIÓN DE LA APLICACIÓN FASTAPI
# ========================================

app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    version=settings.PROJECT_VERSION,
    description="API del catálogo de la librería: clientes, libros, categorías, fotos y pedidos"
)

# ========================================
# REGISTRO DE ROUTERS DE LA API
# ========================================

app.include_router(api_router_v1, prefix=settings.API_V1_STR)

# ========================================
# MANEJO DE ERRORES DE DOMINIO
# ========================================

@app.exception_handler(NotFoundError)
async def not_found_exception_handler(request: Request, exc: NotFoundError):
    """Un ID inexistente (cliente, producto o categoría) se responde con 404."""
    logger.warning(f"⚠️ {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})

# ========================================
# ENDPOINTS RAÍZ Y VERIFICACIÓN DE ESTADO
# ========================================

@app.get("/", tags=["Root"])
async def read_root():
    """
    Endpoint raíz para verificación básica del estado de la API.

    Example:
        GET /
        Response: {"message": "Bienvenido a Bookstore Catalog API v0.1.0"}
    """
    return {"message": f"Bienvenido a {settings.PROJECT_NAME} v{settings.PROJECT_VERSION}"}

# ========================================
# EVENTOS DEL CICLO DE VIDA DE LA APLICACIÓN
# ========================================

@app.on_event("startup")
async def startup_event():
    """
    Evento ejecutado al iniciar la aplicación.

    Crea las tablas que falten a partir de los modelos ORM cuando
    CREATE_TABLES_ON_STARTUP está activo.
    """
    if settings.CREATE_TABLES_ON_STARTUP:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("✅ Tablas de la base de datos verificadas")


@app.on_event("shutdown")
async def shutdown_event():
    await engine.dispose()

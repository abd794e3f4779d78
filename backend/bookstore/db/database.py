# backend/bookstore/db/database.py

"""
Configuración principal de la base de datos para la aplicación.

Este módulo establece la conexión con PostgreSQL usando SQLAlchemy y define
los componentes básicos que serán utilizados por toda la aplicación:
- Motor de base de datos (engine)
- Fábrica de sesiones (AsyncSessionLocal)
- Clase base para modelos (Base)
- Unidad de trabajo transaccional (unit_of_work)

La dependencia get_db() vive en bookstore/api/deps.py.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import declarative_base
from bookstore.core.config import settings # Importamos nuestra configuración

# Crear el motor de base de datos asíncrono
engine = create_async_engine(settings.DATABASE_URL, pool_pre_ping=True)

# Crear un sessionmaker asíncrono
# expire_on_commit=False es importante para que los objetos sigan siendo utilizables
# después de que la transacción se haya confirmado.
AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)

# Clase base declarativa para todos los modelos ORM
Base = declarative_base()


@asynccontextmanager
async def unit_of_work(db: AsyncSession) -> AsyncIterator[AsyncSession]:
    """
    Agrupa una secuencia de escrituras en una única transacción.

    Las funciones CRUD de escritura solo hacen flush; el commit se hace aquí
    una sola vez al final. Si cualquier paso falla se hace rollback de todo
    y la excepción se propaga al llamador sin modificar.

    Uso:
        async with unit_of_work(db):
            await photo_crud.delete_photos_by_product(db, product_id)
            await product_crud.delete_product(db, product_id)
    """
    try:
        yield db
        await db.commit()
    except Exception:
        await db.rollback()
        raise

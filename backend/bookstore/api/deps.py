# backend/bookstore/api/deps.py
"""
Módulo de dependencias para FastAPI.

Este archivo centraliza las dependencias que pueden ser inyectadas en los
endpoints de la API. En los tests se sobrescribe get_db para apuntar a una
base de datos de prueba.
"""

from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import AsyncSession
from bookstore.db.database import AsyncSessionLocal

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependencia de FastAPI para obtener una sesión de base de datos asíncrona.
    Se asegura de que la sesión se cierre siempre después de la petición.
    """
    async with AsyncSessionLocal() as session:
        yield session

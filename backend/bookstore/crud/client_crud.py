# backend/bookstore/crud/client_crud.py
"""
Este archivo contiene las operaciones CRUD para el modelo Client.

Este módulo proporciona funciones para crear y buscar clientes en la base de datos.
La dirección se carga siempre junto con el cliente.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from typing import List, Optional
from bookstore.db.models.client_model import Client, Address
from bookstore.schemas.client_schema import ClientCreate

async def get_client(db: AsyncSession, client_id: int) -> Optional[Client]:
    """
    Busca un cliente por su ID de forma asíncrona, con su dirección.
    """
    result = await db.execute(
        select(Client)
        .options(selectinload(Client.address))
        .filter(Client.id == client_id)
    )
    return result.scalars().first()

async def get_clients(db: AsyncSession) -> List[Client]:
    result = await db.execute(select(Client).options(selectinload(Client.address)).order_by(Client.id))
    return result.scalars().all()

async def create_client(db: AsyncSession, client: ClientCreate) -> Client:
    """
    Añade un nuevo cliente y su dirección a la sesión de forma asíncrona.
    """
    db_client = Client(**client.model_dump(exclude={"address"}))
    db_client.address = Address(**client.address.model_dump())
    db.add(db_client)
    await db.flush()
    return db_client

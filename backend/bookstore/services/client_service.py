# backend/bookstore/services/client_service.py
"""
Servicio para operaciones sobre clientes.

Operaciones finas sobre client_crud: alta (con dirección), listado y consulta
por ID. No hay validaciones de unicidad más allá de las que impone la base de
datos; un email repetido provoca IntegrityError, que se propaga.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
import logging

from bookstore.core.exceptions import NotFoundError
from bookstore.db.database import unit_of_work
from bookstore.db.models.client_model import Client
from bookstore.crud import client_crud
from bookstore.schemas.client_schema import ClientCreate

logger = logging.getLogger(__name__)

class ClientService:

    async def create_client(self, db: AsyncSession, client_in: ClientCreate) -> Client:
        """Crea el cliente y su dirección y devuelve el registro releído."""
        async with unit_of_work(db):
            client = await client_crud.create_client(db, client_in)
        logger.info(f"Cliente creado: {client.id}")
        return await self.get_client_by_id(db, client.id)

    async def get_all_clients(self, db: AsyncSession) -> List[Client]:
        return await client_crud.get_clients(db)

    async def get_client_by_id(self, db: AsyncSession, client_id: int) -> Client:
        """
        Raises:
            NotFoundError: si el cliente no existe
        """
        client = await client_crud.get_client(db, client_id)
        if not client:
            logger.warning(f"Cliente {client_id} no encontrado")
            raise NotFoundError("Client", client_id)
        return client


client_service = ClientService()

"""
Endpoints REST para clientes.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
import logging

from bookstore.api import deps
from bookstore.schemas.client_schema import ClientCreate, ClientResponse
from bookstore.services.client_service import client_service

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(
    *,
    db: AsyncSession = Depends(deps.get_db),
    client_in: ClientCreate,
) -> ClientResponse:
    """Registra un nuevo cliente con su dirección."""
    logger.info(f"👤 CLIENTE: Registrando cliente '{client_in.email}'")
    return await client_service.create_client(db, client_in)

@router.get("/", response_model=List[ClientResponse])
async def read_clients(
    db: AsyncSession = Depends(deps.get_db),
) -> List[ClientResponse]:
    return await client_service.get_all_clients(db)

@router.get("/{client_id}", response_model=ClientResponse)
async def read_client(
    *,
    db: AsyncSession = Depends(deps.get_db),
    client_id: int,
) -> ClientResponse:
    return await client_service.get_client_by_id(db, client_id)

# backend/bookstore/schemas/client_schema.py
"""
Se encarga de definir los esquemas Pydantic para los modelos Client y Address.
"""

from pydantic import BaseModel, EmailStr, Field, ConfigDict
from typing import Optional

# ========================================
# DIRECCIÓN
# ========================================

class AddressBase(BaseModel):
    """Propiedades base de la dirección de un cliente."""
    street: str
    number: str
    complement: Optional[str] = None
    district: Optional[str] = None
    city: str
    state: str
    zip_code: str


class AddressCreate(AddressBase):
    pass


class AddressResponse(AddressBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


# ========================================
# CLIENTE
# ========================================

class ClientBase(BaseModel):
    """Datos de perfil del cliente."""
    name: str = Field(..., description="Nombre del cliente")
    email: EmailStr = Field(..., description="Email del cliente")
    phone: Optional[str] = None
    cpf: Optional[str] = None


class ClientCreate(ClientBase):
    """Esquema para registrar un cliente junto con su dirección."""
    address: AddressCreate


class ClientResponse(ClientBase):
    """Esquema de respuesta para un cliente."""
    id: int
    address: Optional[AddressResponse] = None

    model_config = ConfigDict(from_attributes=True)

# backend/bookstore/core/exceptions.py
"""
Excepciones de dominio de la aplicación.

La capa de servicios lanza estas excepciones y la capa HTTP las traduce a
respuestas (ver los exception handlers registrados en main.py). Los errores
de la base de datos no se envuelven: se propagan tal cual.
"""

from typing import Any


class NotFoundError(Exception):
    """Se referencia un ID (cliente, producto, categoría) que no existe."""

    def __init__(self, entity: str, identifier: Any):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} with id {identifier} not found")

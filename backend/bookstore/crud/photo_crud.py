# backend/bookstore/crud/photo_crud.py
"""
Operaciones CRUD para el modelo Photo.

Las escrituras solo hacen flush; el commit corresponde a la unidad de trabajo
del servicio que las invoca.
"""

from typing import List, Optional, Sequence
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.db.models.product_model import Photo
from bookstore.schemas.photo_schema import PhotoCreate

async def create_photos(db: AsyncSession, photos: Optional[Sequence[PhotoCreate]], product_id: int) -> List[Photo]:
    """
    Crea una foto por cada elemento de la lista, asociada al producto dado.
    Una lista vacía o None no hace nada.
    """
    if not photos:
        return []

    db_photos = [Photo(link=photo.link, product_id=product_id) for photo in photos]
    db.add_all(db_photos)
    await db.flush()
    return db_photos

async def delete_photos_by_product(db: AsyncSession, product_id: int) -> None:
    """Elimina todas las fotos del producto."""
    await db.execute(delete(Photo).where(Photo.product_id == product_id))

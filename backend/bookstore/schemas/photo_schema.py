# backend/bookstore/schemas/photo_schema.py
"""
Se encarga de definir los esquemas Pydantic para el modelo Photo.
"""

from pydantic import BaseModel, ConfigDict

class PhotoCreate(BaseModel):
    """Esquema para crear una foto. El producto dueño se indica aparte."""
    link: str  # URI de la imagen; se admiten rutas relativas como "a.jpg"


class PhotoResponse(BaseModel):
    """Esquema para las respuestas de la API al leer fotos."""
    id: int
    link: str

    model_config = ConfigDict(from_attributes=True)

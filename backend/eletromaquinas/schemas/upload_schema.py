# backend/eletromaquinas/schemas/upload_schema.py
"""
Se encarga de definir los esquemas Pydantic para las imágenes subidas.
"""

from typing import List

from .base_schema import CamelModel


class StoredFile(CamelModel):
    """Imagen guardada y la ruta relativa con la que se puede referenciar."""
    filename: str
    original_name: str
    path: str
    size: int
    content_type: str


class UploadResponse(CamelModel):
    success: bool = True
    files: List[StoredFile]
    paths: List[str]

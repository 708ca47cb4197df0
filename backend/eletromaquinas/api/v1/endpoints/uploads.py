# backend/eletromaquinas/api/v1/endpoints/uploads.py
"""
Subida genérica de imágenes y descarga de las imágenes guardadas.
"""

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from fastapi.responses import Response
from typing import List

from eletromaquinas.api import deps
from eletromaquinas.schemas.upload_schema import UploadResponse
from eletromaquinas.services.upload_service import upload_service

router = APIRouter()
files_router = APIRouter()


@router.post(
    "",
    response_model=UploadResponse,
    dependencies=[Depends(deps.get_current_admin)],
)
async def upload_images(images: List[UploadFile] = File(...)):
    """
    Guarda una o varias imágenes y devuelve sus rutas. No modifica ningún
    producto: la ruta se asocia después con una actualización del producto.
    """
    stored = await upload_service.save_images(images)
    return UploadResponse(files=stored, paths=[item.path for item in stored])


@files_router.get("/{filename}")
async def read_uploaded_file(filename: str):
    stored = upload_service.load_image(filename)
    if stored is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Arquivo não encontrado")
    content, content_type = stored
    return Response(content=content, media_type=content_type)

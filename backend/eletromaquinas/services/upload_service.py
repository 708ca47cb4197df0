# backend/eletromaquinas/services/upload_service.py
"""
Servicio de subida de imágenes.

Valida tamaño y tipo de cada archivo y lo guarda en el almacenamiento
configurado (UPLOAD_STORAGE):
- "disk": archivos en UPLOAD_DIR
- "memory": bytes en un diccionario del proceso (se pierden al reiniciar)

En ambos casos devuelve una ruta relativa /uploads/<nombre> que se sirve con
GET /uploads/{nombre}. Subir una imagen no la asocia a ningún producto.
"""

import logging
import mimetypes
import re
import uuid
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from fastapi import UploadFile

from eletromaquinas.core.config import settings
from eletromaquinas.core.exceptions import InvalidOperationError
from eletromaquinas.schemas.upload_schema import StoredFile

logger = logging.getLogger(__name__)

EXTENSIONS_BY_TYPE = {
    "image/jpeg": (".jpg", ".jpeg"),
    "image/png": (".png",),
    "image/gif": (".gif",),
    "image/webp": (".webp",),
}

# Solo nombres generados por este servicio: hex de uuid4 + extensión
STORED_NAME_PATTERN = re.compile(r"^[0-9a-f]{32}\.[a-z0-9]{2,5}$")

# Almacenamiento en memoria: nombre -> (contenido, content type)
_memory_files: Dict[str, Tuple[bytes, str]] = {}


class DiskStorage:
    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def save(self, name: str, content: bytes, content_type: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        (self.directory / name).write_bytes(content)

    def load(self, name: str) -> Optional[Tuple[bytes, str]]:
        file_path = self.directory / name
        if not file_path.is_file():
            return None
        content_type = mimetypes.guess_type(name)[0] or "application/octet-stream"
        return file_path.read_bytes(), content_type


class MemoryStorage:
    def save(self, name: str, content: bytes, content_type: str) -> None:
        _memory_files[name] = (content, content_type)

    def load(self, name: str) -> Optional[Tuple[bytes, str]]:
        return _memory_files.get(name)


class UploadService:

    def get_storage(self):
        if settings.UPLOAD_STORAGE == "memory":
            return MemoryStorage()
        return DiskStorage(settings.UPLOAD_DIR)

    def _validate(self, upload: UploadFile, content: bytes) -> str:
        """Devuelve la extensión con la que se guardará el archivo."""
        original_name = upload.filename or ""
        if len(content) > settings.MAX_UPLOAD_SIZE:
            max_mb = settings.MAX_UPLOAD_SIZE / (1024 * 1024)
            raise InvalidOperationError(f"Arquivo {original_name} excede o tamanho máximo de {max_mb:g}MB")
        if not content:
            raise InvalidOperationError(f"Arquivo {original_name} está vazio")

        content_type = (upload.content_type or "").lower()
        extension = Path(original_name).suffix.lower()
        allowed_extensions = EXTENSIONS_BY_TYPE.get(content_type, ())
        if content_type not in settings.ALLOWED_IMAGE_TYPES or extension not in allowed_extensions:
            raise InvalidOperationError(
                f"Tipo de arquivo não permitido: {original_name}. Apenas imagens JPEG, PNG, GIF ou WEBP"
            )
        return extension

    async def save_images(self, uploads: List[UploadFile]) -> List[StoredFile]:
        """
        Valida todos los archivos y, solo si todos son válidos, los guarda.

        Raises:
            InvalidOperationError: sin archivos, demasiados, tamaño o tipo no permitidos
        """
        if not uploads:
            raise InvalidOperationError("Nenhum arquivo enviado")
        if len(uploads) > settings.MAX_UPLOAD_FILES:
            raise InvalidOperationError(f"Máximo de {settings.MAX_UPLOAD_FILES} arquivos por envio")

        validated = []
        for upload in uploads:
            # Leer uno más que el máximo basta para detectar archivos demasiado grandes
            content = await upload.read(settings.MAX_UPLOAD_SIZE + 1)
            extension = self._validate(upload, content)
            validated.append((upload, content, extension))

        storage = self.get_storage()
        stored = []
        for upload, content, extension in validated:
            name = f"{uuid.uuid4().hex}{extension}"
            content_type = upload.content_type.lower()
            storage.save(name, content, content_type)
            stored.append(StoredFile(
                filename=name,
                original_name=upload.filename,
                path=f"{settings.UPLOAD_URL_PREFIX}/{name}",
                size=len(content),
                content_type=content_type,
            ))
            logger.info(f"🖼️ UPLOAD: '{upload.filename}' guardado como {name} ({len(content)} bytes, {settings.UPLOAD_STORAGE})")
        return stored

    def load_image(self, name: str) -> Optional[Tuple[bytes, str]]:
        """Contenido y tipo de una imagen guardada, o None si no existe."""
        if not STORED_NAME_PATTERN.match(name):
            return None
        return self.get_storage().load(name)


upload_service = UploadService()

"""
Pruebas de subida de imágenes: validación, almacenamiento y descarga.
"""

import pytest

from conftest import find_product
from eletromaquinas.core.config import settings

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


def test_upload_requires_admin(client, client_headers):
    files = {"images": ("foto.png", PNG_BYTES, "image/png")}
    assert client.post("/api/upload", files=files).status_code == 401
    assert client.post("/api/upload", files=files, headers=client_headers).status_code == 401


def test_upload_and_download_image(client, admin_headers):
    response = client.post(
        "/api/upload",
        headers=admin_headers,
        files=[("images", ("foto.png", PNG_BYTES, "image/png"))],
    )
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["success"] is True
    stored = body["files"][0]
    assert stored["originalName"] == "foto.png"
    assert stored["size"] == len(PNG_BYTES)
    assert stored["path"] == body["paths"][0]
    assert stored["path"].startswith("/uploads/")
    assert stored["filename"].endswith(".png")

    download = client.get(stored["path"])
    assert download.status_code == 200
    assert download.content == PNG_BYTES
    assert download.headers["content-type"] == "image/png"


def test_upload_rejects_non_image(client, admin_headers):
    response = client.post(
        "/api/upload",
        headers=admin_headers,
        files={"images": ("notas.txt", b"texto", "text/plain")},
    )
    assert response.status_code == 400
    assert "Tipo de arquivo não permitido" in response.json()["error"]


def test_upload_rejects_mismatched_extension(client, admin_headers):
    response = client.post(
        "/api/upload",
        headers=admin_headers,
        files={"images": ("script.exe", PNG_BYTES, "image/png")},
    )
    assert response.status_code == 400


def test_upload_rejects_oversized_file(client, admin_headers, monkeypatch):
    monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE", 32)
    response = client.post(
        "/api/upload",
        headers=admin_headers,
        files={"images": ("grande.png", PNG_BYTES, "image/png")},
    )
    assert response.status_code == 400
    assert "excede o tamanho máximo" in response.json()["error"]


def test_upload_invalid_batch_stores_nothing(client, admin_headers):
    response = client.post(
        "/api/upload",
        headers=admin_headers,
        files=[
            ("images", ("foto.png", PNG_BYTES, "image/png")),
            ("images", ("notas.txt", b"texto", "text/plain")),
        ],
    )
    assert response.status_code == 400
    upload_dir = settings.UPLOAD_DIR
    assert not upload_dir.exists() or not any(upload_dir.iterdir())


def test_memory_storage(client, admin_headers, monkeypatch):
    monkeypatch.setattr(settings, "UPLOAD_STORAGE", "memory")
    response = client.post(
        "/api/upload",
        headers=admin_headers,
        files={"images": ("foto.jpg", b"\xff\xd8\xff" + b"\x00" * 16, "image/jpeg")},
    )
    assert response.status_code == 200
    path = response.json()["paths"][0]
    assert not settings.UPLOAD_DIR.exists()

    download = client.get(path)
    assert download.status_code == 200
    assert download.headers["content-type"] == "image/jpeg"


@pytest.mark.parametrize("name", ["nao-existe.png", "0" * 32 + ".png"])
def test_download_unknown_file_is_404(client, name):
    assert client.get(f"/uploads/{name}").status_code == 404


def test_product_image_upload_extends_gallery(client, admin_headers):
    motor = find_product(client, "Motor")

    response = client.post(
        f"/api/admin/products/{motor['id']}/images",
        headers=admin_headers,
        files=[
            ("images", ("frente.png", PNG_BYTES, "image/png")),
            ("images", ("lado.png", PNG_BYTES, "image/png")),
        ],
    )
    assert response.status_code == 200, response.text
    product = response.json()
    assert len(product["images"]) == len(motor["images"]) + 2
    assert product["images"][:len(motor["images"])] == motor["images"]
    assert all(path.startswith("/uploads/") for path in product["images"][len(motor["images"]):])


def test_product_image_upload_for_missing_product_is_404(client, admin_headers):
    response = client.post(
        "/api/admin/products/9999/images",
        headers=admin_headers,
        files={"images": ("frente.png", PNG_BYTES, "image/png")},
    )
    assert response.status_code == 404

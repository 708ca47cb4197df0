"""
Fixtures compartidas para las pruebas de la API.

Cada prueba arranca la aplicación contra una base de datos SQLite nueva en un
directorio temporal, con la semilla inicial (admin, categorías y productos de
demostración) y un directorio de uploads propio.
"""

import pytest
from fastapi.testclient import TestClient

from eletromaquinas.core.config import settings
from eletromaquinas.db import database
from eletromaquinas.main import app

ADMIN_EMAIL = "admin@eletromaquinas.com"
ADMIN_PASSWORD = "admin123"


@pytest.fixture
def client(tmp_path, monkeypatch):
    # bcrypt con el coste mínimo para que las pruebas sean rápidas
    monkeypatch.setattr(settings, "BCRYPT_ROUNDS", 4)
    monkeypatch.setattr(settings, "ADMIN_EMAIL", ADMIN_EMAIL)
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", ADMIN_PASSWORD)
    monkeypatch.setattr(settings, "SEED_DEMO_DATA", True)
    monkeypatch.setattr(settings, "UPLOAD_STORAGE", "disk")
    monkeypatch.setattr(settings, "UPLOAD_DIR", tmp_path / "uploads")

    engine = database.build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    monkeypatch.setattr(database, "engine", engine)
    monkeypatch.setattr(database, "AsyncSessionLocal", database.build_sessionmaker(engine))

    with TestClient(app) as test_client:
        yield test_client


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_token(client):
    response = client.post("/api/admin/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200, response.text
    return response.json()["token"]


@pytest.fixture
def admin_headers(admin_token):
    return auth_headers(admin_token)


@pytest.fixture
def registered_client(client):
    """Registra un cliente y devuelve la respuesta completa del registro."""
    response = client.post(
        "/api/clients/register",
        json={
            "name": "Maria Souza",
            "email": "maria@example.com",
            "password": "segredo123",
            "phone": "11999990000",
            "company": "Souza Indústria",
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def client_headers(registered_client):
    return auth_headers(registered_client["token"])


def find_product(client, name_fragment: str) -> dict:
    """Busca en el catálogo público un producto sembrado por parte del nombre."""
    products = client.get("/api/products").json()
    return next(p for p in products if name_fragment in p["name"])

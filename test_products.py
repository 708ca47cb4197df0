"""
Pruebas del catálogo público: listado, filtros, detalle y categorías.
"""

import pytest

from conftest import find_product


def test_catalog_lists_seeded_active_products(client):
    response = client.get("/api/products")
    assert response.status_code == 200
    products = response.json()
    assert len(products) == 3
    assert all(p["status"] == "ativo" for p in products)
    # Campos en camelCase
    assert {"id", "name", "price", "stock", "createdAt", "updatedAt"} <= set(products[0])


def test_featured_filter_returns_only_featured(client):
    products = client.get("/api/products", params={"featured": "true"}).json()
    assert len(products) == 2
    assert all(p["featured"] for p in products)
    assert not any("Transformador" in p["name"] for p in products)


def test_featured_filter_ignores_values_other_than_true(client):
    assert len(client.get("/api/products", params={"featured": "TRUE"}).json()) == 2
    for value in ("false", "abc", ""):
        response = client.get("/api/products", params={"featured": value})
        assert response.status_code == 200
        assert len(response.json()) == 3, value


@pytest.mark.parametrize("term", ["_", "%", "%%", "Motor%"])
def test_search_treats_wildcards_as_literal_text(client, term):
    response = client.get("/api/products", params={"search": term})
    assert response.status_code == 200
    assert response.json() == []


MOTOR = "Motor Elétrico Trifásico 10HP"
GERADOR = "Gerador de Energia 50kVA"


@pytest.mark.parametrize("term, expected", [
    ("ELÉTRICO", [MOTOR, GERADOR]),  # nombre del motor, descripción del gerador
    ("elétrico", [MOTOR, GERADOR]),
    ("TRIFÁSICO", [MOTOR]),
    ("EFICIÊNCIA", [MOTOR]),
])
def test_search_ignores_case_of_accented_letters(client, term, expected):
    products = client.get("/api/products", params={"search": term}).json()
    assert [p["name"] for p in products] == expected


def test_category_filter(client):
    products = client.get("/api/products", params={"category": "Geradores"}).json()
    assert [p["name"] for p in products] == ["Gerador de Energia 50kVA"]


def test_search_matches_name_case_insensitive(client):
    products = client.get("/api/products", params={"search": "motor"}).json()
    assert len(products) == 1
    assert products[0]["name"].startswith("Motor")


def test_search_without_matches_returns_empty_list(client):
    response = client.get("/api/products", params={"search": "inexistente"})
    assert response.status_code == 200
    assert response.json() == []


def test_product_detail(client):
    motor = find_product(client, "Motor")
    response = client.get(f"/api/products/{motor['id']}")
    assert response.status_code == 200
    assert response.json()["name"] == motor["name"]
    assert response.json()["specifications"]


def test_product_detail_not_found(client):
    response = client.get("/api/products/9999")
    assert response.status_code == 404
    assert response.json() == {"error": "Produto não encontrado"}


def test_categories_are_plain_names(client):
    response = client.get("/api/categories")
    assert response.status_code == 200
    assert response.json() == ["Motores", "Geradores", "Transformadores", "Compressores", "Ferramentas"]


def test_unknown_endpoint_returns_json_error(client):
    response = client.get("/api/nao-existe")
    assert response.status_code == 404
    assert response.json() == {"error": "Endpoint não encontrado"}

"""
Pruebas de login, registro de clientes y protección de las rutas de administración.
"""

import pytest

from conftest import ADMIN_EMAIL, ADMIN_PASSWORD, auth_headers


def test_login_returns_token_and_user_without_password(client):
    response = client.post("/api/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["token"]
    assert body["user"]["role"] == "admin"
    assert "password" not in body["user"]
    assert "passwordHash" not in body["user"]


def test_admin_login_without_password_is_rejected(client):
    response = client.post("/api/admin/login", json={"email": ADMIN_EMAIL})
    assert response.status_code == 400
    assert response.json() == {"error": "Email e senha são obrigatórios"}


@pytest.mark.parametrize("email", [ADMIN_EMAIL, ADMIN_EMAIL.upper(), "Admin@EletroMaquinas.com"])
def test_wrong_password_is_401_in_any_email_case(client, email):
    response = client.post("/api/login", json={"email": email, "password": "errada"})
    assert response.status_code == 401
    assert response.json() == {"error": "Credenciais inválidas"}


def test_login_email_is_case_insensitive(client):
    response = client.post("/api/login", json={"email": ADMIN_EMAIL.upper(), "password": ADMIN_PASSWORD})
    assert response.status_code == 200


def test_admin_login_rejects_client_account(client, registered_client):
    response = client.post("/api/admin/login", json={"email": "maria@example.com", "password": "segredo123"})
    assert response.status_code == 401
    assert response.json() == {"error": "Acesso restrito a administradores"}


def test_register_client_returns_account_and_token(client, registered_client):
    assert registered_client["success"] is True
    assert registered_client["client"]["role"] == "client"
    assert registered_client["client"]["email"] == "maria@example.com"
    assert registered_client["client"]["company"] == "Souza Indústria"
    assert "password" not in registered_client["client"]

    me = client.get("/api/me", headers=auth_headers(registered_client["token"]))
    assert me.status_code == 200
    assert me.json()["email"] == "maria@example.com"


def test_duplicate_registration_keeps_single_client(client, registered_client, admin_headers):
    response = client.post(
        "/api/clients/register",
        json={"name": "Outra Maria", "email": "MARIA@example.com", "password": "outra123"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Email já cadastrado"}

    clients = client.get("/api/admin/clients", headers=admin_headers).json()
    assert [c["email"] for c in clients] == ["maria@example.com"]


def test_register_requires_valid_data(client):
    response = client.post("/api/clients/register", json={"name": "Sem Email", "password": "segredo123"})
    assert response.status_code == 400
    assert "error" in response.json()

    response = client.post(
        "/api/clients/register",
        json={"name": "Senha Curta", "email": "curta@example.com", "password": "123"},
    )
    assert response.status_code == 400


def test_me_requires_token(client):
    response = client.get("/api/me")
    assert response.status_code == 401
    assert response.json() == {"error": "Não autorizado"}


def test_admin_routes_reject_missing_token(client):
    assert client.get("/api/admin/products").status_code == 401


def test_admin_routes_reject_malformed_token(client):
    response = client.get("/api/admin/products", headers=auth_headers("nao.e.um.token"))
    assert response.status_code == 401
    assert response.json() == {"error": "Token inválido"}


def test_admin_routes_reject_email_as_token(client):
    response = client.get("/api/admin/stats", headers=auth_headers(ADMIN_EMAIL))
    assert response.status_code == 401


def test_admin_routes_reject_client_token(client, client_headers):
    for path in ("/api/admin/products", "/api/admin/orders", "/api/admin/stats", "/api/admin/backup"):
        response = client.get(path, headers=client_headers)
        assert response.status_code == 401, path


def test_admin_can_create_vendor_who_can_log_in(client, admin_headers):
    response = client.post(
        "/api/admin/vendors",
        headers=admin_headers,
        json={"name": "João Vendas", "email": "joao@eletromaquinas.com", "password": "vendas123"},
    )
    assert response.status_code == 201
    assert response.json()["role"] == "vendedor"

    vendors = client.get("/api/admin/vendors", headers=admin_headers).json()
    assert [v["email"] for v in vendors] == ["joao@eletromaquinas.com"]

    login = client.post("/api/login", json={"email": "joao@eletromaquinas.com", "password": "vendas123"})
    assert login.status_code == 200
    assert login.json()["user"]["role"] == "vendedor"


def test_deactivated_account_cannot_log_in_or_use_its_token(client, admin_headers, registered_client):
    account_id = registered_client["client"]["id"]
    token_headers = auth_headers(registered_client["token"])

    response = client.put(
        f"/api/admin/accounts/{account_id}/status", headers=admin_headers, json={"status": "inativo"}
    )
    assert response.status_code == 200
    assert response.json()["status"] == "inativo"

    login = client.post("/api/login", json={"email": "maria@example.com", "password": "segredo123"})
    assert login.status_code == 401
    assert login.json() == {"error": "Conta inativa"}
    assert client.get("/api/me", headers=token_headers).status_code == 401

    client.put(f"/api/admin/accounts/{account_id}/status", headers=admin_headers, json={"status": "ativo"})
    assert client.post("/api/login", json={"email": "maria@example.com", "password": "segredo123"}).status_code == 200
    assert client.get("/api/me", headers=token_headers).status_code == 200


def test_account_status_validation(client, admin_headers):
    me = client.get("/api/me", headers=admin_headers).json()

    own = client.put(f"/api/admin/accounts/{me['id']}/status", headers=admin_headers, json={"status": "inativo"})
    assert own.status_code == 400

    missing = client.put("/api/admin/accounts/9999/status", headers=admin_headers, json={"status": "inativo"})
    assert missing.status_code == 404
    assert missing.json() == {"error": "Conta não encontrada"}

    invalid = client.put(f"/api/admin/accounts/{me['id']}/status", headers=admin_headers, json={"status": "banido"})
    assert invalid.status_code == 400

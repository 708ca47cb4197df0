"""
Pruebas del panel de administración: productos, categorías, pedidos,
estadísticas, configuración y backup.
"""

from conftest import find_product


def _new_product(**overrides):
    product = {
        "name": "Compressor de Ar 200L",
        "category": "Compressores",
        "price": 4200.5,
        "stock": 3,
        "description": "Compressor de pistão para oficinas.",
        "specifications": "200 litros\n10 bar\n\n2 HP",
        "featured": False,
    }
    product.update(overrides)
    return product


def test_admin_lists_all_products_including_inactive(client, admin_headers):
    motor = find_product(client, "Motor")
    client.delete(f"/api/admin/products/{motor['id']}", headers=admin_headers)

    products = client.get("/api/admin/products", headers=admin_headers).json()
    assert len(products) == 3
    assert {p["status"] for p in products} == {"ativo", "inativo"}


def test_create_product(client, admin_headers):
    response = client.post("/api/admin/products", headers=admin_headers, json=_new_product())
    assert response.status_code == 201, response.text
    product = response.json()
    assert product["id"]
    assert product["status"] == "ativo"
    assert product["specifications"] == ["200 litros", "10 bar", "2 HP"]

    catalog = client.get("/api/products", params={"category": "Compressores"}).json()
    assert [p["name"] for p in catalog] == ["Compressor de Ar 200L"]


def test_create_product_with_new_category_registers_it(client, admin_headers):
    client.post("/api/admin/products", headers=admin_headers, json=_new_product(category="Bombas"))
    assert "Bombas" in client.get("/api/categories").json()


def test_create_product_validation(client, admin_headers):
    response = client.post("/api/admin/products", headers=admin_headers, json=_new_product(price=-1))
    assert response.status_code == 400
    response = client.post("/api/admin/products", headers=admin_headers, json={"category": "Motores"})
    assert response.status_code == 400


def test_update_product_only_changes_allowed_fields(client, admin_headers):
    motor = find_product(client, "Motor")

    response = client.put(
        f"/api/admin/products/{motor['id']}",
        headers=admin_headers,
        json={"price": 2999.9, "stock": 20, "id": 555, "createdAt": "2000-01-01T00:00:00", "name": None},
    )
    assert response.status_code == 200
    product = response.json()
    assert product["id"] == motor["id"]
    assert product["price"] == 2999.9
    assert product["stock"] == 20
    assert product["name"] == motor["name"]
    assert product["createdAt"] == motor["createdAt"]
    assert product["updatedAt"] != motor["updatedAt"]


def test_update_missing_product_is_404(client, admin_headers):
    response = client.put("/api/admin/products/9999", headers=admin_headers, json={"stock": 1})
    assert response.status_code == 404
    assert response.json() == {"error": "Produto não encontrado"}


def test_delete_is_soft_and_hides_product_from_catalog(client, admin_headers):
    motor = find_product(client, "Motor")

    response = client.delete(f"/api/admin/products/{motor['id']}", headers=admin_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Produto desativado"
    assert body["product"]["status"] == "inativo"

    assert motor["id"] not in [p["id"] for p in client.get("/api/products").json()]
    admin_view = client.get(f"/api/admin/products/{motor['id']}", headers=admin_headers).json()
    assert admin_view["status"] == "inativo"


def test_create_category_and_reject_duplicate(client, admin_headers):
    response = client.post("/api/admin/categories", headers=admin_headers, json={"name": "  Bombas "})
    assert response.status_code == 201
    assert response.json()["name"] == "Bombas"

    duplicated = client.post("/api/admin/categories", headers=admin_headers, json={"name": "motores"})
    assert duplicated.status_code == 400


def test_admin_updates_order_status(client, admin_headers):
    motor = find_product(client, "Motor")
    order = client.post(
        "/api/orders", json={"items": [{"productId": motor["id"], "quantity": 1}]}
    ).json()["order"]

    response = client.put(
        f"/api/admin/orders/{order['id']}",
        headers=admin_headers,
        json={"status": "enviado", "paymentStatus": "pago", "total": 1},
    )
    assert response.status_code == 200
    updated = response.json()
    assert updated["status"] == "enviado"
    assert updated["paymentStatus"] == "pago"
    assert updated["total"] == order["total"]

    fetched = client.get(f"/api/admin/orders/{order['id']}", headers=admin_headers).json()
    assert fetched["status"] == "enviado"


def test_admin_rejects_unknown_order_status(client, admin_headers):
    motor = find_product(client, "Motor")
    order = client.post(
        "/api/orders", json={"items": [{"productId": motor["id"], "quantity": 1}]}
    ).json()["order"]

    response = client.put(f"/api/admin/orders/{order['id']}", headers=admin_headers, json={"status": "perdido"})
    assert response.status_code == 400


def test_missing_order_is_404(client, admin_headers):
    response = client.get("/api/admin/orders/9999", headers=admin_headers)
    assert response.status_code == 404
    assert response.json() == {"error": "Pedido não encontrado"}


def test_stats(client, admin_headers, registered_client):
    motor = find_product(client, "Motor")
    transformer = find_product(client, "Transformador")

    first = client.post("/api/orders", json={"items": [{"productId": motor["id"], "quantity": 1}]}).json()
    second = client.post("/api/orders", json={"items": [{"productId": transformer["id"], "quantity": 1}]}).json()
    client.put(f"/api/admin/orders/{second['order']['id']}", headers=admin_headers, json={"status": "cancelado"})

    stats = client.get("/api/admin/stats", headers=admin_headers).json()
    assert stats["totalProducts"] == 3
    assert stats["activeProducts"] == 3
    assert stats["totalClients"] == 1
    assert stats["totalSales"] == 2
    assert stats["pendingOrders"] == 1
    # Los pedidos cancelados no cuentan como ingresos
    assert stats["totalRevenue"] == first["order"]["total"]
    # Transformador: 5 - 1 = 4, por debajo del umbral por defecto (5)
    assert stats["lowStockProducts"] == 1


def test_settings_update_is_allow_listed(client, admin_headers):
    response = client.put(
        "/api/admin/settings",
        headers=admin_headers,
        json={"shippingCost": 99.5, "lowStockThreshold": 10, "id": 42, "unknownKey": "x"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["shippingCost"] == 99.5
    assert body["lowStockThreshold"] == 10
    assert "unknownKey" not in body
    assert "id" not in body

    stored = client.get("/api/admin/settings", headers=admin_headers).json()
    assert stored["shippingCost"] == 99.5
    assert stored["companyName"] == "EletroMáquinas"


def test_backup_contains_collections_without_passwords(client, admin_headers, registered_client):
    response = client.get("/api/admin/backup", headers=admin_headers)
    assert response.status_code == 200
    backup = response.json()
    assert {"generatedAt", "users", "products", "categories", "orders", "settings"} <= set(backup)
    assert len(backup["users"]) == 2
    assert len(backup["products"]) == 3
    for user in backup["users"]:
        assert "password" not in user
        assert "passwordHash" not in user
        assert "password_hash" not in user

"""
API tests for per-product pizza configuration management.
"""

BASE = "/admin/pizza-configurations"


def test_requires_credentials(client):
    assert client.get(f"{BASE}/PIZZA-GRANDE").status_code == 401


def test_get_unset_returns_defaults(client, admin_auth):
    resp = client.get(f"{BASE}/PIZZA-GRANDE", auth=admin_auth)
    assert resp.status_code == 200
    assert resp.json() == {
        "product_id": "PIZZA-GRANDE",
        "included_topping_units": 4,
        "extra_unit_cost": 20.0,
        "is_default": True,
    }


def test_put_creates_then_replaces(client, admin_auth):
    resp = client.put(
        f"{BASE}/PIZZA-GRANDE",
        json={"included_topping_units": 5, "extra_unit_cost": 25.5},
        auth=admin_auth,
    )
    assert resp.status_code == 200
    assert resp.json()["is_default"] is False
    assert resp.json()["extra_unit_cost"] == 25.5

    client.put(
        f"{BASE}/PIZZA-GRANDE",
        json={"included_topping_units": 3, "extra_unit_cost": 10},
        auth=admin_auth,
    )
    data = client.get(f"{BASE}/PIZZA-GRANDE", auth=admin_auth).json()
    assert data["included_topping_units"] == 3
    assert data["extra_unit_cost"] == 10.0


def test_put_negative_values_rejected(client, admin_auth):
    resp = client.put(
        f"{BASE}/PIZZA-GRANDE",
        json={"included_topping_units": -1, "extra_unit_cost": 20},
        auth=admin_auth,
    )
    assert resp.status_code == 400
    assert "included_topping_units" in resp.json()["detail"]

    resp = client.put(
        f"{BASE}/PIZZA-GRANDE",
        json={"included_topping_units": 4, "extra_unit_cost": -5},
        auth=admin_auth,
    )
    assert resp.status_code == 400


def test_patch_requires_saved_configuration(client, admin_auth):
    resp = client.patch(f"{BASE}/PIZZA-GRANDE", json={"extra_unit_cost": 30}, auth=admin_auth)
    assert resp.status_code == 404


def test_patch_partial_update(client, admin_auth):
    client.put(
        f"{BASE}/PIZZA-GRANDE",
        json={"included_topping_units": 4, "extra_unit_cost": 20},
        auth=admin_auth,
    )
    resp = client.patch(f"{BASE}/PIZZA-GRANDE", json={"extra_unit_cost": 30}, auth=admin_auth)
    assert resp.status_code == 200
    assert resp.json()["included_topping_units"] == 4
    assert resp.json()["extra_unit_cost"] == 30.0


def test_patch_negative_rejected(client, admin_auth):
    client.put(
        f"{BASE}/PIZZA-GRANDE",
        json={"included_topping_units": 4, "extra_unit_cost": 20},
        auth=admin_auth,
    )
    resp = client.patch(f"{BASE}/PIZZA-GRANDE", json={"included_topping_units": -2}, auth=admin_auth)
    assert resp.status_code == 400


def test_delete_resets_to_defaults(client, admin_auth):
    client.put(
        f"{BASE}/PIZZA-GRANDE",
        json={"included_topping_units": 8, "extra_unit_cost": 5},
        auth=admin_auth,
    )
    assert client.delete(f"{BASE}/PIZZA-GRANDE", auth=admin_auth).status_code == 204
    assert client.get(f"{BASE}/PIZZA-GRANDE", auth=admin_auth).json()["is_default"] is True
    assert client.delete(f"{BASE}/PIZZA-GRANDE", auth=admin_auth).status_code == 404

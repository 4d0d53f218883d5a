"""Admin-only user management."""

from conftest import MANAGER


class TestUsersApi:

    def test_admin_creates_and_lists(self, client, admin_headers):
        res = client.post(
            "/api/users",
            json={"username": "bob", "password": "bob123", "name": "Bob", "role": "manager"},
            headers=admin_headers,
        )
        assert res.status_code == 201
        body = res.json()
        assert body["username"] == "bob"
        assert body["role"] == "manager"
        assert body["enabled"] is True
        assert "password" not in body and "passwordHash" not in body

        names = [u["username"] for u in client.get("/api/users", headers=admin_headers).json()]
        assert names == ["admin", "bob"]

    def test_duplicate_username(self, client, admin_headers):
        body = {"username": "bob", "password": "bob123"}
        assert client.post("/api/users", json=body, headers=admin_headers).status_code == 201
        res = client.post("/api/users", json=body, headers=admin_headers)
        assert res.status_code == 409

    def test_unknown_role(self, client, admin_headers):
        res = client.post(
            "/api/users",
            json={"username": "bob", "password": "bob123", "role": "owner"},
            headers=admin_headers,
        )
        assert res.status_code == 400

    def test_manager_is_denied(self, client, manager_headers):
        res = client.get("/api/users", headers=manager_headers)
        assert res.status_code == 403
        assert res.json() == {"message": "You do not have permission for this action"}

    def test_update_and_get(self, client, admin_headers, manager_headers):
        users = client.get("/api/users", headers=admin_headers).json()
        manager = next(u for u in users if u["username"] == MANAGER[0])

        res = client.put(f"/api/users/{manager['id']}", json={"name": "Renamed", "role": "user"}, headers=admin_headers)
        assert res.status_code == 200
        fetched = client.get(f"/api/users/{manager['id']}", headers=admin_headers).json()
        assert fetched["name"] == "Renamed"
        assert fetched["role"] == "user"

    def test_get_unknown(self, client, admin_headers):
        assert client.get("/api/users/999", headers=admin_headers).status_code == 404

    def test_delete(self, client, admin_headers, manager_headers):
        users = client.get("/api/users", headers=admin_headers).json()
        manager = next(u for u in users if u["username"] == MANAGER[0])
        res = client.delete(f"/api/users/{manager['id']}", headers=admin_headers)
        assert res.status_code == 200
        assert client.get(f"/api/users/{manager['id']}", headers=admin_headers).status_code == 404

    def test_cannot_delete_self(self, client, admin_headers):
        admin = client.get("/api/users", headers=admin_headers).json()[0]
        assert client.delete(f"/api/users/{admin['id']}", headers=admin_headers).status_code == 400

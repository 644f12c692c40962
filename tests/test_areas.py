"""
Area CRUD tests.
"""
from staff_api.config import settings

API = settings.API_PREFIX


class TestAreas:
    """Area (Áreas) CRUD tests"""

    def test_create_area(self, client):
        response = client.post(f"{API}/areas", json={"name": "Planta Norte", "building": "Edificio A"})
        assert response.status_code == 201
        body = response.json()
        assert body["status"] == 201
        assert body["message"] == "Area created successfully"
        assert body["data"]["name"] == "Planta Norte"
        assert body["data"]["building"] == "Edificio A"
        assert body["data"]["id"]
        assert "createdAt" in body["data"]

    def test_get_area(self, client, api):
        area = api.area()
        response = client.get(f"{API}/areas/{area['id']}")
        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Planta Norte"

    def test_list_areas(self, client, api):
        api.area(name="Norte")
        api.area(name="Sur")
        body = client.get(f"{API}/areas").json()
        assert body["status"] == 200
        assert [area["name"] for area in body["data"]] == ["Norte", "Sur"]

    def test_update_area(self, client, api):
        area = api.area()
        response = client.put(
            f"{API}/areas/{area['id']}",
            json={"name": "Planta Norte", "building": "Edificio B"}
        )
        assert response.status_code == 200
        assert response.json()["data"]["building"] == "Edificio B"

    def test_patch_area_keeps_other_fields(self, client, api):
        area = api.area()
        response = client.patch(f"{API}/areas/{area['id']}", json={"building": "Edificio C"})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == "Planta Norte"
        assert data["building"] == "Edificio C"
        assert response.json()["message"] == "Area partially updated"

    def test_update_missing_area_is_404(self, client):
        response = client.patch(f"{API}/areas/0123456789abcdef01234567", json={"building": "X"})
        assert response.status_code == 404

    def test_delete_area(self, client, api):
        area = api.area()
        response = client.delete(f"{API}/areas/{area['id']}")
        assert response.status_code == 200
        assert response.json()["data"]["id"] == area["id"]
        assert client.get(f"{API}/areas/{area['id']}").status_code == 404

    def test_delete_missing_area_is_404(self, client):
        assert client.delete(f"{API}/areas/0123456789abcdef01234567").status_code == 404


class TestAreaDeleteGuard:
    """Departments naming an area only block its deletion when the guard is enabled"""

    def test_referenced_area_is_deleted_by_default(self, client, api):
        area = api.area()
        department = api.department(area_name=area["name"])

        response = client.delete(f"{API}/areas/{area['id']}")
        assert response.status_code == 200

        # The department keeps its now dangling reference
        remaining = client.get(f"{API}/departamentos/{department['id']}").json()["data"]
        assert remaining["areaName"] == "Planta Norte"

    def test_guard_blocks_referenced_area(self, client, api, monkeypatch):
        monkeypatch.setattr(settings, "AREA_DELETE_GUARD", True)
        area = api.area()
        api.department(area_name=area["name"])

        response = client.delete(f"{API}/areas/{area['id']}")
        assert response.status_code == 409
        assert response.json()["message"] == "area is assigned to a department"
        assert client.get(f"{API}/areas/{area['id']}").status_code == 200

    def test_guard_allows_unreferenced_area(self, client, api, monkeypatch):
        monkeypatch.setattr(settings, "AREA_DELETE_GUARD", True)
        area = api.area()
        assert client.delete(f"{API}/areas/{area['id']}").status_code == 200

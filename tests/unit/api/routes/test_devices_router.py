import pytest


class TestDevices:
    @pytest.mark.asyncio
    async def test_list(self, client):
        response = await client.get("/api/v1/devices")

        assert response.status_code == 200
        assert [d["id"] for d in response.json()][:2] == ["bedroom-light-1", "front-door-lock"]

    @pytest.mark.asyncio
    async def test_locations(self, client):
        response = await client.get("/api/v1/devices/locations")
        assert response.json() == ["Bedroom", "Entrance", "Hall", "Living Room"]

    @pytest.mark.asyncio
    async def test_unknown_device(self, client):
        response = await client.get("/api/v1/devices/ghost")

        assert response.status_code == 404
        assert response.json()["error"] == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_control(self, client):
        response = await client.post("/api/v1/devices/living-light-1/control", json={"on": True})

        assert response.status_code == 200
        assert response.json()["on"] is True
        assert response.json()["power_watts"] == 12

    @pytest.mark.asyncio
    async def test_control_room(self, client):
        response = await client.post("/api/v1/devices/rooms/living room/control", json={"on": True})

        assert len(response.json()["devices"]) == 2
        assert all(d["on"] for d in response.json()["devices"])


class TestHomeMode:
    @pytest.mark.asyncio
    async def test_get_and_set(self, client):
        assert (await client.get("/api/v1/devices/mode")).json() == {"mode": "NORMAL"}

        response = await client.put("/api/v1/devices/mode", json={"mode": "away"})

        assert response.json() == {"mode": "AWAY"}
        assert (await client.get("/api/v1/devices/mode")).json() == {"mode": "AWAY"}

    @pytest.mark.asyncio
    async def test_unknown_mode(self, client):
        response = await client.put("/api/v1/devices/mode", json={"mode": "party"})
        assert response.status_code == 422


class TestApp:
    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["home_mode"] == "NORMAL"

    @pytest.mark.asyncio
    async def test_correlation_id_is_echoed(self, client):
        response = await client.get("/health", headers={"X-Correlation-ID": "cid_test"})
        assert response.headers["X-Correlation-ID"] == "cid_test"

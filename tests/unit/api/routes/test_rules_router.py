"""Tests for the rules and interpreter routes."""

import pytest

RULE = {
    "name": "Evening lights",
    "trigger_condition": "motion AND hour >= 18",
    "action_script": "turn_on(living-light-1); not_a_call",
}


async def create_rule(client, **overrides):
    response = await client.post("/api/v1/rules", json={**RULE, **overrides})
    assert response.status_code == 201
    return response.json()


class TestRuleCrud:
    @pytest.mark.asyncio
    async def test_create_and_list(self, client):
        created = await create_rule(client)

        assert created["id"] == 1
        assert created["priority"] == 5
        assert created["is_enabled"] is True

        response = await client.get("/api/v1/rules")
        assert [r["name"] for r in response.json()] == ["Evening lights"]

    @pytest.mark.asyncio
    async def test_blank_name_is_rejected(self, client):
        response = await client.post("/api/v1/rules", json={**RULE, "name": "   "})

        assert response.status_code == 400
        body = response.json()
        assert body["status"] == 400
        assert body["error"] == "VALIDATION"
        assert body["message"] == "Rule name is required"

    @pytest.mark.asyncio
    async def test_missing_field_is_unprocessable(self, client):
        response = await client.post("/api/v1/rules", json={"name": "x"})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_unknown_rule(self, client):
        response = await client.get("/api/v1/rules/99")

        assert response.status_code == 404
        assert response.json()["message"] == "Rule not found: 99"

    @pytest.mark.asyncio
    async def test_toggle_and_delete(self, client):
        rule = await create_rule(client)

        toggled = await client.post(f"/api/v1/rules/{rule['id']}/toggle")
        assert toggled.json()["is_enabled"] is False

        deleted = await client.delete(f"/api/v1/rules/{rule['id']}")
        assert deleted.json()["deleted"] is True
        assert (await client.get(f"/api/v1/rules/{rule['id']}")).status_code == 404

    @pytest.mark.asyncio
    async def test_definition(self, client):
        rule = await create_rule(client)

        response = await client.get(f"/api/v1/rules/{rule['id']}/definition")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == "rule-1"
        assert body["actions"] == [{"type": "TURN_ON", "value": "living-light-1"}]


class TestRunRule:
    @pytest.mark.asyncio
    async def test_run_with_text_variables(self, client):
        rule = await create_rule(client)

        response = await client.post(
            f"/api/v1/rules/{rule['id']}/run",
            json={"execute_actions": True, "vars": "motion=true\nhour=20"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["matched"] is True
        assert body["executed"] is True
        assert [a["status"] for a in body["actions"]] == ["ok", "ignored"]
        assert body["actions"][0]["device"]["on"] is True
        assert body["interpreter"]["expression"] == "(motion AND hour >= 18)"
        assert body["rule"]["last_triggered"] is not None

        device = await client.get("/api/v1/devices/living-light-1")
        assert device.json()["on"] is True

    @pytest.mark.asyncio
    async def test_text_variables_override_json(self, client):
        rule = await create_rule(client)

        response = await client.post(
            f"/api/v1/rules/{rule['id']}/run",
            json={"variables": {"motion": True, "hour": 20}, "vars": "hour=9"},
        )

        body = response.json()
        assert body["variables"] == {"motion": True, "hour": 9}
        assert body["matched"] is False
        assert body["executed"] is False

    @pytest.mark.asyncio
    async def test_run_rejects_non_finite_number(self, client):
        rule = await create_rule(client)

        response = await client.post(
            f"/api/v1/rules/{rule['id']}/run",
            content='{"variables": {"hour": NaN}}',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_run_unknown_rule(self, client):
        response = await client.post("/api/v1/rules/42/run", json={})
        assert response.status_code == 404


class TestInterpreter:
    @pytest.mark.asyncio
    async def test_non_finite_number_is_rejected(self, client):
        response = await client.post(
            "/api/v1/interpreter/evaluate",
            content='{"variables": {"motion": true, "hour": Infinity}}',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422
        assert response.json()["error"] == "VALIDATION"
        assert response.json()["details"][0]["loc"][:3] == ["body", "variables", "hour"]

    @pytest.mark.asyncio
    async def test_evaluate(self, client):
        response = await client.post(
            "/api/v1/interpreter/evaluate",
            json={"rule": "a OR b AND c", "variables": {"a": False, "b": True, "c": False}},
        )

        assert response.status_code == 200
        assert response.json()["result"] is False
        assert response.json()["expression"] == "((a OR b) AND c)"

    @pytest.mark.asyncio
    async def test_blank_rule_uses_default(self, client):
        response = await client.post(
            "/api/v1/interpreter/evaluate", json={"rule": " ", "vars": "motion=true;hour=19"}
        )

        body = response.json()
        assert body["rule"] == "motion AND hour >= 18"
        assert body["result"] is True

"""Projects, stakeholders and sessions against a mocked Supabase client."""

import asyncio
import time
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import httpx
from postgrest.exceptions import APIError

from conftest import TEST_USER, api_status_error
from main import app
from services.session_service import summarize_messages
from utils.constant import ERROR_MESSAGES


def _set_rows(query, rows):
    query.execute.return_value = SimpleNamespace(data=rows)


# ── Tests: auth ───────────────────────────────────────────────────────────


class TestAuthRequired:

    def test_missing_token_is_401(self, client):
        response = client.get("/api/projects")

        assert response.status_code == 401
        assert response.json() == {"success": False, "error": ERROR_MESSAGES["unauthorized"]}

    def test_non_bearer_header_is_401(self, client):
        response = client.get("/api/user-sessions", headers={"Authorization": "Basic abc"})

        assert response.status_code == 401


# ── Tests: projects ───────────────────────────────────────────────────────


class TestProjects:

    def test_list_scoped_to_user(self, client, db):
        mock_db, query = db
        _set_rows(query, [{"id": "p1", "project_name": "新規事業"}])

        response = client.get("/api/projects")

        assert response.status_code == 200
        assert response.json() == {"success": True, "projects": [{"id": "p1", "project_name": "新規事業"}]}
        mock_db.table.assert_called_with("project_cards")
        query.eq.assert_any_call("user_id", TEST_USER["id"])

    def test_create(self, client, db):
        _, query = db
        _set_rows(query, [{"id": "p1", "project_name": "DX推進"}])

        response = client.post("/api/projects", json={"project_name": "DX推進", "kpis": ["工数20%削減"]})

        assert response.status_code == 200
        row = query.insert.call_args[0][0]
        assert row["user_id"] == TEST_USER["id"]
        assert row["project_name"] == "DX推進"
        assert row["ai_auto_update"] is True

    def test_create_requires_name(self, client, db):
        response = client.post("/api/projects", json={"objectives": "x"})

        assert response.status_code == 400
        assert response.json()["error"] == ERROR_MESSAGES["invalid_request"]

    def test_get_missing_is_404(self, client, db):
        response = client.get("/api/projects/nope")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": ERROR_MESSAGES["not_found"]}

    def test_update_sends_only_given_fields(self, client, db):
        _, query = db
        _set_rows(query, [{"id": "p1", "objectives": "新目標"}])

        response = client.put("/api/projects/p1", json={"objectives": "新目標"})

        assert response.status_code == 200
        updates = query.update.call_args[0][0]
        assert updates["objectives"] == "新目標"
        assert "project_name" not in updates
        assert "updated_at" in updates

    def test_delete(self, client, db):
        _, query = db

        response = client.delete("/api/projects/p1")

        assert response.json() == {"success": True}
        query.delete.assert_called_once()
        query.eq.assert_any_call("id", "p1")

    def test_database_error_is_500(self, client, db):
        _, query = db
        query.execute.side_effect = APIError({"message": "relation does not exist", "code": "42P01"})

        response = client.get("/api/projects")

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "relation does not exist"}

    def test_session_count_is_cached_on_card(self, client, db):
        _, query = db
        _set_rows(query, [{"id": "s1"}, {"id": "s2"}])

        response = client.get("/api/projects/p1/session-count")

        assert response.json() == {"count": 2}
        query.contains.assert_called_with("project_ids", ["p1"])
        query.update.assert_called_with({"session_count": 2})


class TestProjectAIUpdate:

    def test_applies_editable_fields_and_logs_changes(self, client, db):
        _, query = db
        _set_rows(query, [{"id": "p1", "project_goals": "売上10%増", "ai_auto_update": True}])
        reply = AsyncMock(return_value='{"project_goals": "売上20%増", "user_id": "someone-else"}')

        with patch("services.project_service.create_chat_completion", reply):
            response = client.post(
                "/api/projects/p1/ai-update",
                json={"conversation": "目標を20%に上げました", "sessionId": "s9"},
            )

        assert response.status_code == 200
        assert response.json() == {"success": True, "updates": {"project_goals": "売上20%増"}}
        assert reply.call_args.kwargs["response_format"] == {"type": "json_object"}

        log_rows = query.insert.call_args[0][0]
        assert log_rows == [{
            "project_id": "p1",
            "field_name": "project_goals",
            "old_value": '"売上10%増"',
            "new_value": '"売上20%増"',
            "session_id": "s9",
        }]
        written = [name for name, _, _ in query.method_calls if name in ("insert", "update")]
        assert written == ["insert", "update"]

    def test_failed_log_leaves_project_untouched(self, client, db):
        _, query = db
        query.execute.side_effect = [
            SimpleNamespace(data=[{"id": "p1", "ai_auto_update": True}]),
            APIError({"message": "ai_updates_log is unavailable", "code": "42P01"}),
        ]
        reply = AsyncMock(return_value='{"project_goals": "売上20%増"}')

        with patch("services.project_service.create_chat_completion", reply):
            response = client.post("/api/projects/p1/ai-update", json={"conversation": "x"})

        assert response.status_code == 500
        query.insert.assert_called_once()
        query.update.assert_not_called()

    def test_disabled_auto_update_skips_model(self, client, db):
        _, query = db
        _set_rows(query, [{"id": "p1", "ai_auto_update": False}])
        reply = AsyncMock(return_value="{}")

        with patch("services.project_service.create_chat_completion", reply):
            response = client.post("/api/projects/p1/ai-update", json={"conversation": "x"})

        assert response.json() == {"success": True, "updates": {}}
        reply.assert_not_awaited()

    def test_missing_project_is_404(self, client, db):
        response = client.post("/api/projects/p1/ai-update", json={"conversation": "x"})

        assert response.status_code == 404

    def test_invalid_model_json_is_500(self, client, db):
        _, query = db
        _set_rows(query, [{"id": "p1", "ai_auto_update": True}])

        with patch("services.project_service.create_chat_completion", AsyncMock(return_value="not json")):
            response = client.post("/api/projects/p1/ai-update", json={"conversation": "x"})

        assert response.status_code == 500
        assert response.json()["error"] == ERROR_MESSAGES["ai_update_failed"]

    def test_provider_busy(self, client, db):
        _, query = db
        _set_rows(query, [{"id": "p1", "ai_auto_update": True}])
        reply = AsyncMock(side_effect=api_status_error(429))

        with patch("services.project_service.create_chat_completion", reply):
            response = client.post("/api/projects/p1/ai-update", json={"conversation": "x"})

        assert response.status_code == 429


# ── Tests: stakeholders ───────────────────────────────────────────────────


class TestStakeholders:

    def test_create(self, client, db):
        mock_db, query = db
        _set_rows(query, [{"id": "sh1", "name": "部長"}])

        response = client.post(
            "/api/stakeholders",
            json={"project_id": "p1", "name": "部長", "involvement_level": "high"},
        )

        assert response.status_code == 200
        assert response.json()["stakeholder"] == {"id": "sh1", "name": "部長"}
        mock_db.table.assert_called_with("project_stakeholders")

    def test_invalid_level_rejected(self, client, db):
        response = client.post(
            "/api/stakeholders",
            json={"project_id": "p1", "name": "部長", "involvement_level": "extreme"},
        )

        assert response.status_code == 400

    def test_update_missing_is_404(self, client, db):
        response = client.put("/api/stakeholders/sh1", json={"attitude": 3})

        assert response.status_code == 404

    def test_delete(self, client, db):
        _, query = db

        response = client.delete("/api/stakeholders/sh1")

        assert response.json() == {"success": True}
        query.eq.assert_called_with("id", "sh1")


# ── Tests: sessions ───────────────────────────────────────────────────────


class TestSessions:

    def test_list(self, client, db):
        _, query = db
        _set_rows(query, [{"id": "s1"}])

        response = client.get("/api/user-sessions")

        assert response.json() == {"success": True, "sessions": [{"id": "s1"}]}
        query.eq.assert_called_with("user_id", TEST_USER["id"])

    def test_create_defaults_coach(self, client, db):
        _, query = db
        _set_rows(query, [{"id": "s1"}])

        client.post("/api/user-sessions", json={"messages": [{"role": "user", "content": "hi"}]})

        row = query.insert.call_args[0][0]
        assert row["coach_id"] == "tanaka"
        assert row["user_id"] == TEST_USER["id"]
        assert row["messages"] == [{"role": "user", "content": "hi", "timestamp": None}]

    def test_update_missing_is_404(self, client, db):
        response = client.put("/api/sessions/s1", json={"messages": []})

        assert response.status_code == 404

    def test_history_summarises_last_session(self, client, db):
        _, query = db
        _set_rows(query, [{
            "id": "s1",
            "messages": [
                {"role": "user", "content": "会議の進め方"},
                {"role": "assistant", "content": "なるほど"},
                {"role": "user", "content": "議事録も"},
            ],
        }])

        response = client.post("/api/sessions/history", json={"project_id": "p1"})

        body = response.json()
        assert body["hasHistory"] is True
        assert body["lastSession"]["id"] == "s1"
        assert body["summary"] == "会議の進め方 / 議事録も"

    def test_history_empty(self, client, db):
        response = client.post("/api/sessions/history", json={"project_id": "p1"})

        assert response.json() == {"hasHistory": False, "lastSession": None, "summary": None}


class TestSummarizeMessages:

    def test_uses_last_five_and_truncates(self):
        messages = [{"role": "user", "content": f"m{i}"} for i in range(7)]
        messages.append({"role": "user", "content": "x" * 150})

        summary = summarize_messages(messages)

        assert summary.split(" / ")[:4] == ["m3", "m4", "m5", "m6"]
        assert summary.endswith("x" * 100)
        assert "x" * 101 not in summary


# ── Tests: concurrency ────────────────────────────────────────────────────


class TestStoreCallsRunOffTheEventLoop:

    def test_concurrent_requests_overlap(self, db):
        _, query = db

        def slow_execute():
            time.sleep(0.3)
            return SimpleNamespace(data=[])

        query.execute.side_effect = slow_execute

        async def fire(count):
            transport = httpx.ASGITransport(app=app)
            async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
                started = time.perf_counter()
                responses = await asyncio.gather(*(http.get("/api/projects") for _ in range(count)))
                return time.perf_counter() - started, responses

        elapsed, responses = asyncio.run(fire(4))

        assert all(r.status_code == 200 for r in responses)
        # Four 0.3s store calls one after another would take 1.2s.
        assert elapsed < 0.9

"""
Integration tests for session management and participation endpoints.
"""

import pytest

from .conftest import bearer

SESSION_PAYLOAD = {
    "name": "Evening yin",
    "date": "2026-11-05T19:00:00",
    "description": "Slow, long holds",
}


@pytest.fixture
def session_payload(teacher):
    return {**SESSION_PAYLOAD, "teacher_id": teacher.id}


@pytest.fixture
def created_session(test_client, auth_headers, session_payload):
    response = test_client.post(
        "/api/v1/sessions", json=session_payload, headers=auth_headers
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestSessionCrud:
    def test_requires_authentication(self, test_client):
        assert test_client.get("/api/v1/sessions").status_code == 401

    def test_create_starts_empty(self, created_session, session_payload):
        assert created_session["id"] > 0
        assert created_session["name"] == "Evening yin"
        assert created_session["teacher_id"] == session_payload["teacher_id"]
        assert created_session["users"] == []

    def test_create_with_unknown_teacher(self, test_client, auth_headers):
        response = test_client.post(
            "/api/v1/sessions",
            json={**SESSION_PAYLOAD, "teacher_id": 999},
            headers=auth_headers,
        )

        assert response.status_code == 404

    def test_create_with_naive_date(self, test_client, auth_headers, session_payload):
        response = test_client.post(
            "/api/v1/sessions",
            json={**session_payload, "date": "2026-11-05T19:00:00"},
            headers=auth_headers,
        )

        assert response.status_code == 201, response.text
        assert response.json()["date"].startswith("2026-11-05T19:00:00")

    def test_update_with_naive_date(
        self, test_client, auth_headers, created_session, session_payload
    ):
        response = test_client.put(
            f"/api/v1/sessions/{created_session['id']}",
            json={**session_payload, "date": "2026-12-01T07:45:00"},
            headers=auth_headers,
        )

        assert response.status_code == 200, response.text
        assert response.json()["date"].startswith("2026-12-01T07:45:00")

    def test_create_with_oversized_teacher_id(self, test_client, auth_headers):
        response = test_client.post(
            "/api/v1/sessions",
            json={**SESSION_PAYLOAD, "teacher_id": 2**63},
            headers=auth_headers,
        )

        assert response.status_code == 400

    def test_create_without_name(self, test_client, auth_headers):
        payload = {k: v for k, v in SESSION_PAYLOAD.items() if k != "name"}

        response = test_client.post(
            "/api/v1/sessions", json=payload, headers=auth_headers
        )

        assert response.status_code == 400

    def test_list_and_get(self, test_client, auth_headers, created_session):
        listed = test_client.get("/api/v1/sessions", headers=auth_headers)
        fetched = test_client.get(
            f"/api/v1/sessions/{created_session['id']}", headers=auth_headers
        )

        assert [s["id"] for s in listed.json()] == [created_session["id"]]
        assert fetched.status_code == 200
        assert fetched.json()["description"] == "Slow, long holds"

    def test_get_malformed_id(self, test_client, auth_headers):
        response = test_client.get("/api/v1/sessions/one", headers=auth_headers)

        assert response.status_code == 400

    def test_get_unknown_id(self, test_client, auth_headers):
        response = test_client.get("/api/v1/sessions/999", headers=auth_headers)

        assert response.status_code == 404

    def test_update_keeps_participants(
        self, test_client, auth_headers, auth_login, created_session, session_payload
    ):
        session_id = created_session["id"]
        test_client.post(
            f"/api/v1/sessions/{session_id}/participate/{auth_login['id']}",
            headers=auth_headers,
        )

        response = test_client.put(
            f"/api/v1/sessions/{session_id}",
            json={**session_payload, "name": "Evening yin (full)"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Evening yin (full)"
        assert response.json()["users"] == [auth_login["id"]]

    def test_update_unknown(self, test_client, auth_headers, session_payload):
        response = test_client.put(
            "/api/v1/sessions/999", json=session_payload, headers=auth_headers
        )

        assert response.status_code == 404

    def test_delete(self, test_client, auth_headers, auth_login, created_session):
        session_id = created_session["id"]
        test_client.post(
            f"/api/v1/sessions/{session_id}/participate/{auth_login['id']}",
            headers=auth_headers,
        )

        response = test_client.delete(
            f"/api/v1/sessions/{session_id}", headers=auth_headers
        )

        assert response.status_code == 200
        assert (
            test_client.get(
                f"/api/v1/sessions/{session_id}", headers=auth_headers
            ).status_code
            == 404
        )

    def test_delete_malformed(self, test_client, auth_headers):
        response = test_client.delete("/api/v1/sessions/one", headers=auth_headers)

        assert response.status_code == 400


class TestParticipation:
    def participate_url(self, session_id, user_id):
        return f"/api/v1/sessions/{session_id}/participate/{user_id}"

    def test_join_and_leave(self, test_client, auth_headers, auth_login, created_session):
        url = self.participate_url(created_session["id"], auth_login["id"])

        joined = test_client.post(url, headers=auth_headers)
        roster = test_client.get(
            f"/api/v1/sessions/{created_session['id']}", headers=auth_headers
        ).json()["users"]
        left = test_client.delete(url, headers=auth_headers)
        after = test_client.get(
            f"/api/v1/sessions/{created_session['id']}", headers=auth_headers
        ).json()["users"]

        assert joined.status_code == 200
        assert roster == [auth_login["id"]]
        assert left.status_code == 200
        assert after == []

    def test_join_twice(self, test_client, auth_headers, auth_login, created_session):
        url = self.participate_url(created_session["id"], auth_login["id"])

        test_client.post(url, headers=auth_headers)
        response = test_client.post(url, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_leave_without_join(self, test_client, auth_headers, auth_login, created_session):
        response = test_client.delete(
            self.participate_url(created_session["id"], auth_login["id"]),
            headers=auth_headers,
        )

        assert response.status_code == 400

    def test_unknown_session(self, test_client, auth_headers, auth_login):
        response = test_client.post(
            self.participate_url(999, auth_login["id"]), headers=auth_headers
        )

        assert response.status_code == 404

    def test_unknown_user(self, test_client, auth_headers, created_session):
        response = test_client.post(
            self.participate_url(created_session["id"], 999), headers=auth_headers
        )

        assert response.status_code == 404

    @pytest.mark.parametrize(
        "session_id,user_id",
        [
            ("one", "1"),
            ("1", "one"),
            ("99999999999999999999", "1"),
            ("1", "99999999999999999999"),
        ],
    )
    def test_malformed_ids(self, test_client, auth_headers, session_id, user_id):
        url = self.participate_url(session_id, user_id)

        assert test_client.post(url, headers=auth_headers).status_code == 400
        assert test_client.delete(url, headers=auth_headers).status_code == 400

    def test_requires_authentication(self, test_client):
        assert test_client.post(self.participate_url(1, 1)).status_code == 401

"""HTTP cookie endpoints."""
from __future__ import annotations

from http.cookies import SimpleCookie


def _session_cookie(resp):
    cookie = SimpleCookie()
    cookie.load(resp.headers["set-cookie"])
    return cookie["test-session-id"]


def test_set_cookie_issues_and_registers_session(client, app):
    resp = client.get("/set-cookie")

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "Cookie set successfully"
    session_id = body["sessionId"]
    assert session_id.startswith("session-")
    assert app.state.store.exists(session_id)

    morsel = _session_cookie(resp)
    assert morsel.value == session_id
    assert morsel["path"] == "/"
    assert morsel["max-age"] == ""
    assert not morsel["httponly"]
    # testserver is not a local host, so no Domain attribute
    assert morsel["domain"] == ""


def test_set_cookie_scopes_domain_to_localhost(client):
    resp = client.get("/set-cookie", headers={"host": "localhost:3000"})
    assert _session_cookie(resp)["domain"] == "localhost"


def test_clear_cookie_expires_and_invalidates(client, app):
    session_id = client.get("/set-cookie").json()["sessionId"]
    client.cookies.clear()

    resp = client.get("/clear-cookie", headers={"cookie": f"test-session-id={session_id}"})

    assert resp.status_code == 200
    assert resp.json() == {
        "success": True,
        "message": "Cookie cleared with Max-Age=0 - browser should delete it",
    }
    morsel = _session_cookie(resp)
    assert morsel.value == ""
    assert morsel["max-age"] == "0"
    assert morsel["path"] == "/"
    assert not app.state.store.exists(session_id)


def test_clear_cookie_without_cookie_is_noop(client, app):
    app.state.store.create("session-keep")

    resp = client.get("/clear-cookie")

    assert resp.status_code == 200
    assert resp.json()["success"] is True
    assert _session_cookie(resp)["max-age"] == "0"
    assert app.state.store.list_active() == ["session-keep"]


def test_status_reports_unissued_cookie(client, app):
    app.state.store.create("session-live")

    resp = client.get("/status", headers={"cookie": "theme=dark; test-session-id=Z"})

    assert resp.status_code == 200
    assert resp.json() == {
        "receivedCookie": "Z",
        "activeSessions": ["session-live"],
        "allCookies": "theme=dark; test-session-id=Z",
    }


def test_status_without_cookie(client):
    body = client.get("/status").json()
    assert body == {"receivedCookie": None, "activeSessions": [], "allCookies": ""}


def test_status_does_not_mutate(client, app):
    session_id = client.get("/set-cookie").json()["sessionId"]
    client.get("/status")
    client.get("/status")
    assert app.state.store.list_active() == [session_id]


def test_health_counts_sessions(client):
    client.get("/set-cookie")
    client.get("/set-cookie")
    assert client.get("/health").json() == {"status": "ok", "activeSessions": 2}


def test_compliant_client_drops_cookie_after_clear(client):
    """The test client honours Max-Age=0, so its jar is empty afterwards."""
    client.get("/set-cookie")
    assert client.cookies.get("test-session-id")

    client.get("/clear-cookie")

    assert client.get("/status").json()["receivedCookie"] is None


def test_clear_cookie_logs_session_lifetime(client, caplog):
    session_id = client.get("/set-cookie").json()["sessionId"]
    client.cookies.clear()

    with caplog.at_level("INFO", logger="api.routes"):
        client.get("/clear-cookie", headers={"cookie": f"test-session-id={session_id}"})
        client.get("/clear-cookie", headers={"cookie": f"test-session-id={session_id}"})

    invalidated = [r for r in caplog.records if r.getMessage().startswith("Invalidated session")]
    assert len(invalidated) == 1
    assert session_id in invalidated[0].getMessage()

"""Integration tests for the server-rendered registration page."""

from __future__ import annotations

from signup.services._shared.result import Err

from tests.helpers.forms import VALID_FORM


def test_get_renders_empty_form(client) -> None:
    """The page shows three inputs, the submit control and the login link."""

    resp = client.get("/register")

    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    for name in ("username", "email", "password"):
        assert f'name="{name}"' in html
    assert 'type="password"' in html
    assert "Sign Up with Google" in html
    assert 'href="/login"' in html
    assert "X-Request-ID" in resp.headers


def test_post_invalid_keeps_form_with_field_errors(client, gateway) -> None:
    resp = client.post("/register", data={**VALID_FORM, "username": "ab"})

    assert resp.status_code == 422
    html = resp.get_data(as_text=True)
    assert "The username must be between 3 and 20 characters." in html
    assert 'value="ab"' in html
    assert gateway.calls == []


def test_post_success_replaces_form_with_message(client, gateway) -> None:
    resp = client.post("/register", data=VALID_FORM)

    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert "User registered" in html
    assert 'name="username"' not in html
    assert gateway.calls == [VALID_FORM]


def test_post_rejection_keeps_form_and_shows_message(client, gateway) -> None:
    gateway.result = Err({"response": {"data": {"message": "Email taken"}}})

    resp = client.post("/register", data=VALID_FORM)

    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert "Email taken" in html
    assert 'name="username"' in html
    assert 'data-state="failed"' in html
    assert "Abc123!" not in html


def test_unknown_route_returns_problem_json(client) -> None:
    resp = client.get("/nowhere", headers={"X-Request-ID": "req-123"})

    assert resp.status_code == 404
    assert resp.mimetype == "application/problem+json"
    body = resp.get_json()
    assert body["code"] == "not_found"
    assert body["request_id"] == "req-123"

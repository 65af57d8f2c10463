# File: tests/test_pages.py

from fastapi.testclient import TestClient

from authportal.main import app

client = TestClient(app)


def test_health_endpoint():
    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_login_page_renders_form():
    resp = client.get("/login")
    assert resp.status_code == 200
    assert "text/html" in resp.headers["content-type"]
    html = resp.text
    assert "Sign in" in html
    assert 'data-endpoint="/api/auth/login"' in html
    assert 'data-redirect="/"' in html
    assert "Login failed. Please try again." in html
    assert 'name="confirm"' not in html
    assert 'href="/signup"' in html


def test_signup_page_renders_confirmation_field():
    resp = client.get("/signup")
    assert resp.status_code == 200
    html = resp.text
    assert "Create your account" in html
    assert 'data-endpoint="/api/auth/signup"' in html
    assert 'data-redirect="/login"' in html
    assert 'data-min-password-length="8"' in html
    assert "Passwords do not match" in html
    assert 'name="confirm"' in html


def test_application_root_renders():
    resp = client.get("/")
    assert resp.status_code == 200
    assert "Auth Portal" in resp.text


def test_form_script_is_served():
    resp = client.get("/static/js/auth-form.js")
    assert resp.status_code == 200
    assert "auth-form" in resp.text

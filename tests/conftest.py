"""
Pytest Configuration and Fixtures

Shared fixtures for the student API and the website tests.
"""

import base64
import json

import pytest

from simple_api.app import create_app as create_api_app
from website.app import create_app as create_website_app

API_URL = "http://student-api.test/pozos/api/v1.0/get_student_ages"
USERNAME = "toto"
PASSWORD = "python"


def basic_auth(username, password):
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {token}"}


def write_student_file(path, ages):
    path.write_text(json.dumps({"student_age": ages}), encoding="utf-8")
    return path


class FakeResponse:
    """Stand-in for requests.Response with just what the client reads."""

    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    def json(self):
        return json.loads(self.text)


# ============================================================================
# Student API Fixtures
# ============================================================================

@pytest.fixture
def student_file(tmp_path):
    """A data file holding the two example students."""
    return write_student_file(tmp_path / "student_age.json", {"alice": "12", "bob": "13"})


@pytest.fixture
def api_settings(student_file):
    return {
        "host": "127.0.0.1",
        "port": 5000,
        "username": USERNAME,
        "password": PASSWORD,
        "student_age_file": str(student_file),
        "debug": False,
    }


@pytest.fixture
def api_app(api_settings):
    app = create_api_app(api_settings)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def api_client(api_app):
    with api_app.test_client() as c:
        yield c


@pytest.fixture
def auth_headers():
    return basic_auth(USERNAME, PASSWORD)


# ============================================================================
# Website Fixtures
# ============================================================================

@pytest.fixture
def website_settings():
    return {
        "host": "127.0.0.1",
        "port": 8080,
        "api_url": API_URL,
        "username": USERNAME,
        "password": PASSWORD,
        "timeout": 2,
    }


@pytest.fixture
def website_client(website_settings):
    app = create_website_app(website_settings)
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


@pytest.fixture
def fake_api(monkeypatch):
    """
    Replace requests.get in the website client.

    Usage:
        def test_something(fake_api):
            calls = fake_api(FakeResponse(200, [...]))
    """
    def install(result):
        calls = []

        def fake_get(url, **kwargs):
            calls.append({"url": url, **kwargs})
            if isinstance(result, Exception):
                raise result
            return result

        monkeypatch.setattr("website.client.requests.get", fake_get)
        return calls
    return install

"""Pytest shared fixtures: fake identity provider and Flask test client."""
import pathlib
import sys
from typing import Optional

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
import requests

from admin_proxy.config import AppConfig
from admin_proxy.core.gotrue import UserService
from admin_proxy.flask_app import create_app


# ─────────────────────────────────────────────────────────────────────────────
# Network Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def _block_network(monkeypatch, request):
    """
    Prevent unit tests from reaching a live GoTrue instance.

    Tests that exercise GoTrueClient install their own requests stubs on
    top of this one; integration tests skip it entirely.
    """
    if request.node.get_closest_marker("integration"):
        return

    def _refuse(url, *args, **kwargs):
        raise RuntimeError(f"Unexpected network access in unit test: {url}")

    monkeypatch.setattr(requests, "get", _refuse)
    monkeypatch.setattr(requests, "put", _refuse)
    monkeypatch.setattr(requests, "post", _refuse)


# ─────────────────────────────────────────────────────────────────────────────
# Fake Identity Provider
# ─────────────────────────────────────────────────────────────────────────────
class FakeGoTrueClient:
    """In-memory stand-in for GoTrueClient that records every call."""

    def __init__(self, pages: Optional[dict] = None):
        self.pages = pages or {}
        self.list_error: Optional[Exception] = None
        self.update_error: Optional[Exception] = None
        self.list_calls: list[tuple] = []
        self.update_calls: list[tuple] = []

    @property
    def call_count(self) -> int:
        return len(self.list_calls) + len(self.update_calls)

    def list_users(self, page=None, per_page=None):
        self.list_calls.append((page, per_page))
        if self.list_error:
            raise self.list_error
        return list(self.pages.get(page or 1, []))

    def update_user_by_id(self, user_id, attributes):
        self.update_calls.append((user_id, attributes))
        if self.update_error:
            raise self.update_error
        for users in self.pages.values():
            for user in users:
                if user["id"] == user_id:
                    return {**user, "updated_at": "2024-05-01T00:00:00Z"}
        return {"id": user_id, "updated_at": "2024-05-01T00:00:00Z"}


def make_user(user_id: str, email: str) -> dict:
    return {"id": user_id, "email": email, "aud": "authenticated", "role": "authenticated"}


@pytest.fixture()
def app_config():
    return AppConfig(
        provider_url="https://project.supabase.test",
        service_role_key="service-role-key",
        request_timeout=5,
        port=4000,
        environment="test",
    )


@pytest.fixture()
def fake_provider():
    return FakeGoTrueClient()


@pytest.fixture()
def app(app_config, fake_provider):
    flask_app = create_app(app_config, UserService(fake_provider))
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


# ─────────────────────────────────────────────────────────────────────────────
# Pytest Configuration
# ─────────────────────────────────────────────────────────────────────────────
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (requires a reachable GoTrue instance)"
    )

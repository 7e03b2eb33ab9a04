"""
Shared pytest fixtures for privy_lookup tests.
"""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from privy_lookup.config import PrivySettings, get_privy_settings
from privy_lookup.main import app
from privy_lookup.services.privy_client import get_http_client


class FakePrivy:
    """Stands in for the Privy API and records every request it receives."""

    def __init__(self):
        self.requests = []
        self.response = httpx.Response(200, json={"id": "did:privy:abc", "linked_accounts": []})
        self.error = None
        self.queued = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.queued:
            return self.queued.pop(0)
        return self.response

    def respond(self, status_code, **kwargs):
        self.response = httpx.Response(status_code, **kwargs)

    def queue(self, status_code, **kwargs):
        """Answer the next request with this response before falling back to `response`."""
        self.queued.append(httpx.Response(status_code, **kwargs))

    @property
    def last_body(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def privy_settings() -> PrivySettings:
    """Settings with test credentials."""
    return PrivySettings(app_id="test-app-id", app_secret="test-app-secret")


@pytest.fixture
def fake_privy() -> FakePrivy:
    return FakePrivy()


@pytest.fixture
def client(privy_settings, fake_privy):
    """TestClient whose outbound calls go to FakePrivy."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(fake_privy))
    app.dependency_overrides[get_privy_settings] = lambda: privy_settings
    app.dependency_overrides[get_http_client] = lambda: http_client
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_user() -> dict:
    """Privy user record with one wallet per chain and an email account."""
    return {
        "id": "did:privy:cm123",
        "created_at": 1700000000,
        "linked_accounts": [
            {"type": "wallet", "address": "0xABC", "chain_type": "ethereum", "wallet_client_type": "privy"},
            {"type": "wallet", "address": "Sol123", "chain_type": "solana"},
            {"type": "email", "address": "alice@example.com", "verified_at": 1700000000},
        ],
        "has_accepted_terms": True,
        "is_guest": False,
    }

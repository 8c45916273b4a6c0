"""Auth Gate — every playlist route halts with 401 before the handler runs.

Invariants verified:
    - Missing, malformed, badly signed and expired tokens → 401 {"message": "Invalid JWT"}
    - The playlist service is never constructed when the gate rejects
    - A token whose subject is not a well-formed identifier → 401
    - A valid token lets the request through
    - Subscription read routes follow settings.subscription_auth_required
"""

from datetime import timedelta

import pytest

from tubehub.api.dependencies import get_playlist_service
from tubehub.config import Settings, get_settings
from tubehub.core.identifiers import new_identifier
from tubehub.infrastructure.jwt_verifier import issue_token
from tubehub.main import app

ID = new_identifier()
PLAYLIST_ROUTES = [
    ("POST", "/api/v1/playlists"),
    ("GET", f"/api/v1/playlists/{ID}"),
    ("PATCH", f"/api/v1/playlists/{ID}"),
    ("DELETE", f"/api/v1/playlists/{ID}"),
    ("PATCH", f"/api/v1/playlists/add/{ID}/{ID}"),
    ("PATCH", f"/api/v1/playlists/remove/{ID}/{ID}"),
    ("GET", f"/api/v1/playlists/user/{ID}"),
]


@pytest.fixture
def handler_calls():
    """Replace the playlist service factory with a recorder."""
    calls = []

    def spy():
        calls.append("built")
        raise AssertionError("handler must not run")

    app.dependency_overrides[get_playlist_service] = spy
    return calls


def _bad_headers():
    secret = get_settings().jwt_secret
    return [
        {},
        {"Authorization": "Bearer invalid_jwt_token"},
        {"Authorization": "Basic dXNlcjpwYXNz"},
        {"Authorization": "Bearer"},
        {"Authorization": f"Bearer {issue_token(ID, 'another-secret-with-at-least-32-bytes')}"},
        {"Authorization": f"Bearer {issue_token(ID, secret, expires_in=timedelta(seconds=-5))}"},
    ]


@pytest.mark.parametrize("method,path", PLAYLIST_ROUTES)
async def test_playlist_routes_reject_missing_token(client, handler_calls, method, path):
    res = await client.request(method, path)
    assert res.status_code == 401
    assert res.json() == {"message": "Invalid JWT"}
    assert res.headers["www-authenticate"] == "Bearer"
    assert handler_calls == []


async def test_bad_tokens_rejected(client, handler_calls):
    for headers in _bad_headers():
        res = await client.get(f"/api/v1/playlists/{ID}", headers=headers)
        assert res.status_code == 401, headers
        assert res.json() == {"message": "Invalid JWT"}
    assert handler_calls == []


async def test_valid_token_reaches_handler(client, alice_headers):
    res = await client.get(f"/api/v1/playlists/{ID}", headers=alice_headers)
    # Past the gate: the handler answers (playlist does not exist)
    assert res.status_code == 404
    assert res.json() == {"message": "Playlist not found"}


async def test_subscription_reads_gated_by_default(client):
    res = await client.get(f"/api/v1/subscriptions/c/{ID}")
    assert res.status_code == 401
    assert res.json() == {"message": "Invalid JWT"}


async def test_subscription_reads_open_when_configured(client):
    app.dependency_overrides[get_settings] = lambda: Settings(
        subscription_auth_required=False,
    )
    res = await client.get(f"/api/v1/subscriptions/c/{ID}")
    assert res.status_code == 200
    assert res.json() == {"status": "success", "subscribers": []}


async def test_toggle_requires_token_even_when_reads_open(client):
    app.dependency_overrides[get_settings] = lambda: Settings(
        subscription_auth_required=False,
    )
    res = await client.post(f"/api/v1/subscriptions/c/{ID}")
    assert res.status_code == 401


async def test_token_with_malformed_subject_rejected(client, handler_calls):
    token = issue_token("not-an-id-" * 5, get_settings().jwt_secret)
    res = await client.post(
        "/api/v1/playlists", json={"name": "Mix"},
        headers={"Authorization": f"Bearer {token}"},
    )
    assert res.status_code == 401
    assert res.json() == {"message": "Invalid JWT"}
    assert handler_calls == []

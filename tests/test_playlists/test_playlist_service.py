"""Tests for PlaylistService."""

import json

import httpx
import pytest
import respx

from moodwave.playlists.service import MAX_URIS_PER_REQUEST, PlaylistService
from moodwave.spotify.exceptions import SpotifyAPIError

API = "https://api.spotify.com/v1"


def _mock_profile_and_create(router=respx) -> respx.Route:
    router.get(f"{API}/me").mock(return_value=httpx.Response(200, json={"id": "user-1", "display_name": "User"}))
    return router.post(f"{API}/users/user-1/playlists").mock(
        return_value=httpx.Response(201, json={"id": "pl1", "name": "Mix"})
    )


@respx.mock
async def test_creates_private_playlist_and_adds_tracks() -> None:
    create = _mock_profile_and_create()
    add = respx.post(f"{API}/playlists/pl1/tracks").mock(return_value=httpx.Response(201, json={"snapshot_id": "s"}))

    playlist_id = await PlaylistService().create_playlist_with_tracks(
        "token", "Mix", ["spotify:track:1", "spotify:track:2"], description="Rainy day"
    )

    assert playlist_id == "pl1"
    assert json.loads(create.calls.last.request.content) == {
        "name": "Mix",
        "description": "Rainy day",
        "public": False,
    }
    assert json.loads(add.calls.last.request.content) == {"uris": ["spotify:track:1", "spotify:track:2"]}


@respx.mock
async def test_default_description() -> None:
    create = _mock_profile_and_create()
    respx.post(f"{API}/playlists/pl1/tracks").mock(return_value=httpx.Response(201, json={"snapshot_id": "s"}))

    await PlaylistService().create_playlist_with_tracks("token", "Mix", ["spotify:track:1"])

    assert json.loads(create.calls.last.request.content)["description"] == "Generated with Moodwave"


@respx.mock
async def test_large_track_lists_are_chunked() -> None:
    _mock_profile_and_create()
    add = respx.post(f"{API}/playlists/pl1/tracks").mock(return_value=httpx.Response(201, json={"snapshot_id": "s"}))
    uris = [f"spotify:track:{i}" for i in range(MAX_URIS_PER_REQUEST + 5)]

    await PlaylistService().create_playlist_with_tracks("token", "Big", uris)

    assert add.call_count == 2
    assert len(json.loads(add.calls[0].request.content)["uris"]) == MAX_URIS_PER_REQUEST
    assert json.loads(add.calls[1].request.content)["uris"] == uris[MAX_URIS_PER_REQUEST:]


@respx.mock(assert_all_called=False)
async def test_empty_track_list_skips_add_call(respx_mock: respx.MockRouter) -> None:
    _mock_profile_and_create(respx_mock)
    add = respx_mock.post(f"{API}/playlists/pl1/tracks")

    assert await PlaylistService().create_playlist_with_tracks("token", "Empty", []) == "pl1"
    assert not add.called


@respx.mock(assert_all_called=False)
async def test_create_failure_propagates(respx_mock: respx.MockRouter) -> None:
    respx_mock.get(f"{API}/me").mock(return_value=httpx.Response(200, json={"id": "user-1"}))
    respx_mock.post(f"{API}/users/user-1/playlists").mock(
        return_value=httpx.Response(403, json={"error": {"status": 403, "message": "Insufficient client scope"}})
    )
    add = respx_mock.post(f"{API}/playlists/pl1/tracks")

    with pytest.raises(SpotifyAPIError, match="Insufficient client scope"):
        await PlaylistService().create_playlist_with_tracks("token", "Mix", ["spotify:track:1"])
    assert not add.called

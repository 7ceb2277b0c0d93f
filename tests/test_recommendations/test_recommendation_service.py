"""Tests for RecommendationService."""

import httpx
import pytest
import respx

from moodwave.moods import MoodKey, lookup
from moodwave.recommendations.seeds import SeedBundle
from moodwave.recommendations.service import RecommendationService, format_track
from moodwave.spotify.client import SpotifyClient
from moodwave.spotify.exceptions import SpotifyAPIError, SpotifyUnexpectedResponseError
from moodwave.spotify.models import SpotifyTrack

API = "https://api.spotify.com/v1"
NOT_FOUND = {"error": {"status": 404, "message": "Not found."}}


def _track_json(track_id: str, *, images: list[dict[str, object]] | None = None) -> dict[str, object]:
    return {
        "id": track_id,
        "name": f"Track {track_id}",
        "uri": f"spotify:track:{track_id}",
        "preview_url": f"https://p.scdn.co/mp3-preview/{track_id}",
        "external_urls": {"spotify": f"https://open.spotify.com/track/{track_id}"},
        "artists": [{"id": "ar1", "name": "Artist One"}, {"id": "ar2", "name": "Artist Two"}],
        "album": {"id": "al1", "name": "Album", "images": images if images is not None else []},
    }


def _mock_personal(artists: list[str] | None = None, tracks: list[str] | None = None) -> None:
    respx.get(f"{API}/me/top/artists").mock(
        return_value=httpx.Response(200, json={"items": [{"id": a, "name": a} for a in artists or []]})
    )
    respx.get(f"{API}/me/top/tracks").mock(
        return_value=httpx.Response(200, json={"items": [{"id": t, "name": t} for t in tracks or []]})
    )


@respx.mock
async def test_chill_end_to_end_request_parameters() -> None:
    _mock_personal(artists=["A1"], tracks=["T1"])
    route = respx.get(f"{API}/recommendations").mock(
        return_value=httpx.Response(200, json={"tracks": [_track_json("x1")]})
    )

    result = await RecommendationService().get_recommendations("token", "chill")

    assert result.mood is MoodKey.CHILL
    assert [t.id for t in result.tracks] == ["x1"]
    params = dict(route.calls.last.request.url.params)
    assert params == {
        "limit": "12",
        "seed_genres": "chill,ambient,electronic",
        "seed_artists": "A1",
        "seed_tracks": "T1",
        "max_energy": "0.55",
        "max_danceability": "0.65",
        "min_tempo": "70",
        "max_tempo": "110",
    }


@respx.mock
async def test_custom_genres_replace_preset_genres() -> None:
    _mock_personal()
    route = respx.get(f"{API}/recommendations").mock(return_value=httpx.Response(200, json={"tracks": []}))

    await RecommendationService().get_recommendations("token", "happy", ["metal", "punk"])

    params = route.calls.last.request.url.params
    assert params["seed_genres"] == "metal,punk"
    assert "seed_artists" not in params
    assert "seed_tracks" not in params
    assert params["min_valence"] == "0.7"
    assert "max_valence" not in params


@respx.mock
async def test_unknown_mood_uses_default() -> None:
    _mock_personal()
    route = respx.get(f"{API}/recommendations").mock(return_value=httpx.Response(200, json={"tracks": []}))

    result = await RecommendationService().get_recommendations("token", "grumpy")

    assert result.mood is MoodKey.HAPPY
    assert route.calls.last.request.url.params["seed_genres"] == "pop,dance,disco"


@respx.mock
async def test_not_found_with_custom_genres_retries_once_with_preset() -> None:
    _mock_personal()
    route = respx.get(f"{API}/recommendations").mock(
        side_effect=[
            httpx.Response(404, json=NOT_FOUND),
            httpx.Response(200, json={"tracks": [_track_json("fallback")]}),
        ]
    )

    result = await RecommendationService().get_recommendations("token", "sad", ["zzz-invalid"])

    assert route.call_count == 2
    assert route.calls[0].request.url.params["seed_genres"] == "zzz-invalid"
    assert route.calls[1].request.url.params["seed_genres"] == "acoustic,indie,soul"
    assert result.mood is MoodKey.SAD
    assert [t.id for t in result.tracks] == ["fallback"]


@respx.mock
async def test_not_found_without_error_message_still_falls_back() -> None:
    _mock_personal()
    route = respx.get(f"{API}/recommendations").mock(
        side_effect=[
            httpx.Response(404, json={"error": {"status": 404}}),
            httpx.Response(200, json={"tracks": [_track_json("fallback")]}),
        ]
    )

    result = await RecommendationService().get_recommendations("token", "sad", ["zzz"])

    assert route.call_count == 2
    assert route.calls[1].request.url.params["seed_genres"] == "acoustic,indie,soul"
    assert [t.id for t in result.tracks] == ["fallback"]


@respx.mock
async def test_fallback_reuses_personal_seeds() -> None:
    _mock_personal(artists=["A1"])
    route = respx.get(f"{API}/recommendations").mock(
        side_effect=[httpx.Response(404, json=NOT_FOUND), httpx.Response(200, json={"tracks": []})]
    )

    await RecommendationService().get_recommendations("token", "sad", ["zzz-invalid"])

    assert respx.calls.call_count == 4
    assert route.calls[1].request.url.params["seed_artists"] == "A1"


@respx.mock
async def test_defaulted_genres_are_never_retried() -> None:
    route = respx.get(f"{API}/recommendations").mock(return_value=httpx.Response(404, json=NOT_FOUND))
    service = RecommendationService()

    with pytest.raises(SpotifyAPIError):
        await service._request(
            SpotifyClient("token"),
            lookup(MoodKey.SAD),
            SeedBundle(genres=["acoustic"]),
            ["metal"],
            genres_defaulted=True,
        )
    assert route.call_count == 1


@respx.mock
async def test_second_not_found_propagates() -> None:
    _mock_personal()
    route = respx.get(f"{API}/recommendations").mock(return_value=httpx.Response(404, json=NOT_FOUND))

    with pytest.raises(SpotifyAPIError) as exc_info:
        await RecommendationService().get_recommendations("token", "sad", ["zzz-invalid"])

    assert exc_info.value.status_code == 404
    assert route.call_count == 2


@respx.mock
async def test_not_found_without_custom_genres_propagates() -> None:
    _mock_personal()
    route = respx.get(f"{API}/recommendations").mock(return_value=httpx.Response(404, text="Not Found"))

    with pytest.raises(SpotifyUnexpectedResponseError):
        await RecommendationService().get_recommendations("token", "sad")

    assert route.call_count == 1


@respx.mock
async def test_other_errors_with_custom_genres_do_not_retry() -> None:
    _mock_personal()
    route = respx.get(f"{API}/recommendations").mock(
        return_value=httpx.Response(500, json={"error": {"status": 500, "message": "Server error"}})
    )

    with pytest.raises(SpotifyAPIError) as exc_info:
        await RecommendationService().get_recommendations("token", "sad", ["metal"])

    assert exc_info.value.status_code == 500
    assert route.call_count == 1


@respx.mock
async def test_personalization_failure_still_recommends() -> None:
    respx.get(f"{API}/me/top/artists").mock(return_value=httpx.Response(403, text="Forbidden"))
    respx.get(f"{API}/me/top/tracks").mock(return_value=httpx.Response(200, json={"items": [{"id": "T1", "name": "x"}]}))
    route = respx.get(f"{API}/recommendations").mock(return_value=httpx.Response(200, json={"tracks": []}))

    result = await RecommendationService().get_recommendations("token", "focus")

    params = route.calls.last.request.url.params
    assert "seed_artists" not in params
    assert params["seed_tracks"] == "T1"
    assert result.tracks == []


@respx.mock
async def test_personalization_error_without_message_still_recommends() -> None:
    respx.get(f"{API}/me/top/artists").mock(return_value=httpx.Response(401, json={"error": {"status": 401}}))
    respx.get(f"{API}/me/top/tracks").mock(return_value=httpx.Response(200, json={"items": []}))
    route = respx.get(f"{API}/recommendations").mock(return_value=httpx.Response(200, json={"tracks": []}))

    result = await RecommendationService().get_recommendations("token", "happy")

    assert result.mood is MoodKey.HAPPY
    assert route.calls.last.request.url.params["seed_genres"] == "pop,dance,disco"


@respx.mock
async def test_limit_is_configurable() -> None:
    _mock_personal()
    route = respx.get(f"{API}/recommendations").mock(return_value=httpx.Response(200, json={"tracks": []}))

    await RecommendationService(limit=20).get_recommendations("token", "happy")

    assert route.calls.last.request.url.params["limit"] == "20"


def test_format_track_without_album_images() -> None:
    track = format_track(SpotifyTrack.model_validate(_track_json("t1", images=[])))

    assert track.album.image is None
    assert track.album.name == "Album"


def test_format_track_uses_first_album_image() -> None:
    images = [{"url": "https://i.scdn.co/large"}, {"url": "https://i.scdn.co/small"}]
    track = format_track(SpotifyTrack.model_validate(_track_json("t1", images=images)))

    assert track.album.image == "https://i.scdn.co/large"
    assert track.preview_url == "https://p.scdn.co/mp3-preview/t1"
    assert track.external_url == "https://open.spotify.com/track/t1"
    assert [(a.id, a.name) for a in track.artists] == [("ar1", "Artist One"), ("ar2", "Artist Two")]


def test_format_track_keeps_null_preview() -> None:
    data = _track_json("t1")
    data["preview_url"] = None
    track = format_track(SpotifyTrack.model_validate(data))

    assert track.preview_url is None
    assert track.model_dump(by_alias=True)["previewUrl"] is None

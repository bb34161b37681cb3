import json as jsonlib

import httpx
import pytest

from freesound_api.services.freesound_client import FreesoundClient

API_KEY = "test-key"
BASE_URL = "https://freesound.test/apiv2"


class FakeFreesound:
    """Serves one canned response and records every request it receives."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._status_code = 200
        self._content: bytes = b"{}"
        self._error: Exception | None = None

    def respond(self, status_code: int = 200, json=None, text: str | None = None) -> None:
        self._status_code = status_code
        if json is not None:
            self._content = jsonlib.dumps(json).encode()
        else:
            self._content = (text or "").encode()

    def fail_with(self, error: Exception) -> None:
        self._error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error:
            raise self._error
        return httpx.Response(self._status_code, content=self._content)

    @property
    def last_params(self) -> list[tuple[str, str]]:
        return list(self.requests[-1].url.params.multi_items())


@pytest.fixture
def fake_freesound() -> FakeFreesound:
    return FakeFreesound()


@pytest.fixture
async def client(fake_freesound):
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_freesound.handler)) as http:
        yield FreesoundClient(api_key=API_KEY, base_url=BASE_URL, http_client=http)


@pytest.fixture
def sound_payload() -> dict:
    return {
        "id": 794253,
        "url": "https://freesound.org/people/field_rec/sounds/794253/",
        "name": "rain on tin roof.wav",
        "tags": ["rain", "roof", "field-recording"],
        "description": "Light rain recorded under a shed.",
        "geotag": "41.3851 2.1734",
        "created": "2025-03-14T09:12:44",
        "license": "http://creativecommons.org/publicdomain/zero/1.0/",
        "type": "wav",
        "channels": 2,
        "filesize": 5292044,
        "bitrate": 1411.0,
        "bitdepth": 16,
        "duration": 30.0,
        "samplerate": 44100.0,
        "username": "field_rec",
        "pack": "https://freesound.org/apiv2/packs/4411/",
        "download": "https://freesound.org/apiv2/sounds/794253/download/",
        "bookmark": "https://freesound.org/apiv2/sounds/794253/bookmark/",
        "previews": {
            "preview-hq-mp3": "https://cdn.freesound.org/previews/794/794253-hq.mp3",
            "preview-lq-mp3": "https://cdn.freesound.org/previews/794/794253-lq.mp3",
            "preview-hq-ogg": "https://cdn.freesound.org/previews/794/794253-hq.ogg",
            "preview-lq-ogg": "https://cdn.freesound.org/previews/794/794253-lq.ogg",
        },
        "images": {
            "waveform_l": "https://cdn.freesound.org/displays/794/794253_wave_L.png",
            "waveform_m": "https://cdn.freesound.org/displays/794/794253_wave_M.png",
            "spectral_l": "https://cdn.freesound.org/displays/794/794253_spec_L.jpg",
            "spectral_m": "https://cdn.freesound.org/displays/794/794253_spec_M.jpg",
        },
        "num_downloads": 120,
        "avg_rating": 4.5,
        "num_ratings": 8,
        "rate": "https://freesound.org/apiv2/sounds/794253/rate/",
        "comments": "https://freesound.org/apiv2/sounds/794253/comments/",
        "num_comments": 3,
        "comment": "https://freesound.org/apiv2/sounds/794253/comment/",
        "similar_sounds": "https://freesound.org/apiv2/sounds/794253/similar/",
        "analysis": {"rhythm": {"bpm": 92.0}},
        "analysis_stats": "https://freesound.org/apiv2/sounds/794253/analysis/",
        "analysis_frames": "https://freesound.org/data/analysis/794/794253_frames.json",
        "md5": "0f1e2d3c4b5a69788796a5b4c3d2e1f0",
    }


@pytest.fixture
def search_payload(sound_payload) -> dict:
    second = {"id": 12, "name": "door slam", "tags": ["door"]}
    return {
        "count": 2,
        "next": "https://freesound.org/apiv2/search/text/?query=rain&page=2",
        "previous": None,
        "results": [sound_payload, second],
    }

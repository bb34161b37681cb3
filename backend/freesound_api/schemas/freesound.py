from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SortOption(str, Enum):
    SCORE = "score"
    DURATION_DESC = "duration_desc"
    DURATION_ASC = "duration_asc"
    CREATED_DESC = "created_desc"
    CREATED_ASC = "created_asc"
    DOWNLOADS_DESC = "downloads_desc"
    DOWNLOADS_ASC = "downloads_asc"
    RATING_DESC = "rating_desc"
    RATING_ASC = "rating_asc"


class FreesoundModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


class Previews(FreesoundModel):
    """Preview URLs, mp3 and ogg at high and low quality."""

    preview_hq_mp3: str = Field(default="", alias="preview-hq-mp3")
    preview_lq_mp3: str = Field(default="", alias="preview-lq-mp3")
    preview_hq_ogg: str = Field(default="", alias="preview-hq-ogg")
    preview_lq_ogg: str = Field(default="", alias="preview-lq-ogg")


class Images(FreesoundModel):
    waveform_l: str = ""
    waveform_m: str = ""
    spectral_l: str = ""
    spectral_m: str = ""


class Sound(FreesoundModel):
    """A sound resource.

    Only ``id`` is mandatory. The server omits whatever was not requested
    through ``fields``/``descriptors``, so every other attribute falls back to
    a zero value. ``bitrate``, ``bitdepth`` and the nested bundles stay
    ``None`` when absent since a zero there would read as a real measurement.
    """

    id: int = Field(strict=True)
    url: str = ""
    name: str = ""
    tags: list[str] = Field(default_factory=list)
    description: str = ""
    geotag: str | None = None
    created: str = ""
    license: str = ""
    sound_type: str = Field(default="", alias="type")
    channels: int = 0
    filesize: int = 0
    bitrate: float | None = None
    bitdepth: int | None = None
    duration: float = 0.0
    samplerate: float = 0.0
    username: str = ""
    pack: str | None = None
    download: str = ""
    bookmark: str = ""
    previews: Previews | None = None
    images: Images | None = None
    num_downloads: int = 0
    avg_rating: float = 0.0
    num_ratings: int = 0
    rate: str = ""
    comments: str = ""
    num_comments: int = 0
    comment: str = ""
    similar_sounds: str = ""
    analysis: Any | None = None
    analysis_stats: str = ""
    analysis_frames: str = ""


class SearchHit(Sound):
    """A sound as listed in search results.

    Search only returns the attributes named in ``fields``, which may leave
    out ``id``; it then reads as 0.
    """

    id: int = 0


class SearchResponse(FreesoundModel):
    count: int
    next: str | None = None
    previous: str | None = None
    results: list[SearchHit] = Field(default_factory=list)

    @property
    def has_next(self) -> bool:
        return self.next is not None

    @property
    def has_previous(self) -> bool:
        return self.previous is not None

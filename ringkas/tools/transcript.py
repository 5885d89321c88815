"""YouTube URL detection and caption download."""

import asyncio
import re
from collections.abc import Sequence
from urllib.parse import ParseResult, parse_qs, urlparse

from youtube_transcript_api import NoTranscriptFound, YouTubeTranscriptApi

from ringkas.logging.logger import Log
from ringkas.processing.models import OutputLanguage
from ringkas.tools.exceptions import FetchFailureError
from ringkas.tools.messages import FailureKind, failure_message
from ringkas.tools.urls import ensure_scheme

VIDEO_HOSTS = frozenset({
    "youtube.com",
    "www.youtube.com",
    "m.youtube.com",
    "music.youtube.com",
    "youtu.be",
    "www.youtu.be",
    "youtube-nocookie.com",
    "www.youtube-nocookie.com",
})

_ID_RE = re.compile(r"^[0-9A-Za-z_-]{6,}$")
_PATH_PREFIXES = ("embed", "shorts", "live", "v")


def _parse(url: str) -> ParseResult:
    return urlparse(ensure_scheme(url))


def is_video_url(url: str | None) -> bool:
    """True when the URL points at a known video-hosting site."""
    if not url or not url.strip():
        return False
    hostname = _parse(url).hostname or ""
    return hostname.lower() in VIDEO_HOSTS


def extract_video_id(url: str) -> str | None:
    """Extract the video id from watch, short-link, embed, shorts and live URLs."""
    if not is_video_url(url):
        return None
    parsed = _parse(url)
    hostname = (parsed.hostname or "").lower()
    segments = [s for s in parsed.path.split("/") if s]

    candidate: str | None = None
    if hostname.endswith("youtu.be"):
        candidate = segments[0] if segments else None
    elif segments[:1] == ["watch"]:
        candidate = parse_qs(parsed.query).get("v", [None])[0]
    elif len(segments) >= 2 and segments[0] in _PATH_PREFIXES:
        candidate = segments[1]

    if candidate and _ID_RE.match(candidate):
        return candidate
    return None


class TranscriptFetcher:
    """Downloads captions with youtube-transcript-api."""

    def __init__(
        self,
        *,
        languages: Sequence[str] = ("id", "en"),
        api: YouTubeTranscriptApi | None = None,
    ) -> None:
        self._languages = list(languages)
        self._api = api if api is not None else YouTubeTranscriptApi()

    async def fetch_text(self, url: str) -> str:
        """Return the caption segments of the video joined with spaces.

        Raises:
            FetchFailureError: if the URL has no video id or no captions
                could be retrieved.
        """
        video_id = extract_video_id(url)
        if video_id is None:
            raise FetchFailureError(f"No YouTube video id in {url}")
        try:
            segments = await asyncio.to_thread(self._fetch_segments, video_id)
        except Exception as exc:
            raise FetchFailureError(
                f"Transcript unavailable for video {video_id}: {exc}"
            ) from exc

        text = " ".join(s.strip() for s in segments if s and s.strip())
        if not text:
            raise FetchFailureError(f"Transcript for video {video_id} is empty")
        return text

    def _fetch_segments(self, video_id: str) -> list[str]:
        try:
            transcript = self._api.fetch(video_id, languages=self._languages)
        except NoTranscriptFound:
            # Fall back to whatever caption track the video has.
            available = next(iter(self._api.list(video_id)), None)
            if available is None:
                raise
            transcript = available.fetch()
        return [snippet.text for snippet in transcript]


async def fetch_transcript_from_youtube_url(
    url: str,
    *,
    fetcher: TranscriptFetcher,
    language: OutputLanguage = OutputLanguage.INDONESIAN,
) -> str:
    """Tool entry point: transcript text, or a failure sentence in ``language``."""
    try:
        text = await fetcher.fetch_text(url)
    except FetchFailureError as exc:
        Log.warning(f"Transcript fetch failed: {exc}")
        return failure_message(FailureKind.TRANSCRIPT_UNAVAILABLE, language)
    Log.info("Fetched transcript", url=url, words=len(text.split()))
    return text

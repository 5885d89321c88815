from ringkas.logging.logger import Log
from ringkas.processing.exceptions import MissingInputError
from ringkas.processing.models import (
    OutputLanguage,
    ProcessingRequest,
    ResolvedSource,
    SourceKind,
)
from ringkas.tools.messages import is_failure_message
from ringkas.tools.transcript import (
    TranscriptFetcher,
    fetch_transcript_from_youtube_url,
    is_video_url,
)
from ringkas.tools.web_page import WebPageFetcher, fetch_text_from_url


def classify_url(url: str) -> SourceKind:
    """Video-hosting URLs take the transcript path, everything else is scraped."""
    return SourceKind.TRANSCRIPT if is_video_url(url) else SourceKind.SCRAPE


class InputResolver:
    """Decides which raw text a request operates on."""

    def __init__(
        self,
        *,
        web_fetcher: WebPageFetcher,
        transcript_fetcher: TranscriptFetcher,
    ) -> None:
        self._web_fetcher = web_fetcher
        self._transcript_fetcher = transcript_fetcher

    async def resolve(
        self,
        request: ProcessingRequest,
        language: OutputLanguage = OutputLanguage.INDONESIAN,
        *,
        fetch: bool = True,
    ) -> ResolvedSource:
        """Pick literal text, a page scrape or a video transcript.

        Literal text wins over a URL and never triggers a fetch. With
        ``fetch=False`` the URL is only classified and left for the model's
        tools. Fetch failures come back as a failure sentence with
        ``failed=True``.

        Raises:
            MissingInputError: if neither text nor URL is present.
        """
        if request.text and request.text.strip():
            return ResolvedSource(text=request.text, source_kind=SourceKind.LITERAL)

        url = (request.url or "").strip()
        if not url:
            raise MissingInputError("No text to process. Please provide text or a valid URL.")

        kind = classify_url(url)
        if not fetch:
            return ResolvedSource(text="", source_kind=kind, url=url, deferred=True)

        if kind is SourceKind.TRANSCRIPT:
            text = await fetch_transcript_from_youtube_url(
                url, fetcher=self._transcript_fetcher, language=language
            )
        else:
            text = await fetch_text_from_url(url, fetcher=self._web_fetcher, language=language)

        failed = is_failure_message(text)
        Log.info("Resolved URL input", kind=kind.value, failed=failed)
        return ResolvedSource(text=text, source_kind=kind, url=url, failed=failed)

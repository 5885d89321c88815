"""Fetch a web page and reduce it to its visible text."""

import re

import httpx
from bs4 import BeautifulSoup

from ringkas.logging.logger import Log
from ringkas.processing.models import OutputLanguage
from ringkas.tools.exceptions import EmptyContentError, FetchFailureError
from ringkas.tools.messages import FailureKind, failure_message
from ringkas.tools.urls import ensure_scheme

_WHITESPACE_RE = re.compile(r"\s+")


def extract_visible_text(html: str) -> str:
    """Drop ``<script>``/``<style>`` elements and return the body text."""
    soup = BeautifulSoup(html, "html.parser")
    for element in soup(["script", "style"]):
        element.decompose()
    root = soup.body or soup
    return _WHITESPACE_RE.sub(" ", root.get_text(separator=" ")).strip()


class WebPageFetcher:
    """Downloads HTML pages with httpx."""

    def __init__(
        self,
        *,
        timeout_seconds: float,
        user_agent: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout_seconds
        self._headers = {"User-Agent": user_agent}
        self._transport = transport

    async def fetch_text(self, url: str) -> str:
        """Return the visible text of the page at ``url``.

        Raises:
            FetchFailureError: on network errors and non-2xx responses.
            EmptyContentError: when the page has no visible text.
        """
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                headers=self._headers,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(ensure_scheme(url))
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchFailureError(
                f"HTTP {exc.response.status_code} while fetching {url}"
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchFailureError(f"Could not fetch {url}: {exc}") from exc

        text = extract_visible_text(response.text)
        if not text:
            raise EmptyContentError(f"No visible text at {url}")
        return text


async def fetch_text_from_url(
    url: str,
    *,
    fetcher: WebPageFetcher,
    language: OutputLanguage = OutputLanguage.INDONESIAN,
) -> str:
    """Tool entry point: page text, or a failure sentence in ``language``."""
    try:
        text = await fetcher.fetch_text(url)
    except EmptyContentError as exc:
        Log.warning(f"Fetched page is empty: {exc}")
        return failure_message(FailureKind.URL_EMPTY, language)
    except FetchFailureError as exc:
        Log.warning(f"URL fetch failed: {exc}")
        return failure_message(FailureKind.URL_UNREACHABLE, language)
    Log.info("Fetched page text", url=url, words=len(text.split()))
    return text

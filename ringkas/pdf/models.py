from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class PdfText:
    """Text pulled out of an uploaded PDF.

    ``text`` holds the non-blank pages in order, one page per block,
    separated by newlines. Scanned pages without a text layer count as blank.
    """

    text: str
    page_count: int
    blank_pages: int = 0

    @classmethod
    def from_pages(cls, pages: Sequence[str | None]) -> "PdfText":
        kept = [page.strip() for page in pages if page and page.strip()]
        return cls(
            text="\n".join(kept),
            page_count=len(pages),
            blank_pages=len(pages) - len(kept),
        )

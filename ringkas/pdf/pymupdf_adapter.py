import pymupdf

from ringkas.logging.logger import Log
from ringkas.pdf.base import BasePdfExtractor
from ringkas.pdf.exceptions import PdfExtractionError
from ringkas.pdf.models import PdfText


class PyMuPdfAdapter(BasePdfExtractor):
    """Reads the text layer page by page with PyMuPDF, in reading order."""

    def extract(self, pdf_bytes: bytes) -> PdfText:
        self.ensure_not_empty(pdf_bytes)
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                if doc.needs_pass:
                    raise PdfExtractionError("PDF is password protected")
                pages = [page.get_text("text", sort=True) for page in doc]
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf could not read the PDF: {exc}") from exc

        result = PdfText.from_pages(pages)
        Log.debug("pymupdf extraction", pages=result.page_count, blank=result.blank_pages)
        return result

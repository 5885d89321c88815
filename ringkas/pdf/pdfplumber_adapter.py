import io

import pdfplumber
from pdfminer.pdfdocument import PDFPasswordIncorrect

from ringkas.logging.logger import Log
from ringkas.pdf.base import BasePdfExtractor
from ringkas.pdf.exceptions import PdfExtractionError
from ringkas.pdf.models import PdfText


class PdfPlumberAdapter(BasePdfExtractor):
    """Reads the text layer page by page with pdfplumber."""

    def extract(self, pdf_bytes: bytes) -> PdfText:
        self.ensure_not_empty(pdf_bytes)
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [page.extract_text() for page in pdf.pages]
        except PDFPasswordIncorrect as exc:
            raise PdfExtractionError("PDF is password protected") from exc
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber could not read the PDF: {exc}") from exc

        result = PdfText.from_pages(pages)
        Log.debug("pdfplumber extraction", pages=result.page_count, blank=result.blank_pages)
        return result

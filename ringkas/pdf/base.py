from abc import ABC, abstractmethod

from ringkas.pdf.exceptions import PdfExtractionError
from ringkas.pdf.models import PdfText


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> PdfText:
        """Extract the text layer of an uploaded PDF.

        Args:
            pdf_bytes: Raw PDF file content.

        Raises:
            PdfExtractionError: if the upload is empty, unreadable or locked.
        """

    @staticmethod
    def ensure_not_empty(pdf_bytes: bytes) -> None:
        if not pdf_bytes:
            raise PdfExtractionError("Uploaded PDF is empty")

from typing import ClassVar

from ringkas.config.settings import Settings
from ringkas.logging.logger import Log
from ringkas.pdf.base import BasePdfExtractor
from ringkas.pdf.pdfplumber_adapter import PdfPlumberAdapter
from ringkas.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Creates the PDF extractor named by ``settings.pdf_engine``."""

    ADAPTERS: ClassVar[dict[str, type[BasePdfExtractor]]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.strip().lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {sorted(cls.ADAPTERS)}"
            )
        Log.info(f"Using PDF engine {engine}")
        return adapter_cls()

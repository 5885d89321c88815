import io
import json
from collections.abc import Callable
from unittest.mock import AsyncMock, MagicMock

import pytest
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from ringkas.llm.models import GenerationResponse, Message


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.drawString(72, 720, "Laporan keuangan kuartal pertama")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.drawString(72, 720, "Halaman pertama")
    c.showPage()
    c.drawString(72, 720, "Halaman kedua")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.showPage()
    c.save()
    return buf.getvalue()


def _structured_response(
    payload: dict[str, object],
    tool_messages: list[Message] | None = None,
) -> GenerationResponse:
    text = json.dumps(payload, ensure_ascii=False)
    history = [Message(role="user", content="prompt"), *(tool_messages or [])]
    history.append(Message(role="assistant", content=text))
    return GenerationResponse(text=text, history=history)


@pytest.fixture()
def make_response() -> Callable[..., GenerationResponse]:
    """Build a GenerationResponse whose text is ``payload`` as JSON."""
    return _structured_response


@pytest.fixture()
def model_client() -> MagicMock:
    """Model client stub whose ``generate`` returns a fixed summary."""
    client = MagicMock()
    client.generate = AsyncMock(
        return_value=_structured_response({"output": "Ringkasan.", "answer": None})
    )
    return client

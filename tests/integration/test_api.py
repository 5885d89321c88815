from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from ringkas.api.app import create_app
from ringkas.config.settings import Settings
from ringkas.llm.example_client_adapter import ExampleClientAdapter
from ringkas.llm.exceptions import ModelInvocationError
from ringkas.pdf.pdfplumber_adapter import PdfPlumberAdapter
from ringkas.processing.processor import build_processor


def _client(responses: dict | None = None, **settings_overrides) -> TestClient:  # type: ignore[no-untyped-def]
    settings = Settings(llm_provider="example", **settings_overrides)
    processor = build_processor(settings, client=ExampleClientAdapter(responses))
    app = create_app(settings, processor=processor, pdf_extractor=PdfPlumberAdapter())
    return TestClient(app)


@pytest.mark.integration
class TestHealth:
    def test_health(self) -> None:
        response = _client().get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


@pytest.mark.integration
class TestProcessEndpoint:
    def test_summary_of_literal_text(self) -> None:
        client = _client({"processing_result": {"output": "Ringkas.", "answer": None}})

        response = client.post("/api/process", json={
            "text": "Kalimat satu. Kalimat dua. Kalimat tiga.",
            "outputFormat": "summary",
        })

        assert response.status_code == 200
        body = response.json()
        assert body["output"] == "Ringkas."
        assert body["wordCountOriginal"] == 6
        assert body["wordCountSummary"] == 1
        assert body["reductionPercentage"] == 83
        assert body["sourceKind"] == "literal"
        assert body["outputFormat"] == "summary"
        assert body["answer"] is None
        assert body["formatIssues"] == []

    def test_key_points_report_foreign_bullets(self) -> None:
        client = _client({"processing_result": {"output": "* Poin satu", "answer": None}})
        response = client.post("/api/process", json={
            "text": "Teks sumber.",
            "outputFormat": "keyPoints",
            "outputLanguage": "english",
        })
        assert response.status_code == 200
        assert response.json()["formatIssues"] == ["* Poin satu"]

    def test_missing_input_is_bad_request(self) -> None:
        response = _client().post("/api/process", json={"text": "", "url": "  "})
        assert response.status_code == 400
        assert response.json() == {
            "error": "No text to process. Please provide text or a valid URL."
        }

    def test_unknown_format_is_rejected(self) -> None:
        response = _client().post("/api/process", json={"text": "x", "outputFormat": "poem"})
        assert response.status_code == 422

    def test_model_failure_is_bad_gateway(self) -> None:
        settings = Settings(llm_provider="example")
        processor = MagicMock()
        processor.process = AsyncMock(side_effect=ModelInvocationError("AI returned empty response"))
        app = create_app(settings, processor=processor, pdf_extractor=PdfPlumberAdapter())

        response = TestClient(app).post("/api/process", json={"text": "Teks."})

        assert response.status_code == 502
        assert response.json() == {"error": "AI returned empty response"}

    def test_server_side_errors_are_logged_with_traceback(self) -> None:
        settings = Settings(llm_provider="example")
        processor = MagicMock()
        error = ModelInvocationError("AI returned empty response")
        processor.process = AsyncMock(side_effect=error)
        app = create_app(settings, processor=processor, pdf_extractor=PdfPlumberAdapter())

        with patch("ringkas.api.errors.Log") as log:
            TestClient(app).post("/api/process", json={"text": "Teks."})

        log.exception.assert_called_once()
        assert log.exception.call_args.kwargs["exc_info"] is error
        assert log.exception.call_args.kwargs["status"] == 502
        log.error.assert_not_called()

    def test_client_errors_are_logged_without_traceback(self) -> None:
        with patch("ringkas.api.errors.Log") as log:
            _client().post("/api/process", json={"text": "", "url": "  "})

        log.error.assert_called_once()
        assert log.error.call_args.kwargs["status"] == 400
        log.exception.assert_not_called()


@pytest.mark.integration
class TestAnswerEndpoint:
    def test_answers_question(self) -> None:
        client = _client({"answer_question_result": {"answer": "Jakarta."}})
        response = client.post("/api/answer", json={
            "sourceText": "Ibu kota Indonesia adalah Jakarta.",
            "question": "Apa ibu kota Indonesia?",
        })
        assert response.status_code == 200
        assert response.json() == {"answer": "Jakarta."}

    def test_blank_question_is_bad_request(self) -> None:
        response = _client().post("/api/answer", json={"sourceText": "Teks.", "question": " "})
        assert response.status_code == 400


@pytest.mark.integration
class TestSentimentEndpoint:
    def test_classifies_text(self) -> None:
        client = _client({
            "sentiment_result": {"sentiment": "Positive", "explanation": "Nada teks gembira."}
        })
        response = client.post("/api/sentiment", json={"text": "Saya senang sekali!"})
        assert response.status_code == 200
        assert response.json() == {"sentiment": "Positive", "explanation": "Nada teks gembira."}

    def test_invalid_label_is_bad_gateway(self) -> None:
        client = _client({"sentiment_result": {"sentiment": "Happy", "explanation": "?"}})
        response = client.post("/api/sentiment", json={"text": "Saya senang sekali!"})
        assert response.status_code == 502


@pytest.mark.integration
class TestPdfEndpoint:
    def test_extracts_text(self, sample_pdf_bytes: bytes) -> None:
        response = _client().post(
            "/api/pdf",
            files={"file": ("laporan.pdf", sample_pdf_bytes, "application/pdf")},
        )
        assert response.status_code == 200
        body = response.json()
        assert "Laporan keuangan kuartal pertama" in body["text"]
        assert body["wordCount"] == 4
        assert body["pageCount"] == 1
        assert body["fileName"] == "laporan.pdf"

    def test_unreadable_pdf_is_unprocessable(self) -> None:
        response = _client().post(
            "/api/pdf",
            files={"file": ("rusak.pdf", b"bukan pdf", "application/pdf")},
        )
        assert response.status_code == 422
        assert "error" in response.json()

    def test_oversized_upload_is_rejected(self, sample_pdf_bytes: bytes) -> None:
        client = _client(max_upload_bytes=16)
        response = client.post(
            "/api/pdf",
            files={"file": ("besar.pdf", sample_pdf_bytes, "application/pdf")},
        )
        assert response.status_code == 413

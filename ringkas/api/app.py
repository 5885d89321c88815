from fastapi import APIRouter, FastAPI, File, HTTPException, UploadFile
from starlette.concurrency import run_in_threadpool

from ringkas.api.errors import register_error_handlers
from ringkas.api.schemas import (
    AnswerRequestBody,
    AnswerResponseBody,
    PdfTextResponseBody,
    ProcessRequestBody,
    ProcessResponseBody,
    SentimentRequestBody,
    SentimentResponseBody,
)
from ringkas.config.settings import Settings
from ringkas.logging.logger import Log
from ringkas.pdf.base import BasePdfExtractor
from ringkas.pdf.factory import PdfExtractorFactory
from ringkas.processing.processor import TextProcessor, build_processor


def build_router(
    processor: TextProcessor,
    pdf_extractor: BasePdfExtractor,
    settings: Settings,
) -> APIRouter:
    router = APIRouter()

    @router.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @router.post("/api/process", response_model=ProcessResponseBody)
    async def process(body: ProcessRequestBody) -> ProcessResponseBody:
        result = await processor.process(body.to_domain())
        return ProcessResponseBody.from_result(result)

    @router.post("/api/answer", response_model=AnswerResponseBody)
    async def answer(body: AnswerRequestBody) -> AnswerResponseBody:
        result = await processor.answer_question(
            body.source_text,
            body.question,
            body.output_language,
        )
        return AnswerResponseBody.from_result(result)

    @router.post("/api/sentiment", response_model=SentimentResponseBody)
    async def sentiment(body: SentimentRequestBody) -> SentimentResponseBody:
        result = await processor.analyze_sentiment(body.text)
        return SentimentResponseBody.from_result(result)

    @router.post("/api/pdf", response_model=PdfTextResponseBody)
    async def extract_pdf(file: UploadFile = File(...)) -> PdfTextResponseBody:
        data = await file.read(settings.max_upload_bytes + 1)
        if len(data) > settings.max_upload_bytes:
            raise HTTPException(status_code=413, detail="PDF file is too large")
        result = await run_in_threadpool(pdf_extractor.extract, data)
        Log.info(
            "PDF text extracted",
            file=file.filename,
            pages=result.page_count,
            blank_pages=result.blank_pages,
        )
        return PdfTextResponseBody.from_result(result, file.filename)

    return router


def create_app(
    settings: Settings | None = None,
    *,
    processor: TextProcessor | None = None,
    pdf_extractor: BasePdfExtractor | None = None,
) -> FastAPI:
    """Build the FastAPI application; collaborators default to ones built from settings."""
    if settings is None:
        settings = Settings()
    if processor is None:
        processor = build_processor(settings)
    if pdf_extractor is None:
        pdf_extractor = PdfExtractorFactory.create(settings)

    app = FastAPI(title="RingkasAI", description="Indonesian text summarization service")
    register_error_handlers(app)
    app.include_router(build_router(processor, pdf_extractor, settings))
    return app

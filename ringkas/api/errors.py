from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ringkas.api.schemas import ErrorBody
from ringkas.llm.exceptions import ModelInvocationError
from ringkas.logging.logger import Log
from ringkas.pdf.exceptions import PdfExtractionError
from ringkas.processing.exceptions import EmptyInputError, MissingInputError, ProcessingError

ERROR_STATUS: dict[type[Exception], int] = {
    MissingInputError: 400,
    EmptyInputError: 422,
    PdfExtractionError: 422,
    ModelInvocationError: 502,
    ProcessingError: 500,
}


async def _handle_error(request: Request, exc: Exception) -> JSONResponse:
    status = next(
        (code for exc_type, code in ERROR_STATUS.items() if isinstance(exc, exc_type)),
        500,
    )
    message = f"{type(exc).__name__}: {exc}"
    if status >= 500:
        Log.exception(message, exc_info=exc, path=request.url.path, status=status)
    else:
        Log.error(message, path=request.url.path, status=status)
    return JSONResponse(status_code=status, content=ErrorBody(error=str(exc)).model_dump())


def register_error_handlers(app: FastAPI) -> None:
    """Map domain errors to a JSON ``{"error": ...}`` body with a fitting status."""
    for exc_type in ERROR_STATUS:
        app.add_exception_handler(exc_type, _handle_error)

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ringkas.processing.models import FetchMode, OutputLanguage

PdfEngine = Literal["pdfplumber", "pymupdf"]
LlmProvider = Literal[
    "example",
    "openai",
    "openai_compatible",
    "openrouter",
    "groq",
    "together",
    "deepseek",
    "ollama",
]


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8000

    pdf_engine: PdfEngine = "pdfplumber"
    max_upload_bytes: int = 10 * 1024 * 1024

    llm_provider: LlmProvider = "openai"
    llm_api_key: str = ""
    llm_model_name: str = "gpt-4o-mini"
    llm_base_url: str = ""
    llm_timeout_seconds: int = 60
    llm_temperature: float = 0.3
    llm_max_tool_rounds: int = 4

    # "resolver" fetches URLs before calling the model, "model" hands the URL
    # to the model together with the fetch tools.
    pipeline_fetch_mode: FetchMode = FetchMode.RESOLVER
    pipeline_tools: list[str] = ["copyedit"]
    pipeline_tool_choice: str = "auto"

    fetch_timeout_seconds: int = 15
    fetch_user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
    )
    transcript_languages: list[str] = ["id", "en"]

    default_output_language: OutputLanguage = OutputLanguage.INDONESIAN

    @field_validator(
        "pdf_engine",
        "llm_provider",
        "pipeline_fetch_mode",
        "default_output_language",
        mode="before",
    )
    @classmethod
    def _normalize_choice(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("pipeline_tool_choice")
    @classmethod
    def _check_tool_choice(cls, value: str) -> str:
        value = value.strip()
        if value in ("auto", "none", "required") or (
            value.startswith("tool:") and len(value) > len("tool:")
        ):
            return value
        raise ValueError("must be 'auto', 'none', 'required' or 'tool:<name>'")

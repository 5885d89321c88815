from typing import ClassVar

from ringkas.config.settings import Settings
from ringkas.llm.client_base import BaseModelClient
from ringkas.llm.example_client_adapter import ExampleClientAdapter
from ringkas.llm.openai_client_adapter import OpenAIClientAdapter


class ModelClientFactory:
    """Creates the configured model client adapter."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseModelClient:
        """Create a model client from application settings."""
        provider = settings.llm_provider.strip().lower()
        if provider == "example":
            return ExampleClientAdapter()
        return OpenAIClientAdapter(
            api_key=settings.llm_api_key,
            model=settings.llm_model_name,
            timeout_seconds=settings.llm_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
            temperature=settings.llm_temperature,
            max_tool_rounds=settings.llm_max_tool_rounds,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        custom_url = settings.llm_base_url.strip()
        if provider == "openai":
            return custom_url or None
        if provider == "openai_compatible":
            if not custom_url:
                raise ValueError(
                    "llm_base_url is required for llm_provider=openai_compatible"
                )
            return custom_url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return custom_url or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(f"Unknown LLM provider '{provider}'. Choose from: {supported}")

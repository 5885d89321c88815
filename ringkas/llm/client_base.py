from abc import ABC, abstractmethod

from ringkas.llm.models import GenerationResponse
from ringkas.tools.registry import ToolSet


class BaseModelClient(ABC):
    """Contract for provider-specific model clients."""

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        *,
        output_schema: dict[str, object],
        schema_name: str,
        tools: ToolSet | None = None,
        tool_choice: str = "auto",
    ) -> GenerationResponse:
        """Send ``prompt`` and return the final structured response.

        Args:
            prompt: User prompt text.
            output_schema: JSON schema the final answer must follow.
            schema_name: Name of the schema, reported to the provider.
            tools: Tools the model may call before answering.
            tool_choice: ``"auto"``, ``"none"`` or ``"tool:<name>"``.

        Raises:
            ModelInvocationError: if the provider returns nothing usable.
            ModelNetworkError: on connection, timeout or API failures.
        """

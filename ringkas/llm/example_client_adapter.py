"""Example model client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseModelClient and register the provider in ModelClientFactory.
"""

import json
from collections.abc import Mapping

from ringkas.llm.client_base import BaseModelClient
from ringkas.llm.models import GenerationResponse, Message
from ringkas.tools.registry import ToolSet


class ExampleClientAdapter(BaseModelClient):
    """Offline adapter that answers every prompt with a fixed object.

    No network calls and no tool calls. Responses come from ``responses``
    (keyed by schema name) or are derived from the requested schema.
    """

    PLACEHOLDER_TEXT = "Contoh keluaran."

    def __init__(self, responses: Mapping[str, Mapping[str, object]] | None = None) -> None:
        self._responses = dict(responses or {})

    async def generate(
        self,
        prompt: str,
        *,
        output_schema: dict[str, object],
        schema_name: str,
        tools: ToolSet | None = None,
        tool_choice: str = "auto",
    ) -> GenerationResponse:
        _ = tools, tool_choice
        payload = self._responses.get(schema_name)
        if payload is None:
            payload = self._from_schema(output_schema)
        text = json.dumps(payload, ensure_ascii=False)
        return GenerationResponse(
            text=text,
            history=[
                Message(role="user", content=prompt),
                Message(role="assistant", content=text),
            ],
        )

    @classmethod
    def _from_schema(cls, schema: Mapping[str, object]) -> dict[str, object]:
        properties = schema.get("properties", {})
        if not isinstance(properties, Mapping):
            return {}
        return {name: cls._value_for(spec) for name, spec in properties.items()}

    @classmethod
    def _value_for(cls, spec: object) -> object:
        if not isinstance(spec, Mapping):
            return None
        enum = spec.get("enum")
        if isinstance(enum, list) and enum:
            return enum[0]
        kind = spec.get("type")
        if kind == "string" or (isinstance(kind, list) and "string" in kind):
            return cls.PLACEHOLDER_TEXT
        return None

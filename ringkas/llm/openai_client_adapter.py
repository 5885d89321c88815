import json
from typing import Any

import httpx
import openai

from ringkas.llm.client_base import BaseModelClient
from ringkas.llm.exceptions import ModelInvocationError, ModelNetworkError
from ringkas.llm.models import GenerationResponse, Message
from ringkas.logging.logger import Log
from ringkas.tools.exceptions import ToolError
from ringkas.tools.models import ToolInvocationResult
from ringkas.tools.registry import ToolSet


class OpenAIClientAdapter(BaseModelClient):
    """Model client built on the OpenAI-compatible chat completions API.

    Runs the tool-call loop: while the model answers with ``tool_calls`` the
    tools are invoked one after another and their outputs are sent back.
    """

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        base_url: str | None = None,
        temperature: float = 0.3,
        max_tool_rounds: int = 4,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._max_tool_rounds = max_tool_rounds

    async def generate(
        self,
        prompt: str,
        *,
        output_schema: dict[str, object],
        schema_name: str,
        tools: ToolSet | None = None,
        tool_choice: str = "auto",
    ) -> GenerationResponse:
        messages: list[dict[str, Any]] = [{"role": "user", "content": prompt}]
        history = [Message(role="user", content=prompt)]

        choice = tool_choice
        for _ in range(self._max_tool_rounds + 1):
            reply = await self._complete(messages, output_schema, schema_name, tools, choice)
            if not reply.tool_calls:
                if not reply.content:
                    raise ModelInvocationError("AI returned empty response")
                history.append(Message(role="assistant", content=reply.content))
                return GenerationResponse(text=reply.content, history=history)

            if not tools:
                raise ModelInvocationError("AI requested a tool call but no tools were offered")
            messages.append(self._assistant_turn(reply))
            for call in reply.tool_calls:
                result = await self._run_tool(tools, call)
                history.append(Message(role="tool", content=result.output, name=result.name))
                messages.append({
                    "role": "tool",
                    "tool_call_id": call.id,
                    "content": json.dumps({"output": result.output}, ensure_ascii=False),
                })
            # A pinned tool only applies to the first round.
            choice = "auto"

        raise ModelInvocationError(
            f"AI did not answer within {self._max_tool_rounds} tool rounds"
        )

    async def _complete(
        self,
        messages: list[dict[str, Any]],
        output_schema: dict[str, object],
        schema_name: str,
        tools: ToolSet | None,
        tool_choice: str,
    ) -> Any:
        kwargs: dict[str, Any] = {}
        if tools:
            kwargs["tools"] = tools.specs()
            kwargs["tool_choice"] = self._tool_choice_param(tool_choice)
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                temperature=self._temperature,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": schema_name,
                        "strict": True,
                        "schema": output_schema,
                    },
                },
                messages=messages,
                **kwargs,
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ModelNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise ModelNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise ModelInvocationError("AI returned no choices")
        return response.choices[0].message

    @staticmethod
    def _tool_choice_param(tool_choice: str) -> str | dict[str, object]:
        if tool_choice.startswith("tool:"):
            return {"type": "function", "function": {"name": tool_choice[len("tool:"):]}}
        if tool_choice in ("auto", "none", "required"):
            return tool_choice
        raise ValueError(f"Unsupported tool choice '{tool_choice}'")

    @staticmethod
    def _assistant_turn(reply: Any) -> dict[str, Any]:
        return {
            "role": "assistant",
            "content": reply.content,
            "tool_calls": [
                {
                    "id": call.id,
                    "type": "function",
                    "function": {
                        "name": call.function.name,
                        "arguments": call.function.arguments,
                    },
                }
                for call in reply.tool_calls
            ],
        }

    @staticmethod
    async def _run_tool(tools: ToolSet, call: Any) -> ToolInvocationResult:
        name = call.function.name
        try:
            arguments = json.loads(call.function.arguments or "{}")
        except json.JSONDecodeError as exc:
            raise ModelInvocationError(f"AI sent invalid arguments for tool '{name}'") from exc
        if not isinstance(arguments, dict):
            raise ModelInvocationError(f"AI sent non-object arguments for tool '{name}'")

        Log.info(f"AI requested tool {name}")
        try:
            return await tools.invoke(name, arguments)
        except ToolError as exc:
            raise ModelInvocationError(str(exc)) from exc

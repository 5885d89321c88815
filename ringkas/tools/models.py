from dataclasses import dataclass


@dataclass(frozen=True)
class ToolInvocationResult:
    """String returned by one tool call."""

    name: str
    output: str

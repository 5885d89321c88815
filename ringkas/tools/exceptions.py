class ToolError(Exception):
    """Base exception for tool invocation errors."""


class FetchFailureError(ToolError):
    """Raised by a fetcher when a URL or transcript cannot be retrieved.

    Tool wrappers turn it into an in-band failure sentence.
    """


class EmptyContentError(FetchFailureError):
    """Raised when a page was fetched but has no visible text."""


class UnknownToolError(ToolError):
    """Raised when the model calls a tool that is not offered."""


class ToolArgumentError(ToolError):
    """Raised when the model calls a tool with unusable arguments."""

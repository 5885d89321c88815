class ProcessingError(Exception):
    """Base exception for all processing-related errors."""


class MissingInputError(ProcessingError):
    """Raised when a request carries neither text nor a URL."""


class EmptyInputError(ProcessingError):
    """Raised when there is nothing to count or display after resolution."""


class PromptLoadError(ProcessingError):
    """Raised when a bundled prompt template or schema cannot be read."""

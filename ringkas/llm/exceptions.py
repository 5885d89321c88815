class ModelInvocationError(Exception):
    """Raised when the model provider returns no usable structured output."""


class ModelNetworkError(ModelInvocationError):
    """Raised when the provider call fails due to network/infrastructure issues."""

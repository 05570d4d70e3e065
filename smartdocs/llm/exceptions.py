class LlmError(Exception):
    """Raised when a remote language model call fails."""


class LlmResponseError(LlmError):
    """Raised when the model answers with something that is not the requested JSON."""


class LlmNetworkError(LlmError):
    """Raised when the provider call fails due to network, auth or infrastructure issues."""

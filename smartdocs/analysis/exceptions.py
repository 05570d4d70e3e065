class AnalysisError(Exception):
    """Raised when a document cannot be analyzed."""


class AnalysisValidationError(AnalysisError):
    """Raised when a model response does not match the analysis schema."""


class AnalysisNetworkError(AnalysisError):
    """Raised when the analysis provider cannot be reached or rejects the request."""

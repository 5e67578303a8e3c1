class AnalysisError(Exception):
    """Raised when resume analysis fails."""


class AnalysisValidationError(AnalysisError):
    """Raised when the model's result violates the analysis result contract."""


class AnalysisNetworkError(AnalysisError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""

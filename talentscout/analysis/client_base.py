from abc import ABC, abstractmethod

from talentscout.ingestion.models import InlineData


class BaseAnalysisClient(ABC):
    """Contract for provider-specific analysis AI clients."""

    @abstractmethod
    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        seed: int | None,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
        attachment: InlineData | None = None,
    ) -> str:
        """Return provider response as plain text."""

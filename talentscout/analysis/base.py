from abc import ABC, abstractmethod

from talentscout.analysis.models import AnalysisResult
from talentscout.ingestion.models import InlineData


class BaseAnalyzer(ABC):
    """Contract for all resume analysis adapters."""

    @abstractmethod
    def analyze(
        self,
        resume_text: str,
        job_description: str,
        inline_data: InlineData | None = None,
    ) -> AnalysisResult:
        """Critique a resume against a job description and rewrite it.

        Args:
            resume_text: Extracted or pasted resume text.
            job_description: Target job description; may be empty.
            inline_data: Base64 document content for PDFs and images. When
                given, the model reads the document itself.

        Returns:
            Validated AnalysisResult.

        Raises:
            AnalysisError: on any failure.
        """

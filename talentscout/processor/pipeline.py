from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from talentscout.analysis.models import AnalysisResult
from talentscout.ingestion.models import NormalizedPayload, UploadedDocument


@dataclass(slots=True)
class PipelineContext:
    source_path: Path
    job_description: str = ""
    media_type: str | None = None
    document: UploadedDocument | None = None
    payload: NormalizedPayload | None = None
    analysis_result: AnalysisResult | None = None
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError

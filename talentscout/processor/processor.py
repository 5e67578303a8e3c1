from pathlib import Path

from talentscout.analysis.factory import AnalyzerFactory
from talentscout.analysis.models import AnalysisResult
from talentscout.config.settings import Settings
from talentscout.ingestion.factory import DocumentNormalizerFactory
from talentscout.logging.logger import Log
from talentscout.processor.file_loader import FileLoader
from talentscout.processor.pipeline import PipelineContext, PipelineStep
from talentscout.processor.steps import (
    AnalyzeStep,
    CheckUsableContentStep,
    LoadDocumentStep,
    NormalizeDocumentStep,
)


class Processor:
    """Runs one document through the pipeline.

    Pipeline: load -> normalize -> check usable content -> analyze.
    """

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def process(
        self,
        source_path: Path,
        job_description: str = "",
        media_type: str | None = None,
    ) -> AnalysisResult:
        """Analyze the file at ``source_path`` against a job description.

        Any step failure is logged and re-raised unchanged.
        """
        Log.info(f"Processing {source_path}")
        context = PipelineContext(
            source_path=source_path,
            job_description=job_description,
            media_type=media_type,
        )
        for step in self._steps:
            try:
                context = step.run(context)
            except Exception as exc:
                context.error_message = str(exc)
                Log.error(
                    f"{type(step).__name__} failed for {source_path.name}: "
                    f"{context.error_message}"
                )
                raise
        if context.analysis_result is None:
            raise ValueError("Pipeline finished without an analysis result")
        return context.analysis_result


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters."""
    file_loader = FileLoader(max_bytes=settings.max_upload_bytes)
    normalizer = DocumentNormalizerFactory.create(settings)
    analyzer = AnalyzerFactory.create(settings)
    return Processor(
        steps=[
            LoadDocumentStep(file_loader=file_loader),
            NormalizeDocumentStep(normalizer=normalizer),
            CheckUsableContentStep(),
            AnalyzeStep(analyzer=analyzer),
        ]
    )

from talentscout.analysis.base import BaseAnalyzer
from talentscout.ingestion.exceptions import NoUsableContentError
from talentscout.ingestion.normalizer import DocumentNormalizer
from talentscout.logging.logger import Log
from talentscout.processor.file_loader import FileLoader
from talentscout.processor.pipeline import PipelineContext, PipelineStep


class LoadDocumentStep(PipelineStep):
    def __init__(self, file_loader: FileLoader) -> None:
        self._file_loader = file_loader

    def run(self, context: PipelineContext) -> PipelineContext:
        context.document = self._file_loader.load(context.source_path, context.media_type)
        Log.info(
            f"Loaded {len(context.document.raw_bytes)} bytes from {context.source_path.name}"
        )
        return context


class NormalizeDocumentStep(PipelineStep):
    def __init__(self, normalizer: DocumentNormalizer) -> None:
        self._normalizer = normalizer

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.document is None:
            raise ValueError("PipelineContext.document must be set before normalization")
        context.payload = self._normalizer.normalize(context.document)
        return context


class CheckUsableContentStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        if context.payload is None or not context.payload.has_usable_content:
            raise NoUsableContentError(
                f"{context.source_path.name} contains no usable text or binary content"
            )
        return context


class AnalyzeStep(PipelineStep):
    def __init__(self, analyzer: BaseAnalyzer) -> None:
        self._analyzer = analyzer

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.payload is None:
            raise ValueError("PipelineContext.payload must be set before analysis")
        context.analysis_result = self._analyzer.analyze(
            context.payload.extracted_text,
            context.job_description,
            context.payload.inline_data,
        )
        return context

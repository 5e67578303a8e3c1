"""Tests for the Processor pipeline and its steps."""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from talentscout.analysis.base import BaseAnalyzer
from talentscout.analysis.validator import validate_and_build
from talentscout.config.settings import Settings
from talentscout.ingestion.exceptions import ExtractionError, NoUsableContentError
from talentscout.ingestion.models import (
    IMAGE_SENTINEL_TEXT,
    NormalizedPayload,
    UploadedDocument,
)
from talentscout.ingestion.normalizer import DocumentNormalizer
from talentscout.processor.file_loader import FileLoader
from talentscout.processor.pipeline import PipelineContext, PipelineStep
from talentscout.processor.processor import Processor, build_processor
from talentscout.processor.steps import (
    AnalyzeStep,
    CheckUsableContentStep,
    LoadDocumentStep,
    NormalizeDocumentStep,
)


def _context(**kwargs: Any) -> PipelineContext:
    return PipelineContext(source_path=Path("/tmp/resume.pdf"), **kwargs)


class TestLoadDocumentStep:
    def test_sets_document(self) -> None:
        loader = MagicMock(spec=FileLoader)
        document = UploadedDocument("resume.pdf", "application/pdf", b"%PDF")
        loader.load.return_value = document
        context = LoadDocumentStep(loader).run(_context(media_type="application/pdf"))
        loader.load.assert_called_once_with(Path("/tmp/resume.pdf"), "application/pdf")
        assert context.document == document


class TestNormalizeDocumentStep:
    def test_sets_payload(self) -> None:
        normalizer = MagicMock(spec=DocumentNormalizer)
        payload = NormalizedPayload(extracted_text="Hello", media_type="text/plain")
        normalizer.normalize.return_value = payload
        document = UploadedDocument("notes.txt", "text/plain", b"Hello")
        context = NormalizeDocumentStep(normalizer).run(_context(document=document))
        assert context.payload == payload

    def test_requires_document(self) -> None:
        with pytest.raises(ValueError, match="document must be set"):
            NormalizeDocumentStep(MagicMock(spec=DocumentNormalizer)).run(_context())


class TestCheckUsableContentStep:
    def test_passes_with_text(self) -> None:
        payload = NormalizedPayload(extracted_text="Alice", media_type="text/plain")
        CheckUsableContentStep().run(_context(payload=payload))

    def test_passes_with_binary_only(self) -> None:
        payload = NormalizedPayload(
            extracted_text="", media_type="application/pdf", encoded_binary="JVBER"
        )
        CheckUsableContentStep().run(_context(payload=payload))

    @pytest.mark.parametrize("text", ["", "  \n", IMAGE_SENTINEL_TEXT])
    def test_rejects_without_usable_content(self, text: str) -> None:
        payload = NormalizedPayload(extracted_text=text, media_type="text/plain")
        with pytest.raises(NoUsableContentError, match="resume.pdf"):
            CheckUsableContentStep().run(_context(payload=payload))


class TestAnalyzeStep:
    def test_passes_text_and_inline_data(self, analysis_payload: dict[str, Any]) -> None:
        analyzer = MagicMock(spec=BaseAnalyzer)
        analyzer.analyze.return_value = validate_and_build(analysis_payload)
        payload = NormalizedPayload(
            extracted_text="", media_type="image/png", encoded_binary="iVBOR"
        )
        context = AnalyzeStep(analyzer).run(_context(payload=payload, job_description="job"))
        analyzer.analyze.assert_called_once_with("", "job", payload.inline_data)
        assert context.analysis_result is analyzer.analyze.return_value


class TestProcessor:
    def test_runs_steps_in_order(self, analysis_payload: dict[str, Any]) -> None:
        calls: list[str] = []
        result = validate_and_build(analysis_payload)

        class Recording(PipelineStep):
            def __init__(self, name: str) -> None:
                self._name = name

            def run(self, context: PipelineContext) -> PipelineContext:
                calls.append(self._name)
                if self._name == "last":
                    context.analysis_result = result
                return context

        processor = Processor(steps=[Recording("first"), Recording("last")])
        assert processor.process(Path("/tmp/cv.pdf"), "job") is result
        assert calls == ["first", "last"]

    def test_reraises_step_error_and_stops(self) -> None:
        failing = MagicMock(spec=PipelineStep)
        failing.run.side_effect = ExtractionError("docx extraction failed")
        after = MagicMock(spec=PipelineStep)
        processor = Processor(steps=[failing, after])
        with pytest.raises(ExtractionError, match="docx extraction failed"):
            processor.process(Path("/tmp/resume.docx"))
        after.run.assert_not_called()

    def test_requires_analysis_result(self) -> None:
        step = MagicMock(spec=PipelineStep)
        step.run.side_effect = lambda context: context
        with pytest.raises(ValueError, match="without an analysis result"):
            Processor(steps=[step]).process(Path("/tmp/cv.pdf"))


class TestBuildProcessor:
    def test_example_provider_end_to_end(self, tmp_path: Path) -> None:
        path = tmp_path / "notes.txt"
        path.write_text("Alice Smith\nEngineer", encoding="utf-8")
        processor = build_processor(Settings(_env_file=None, analysis_provider="example"))
        result = processor.process(path, "Python developer")
        assert result.summary.startswith("Example analysis")

    def test_blank_file_is_rejected_before_analysis(self, tmp_path: Path) -> None:
        path = tmp_path / "blank.txt"
        path.write_text("   ", encoding="utf-8")
        processor = build_processor(Settings(_env_file=None, analysis_provider="example"))
        with pytest.raises(NoUsableContentError):
            processor.process(path)

    def test_result_serializes_to_json(self, tmp_path: Path) -> None:
        path = tmp_path / "notes.txt"
        path.write_text("Alice", encoding="utf-8")
        processor = build_processor(Settings(_env_file=None, analysis_provider="example"))
        assert json.loads(json.dumps(asdict(processor.process(path))))["overall_score"] == 0

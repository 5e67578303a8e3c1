from pathlib import Path

import pytest

from talentscout.config.settings import Settings
from talentscout.ingestion.exceptions import ExtractionError, NoUsableContentError
from talentscout.processor.processor import build_processor


@pytest.mark.integration
class TestProcessorPipeline:
    def test_pdf_on_disk_is_analyzed(
        self, test_settings: Settings, sample_pdf_on_disk: Path
    ) -> None:
        result = build_processor(test_settings).process(sample_pdf_on_disk, "Engineer")
        assert result.summary.startswith("Example analysis")

    def test_image_without_binary_channel_is_rejected(
        self, test_settings: Settings, tmp_path: Path, png_bytes: bytes
    ) -> None:
        # declared as text: undecodable PNG bytes fail text decoding
        path = tmp_path / "photo.png"
        path.write_bytes(png_bytes)
        processor = build_processor(test_settings)
        with pytest.raises(ExtractionError, match="decoding"):
            processor.process(path, media_type="text/plain")

    def test_blank_text_file_is_rejected(self, test_settings: Settings, tmp_path: Path) -> None:
        path = tmp_path / "blank.txt"
        path.write_text("\n\n", encoding="utf-8")
        with pytest.raises(NoUsableContentError):
            build_processor(test_settings).process(path)

from pathlib import Path

import pytest

from talentscout.config.settings import Settings


@pytest.fixture(params=["pdfplumber", "pymupdf"])
def test_settings(request: pytest.FixtureRequest) -> Settings:
    return Settings(
        _env_file=None,
        pdf_engine=request.param,
        analysis_provider="example",
        extraction_timeout_seconds=30.0,
    )


@pytest.fixture()
def sample_pdf_on_disk(tmp_path: Path, sample_pdf_bytes: bytes) -> Path:
    path = tmp_path / "sample.pdf"
    path.write_bytes(sample_pdf_bytes)
    return path

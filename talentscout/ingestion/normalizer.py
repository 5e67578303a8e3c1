"""Turns an uploaded document into the text/binary payload consumed by analysis.

Processing flow:
1. Classify the document by declared media type, falling back to filename suffix.
2. Images skip text extraction and carry a fixed sentinel as their text.
3. Other documents run their strategy's extractor on a daemon thread under a
   timeout. A failure is tolerated only when the document also travels as
   inline binary (PDF), otherwise it aborts the whole normalization.
4. PDFs and images are base64-encoded and any data-URI prefix is dropped; an
   encoding failure is always fatal.
"""

import threading
from collections.abc import Callable, Mapping

from talentscout.ingestion.classifier import base_media_type, carries_binary, classify
from talentscout.ingestion.encoding import encode_base64, strip_data_uri_prefix
from talentscout.ingestion.exceptions import (
    EncodingError,
    ExtractionError,
    ExtractionTimeoutError,
)
from talentscout.ingestion.extractors import BaseTextExtractor
from talentscout.ingestion.models import (
    IMAGE_SENTINEL_TEXT,
    ExtractionStrategy,
    NormalizedPayload,
    UploadedDocument,
)
from talentscout.logging.logger import Log


class DocumentNormalizer:
    """Stateless normalizer; safe to share between concurrent callers."""

    def __init__(
        self,
        *,
        extractors: Mapping[ExtractionStrategy, BaseTextExtractor],
        extraction_timeout_seconds: float | None = 30.0,
        encoder: Callable[[bytes], str] = encode_base64,
    ) -> None:
        self._extractors = dict(extractors)
        self._timeout = extraction_timeout_seconds
        self._encoder = encoder

    def normalize(self, document: UploadedDocument) -> NormalizedPayload:
        """Build the payload for one document.

        Raises:
            ExtractionError: text extraction failed and no binary channel exists.
            EncodingError: the binary channel was required but not produced.
        """
        strategy = classify(document.declared_media_type, document.name)
        media_type = base_media_type(document.declared_media_type)
        multimodal = carries_binary(media_type)
        Log.info(
            f"Normalizing '{document.name}' ({media_type or 'no media type'}, "
            f"{len(document.raw_bytes)} bytes) as {strategy.value}"
        )

        if strategy is ExtractionStrategy.OPAQUE_IMAGE:
            extracted_text = IMAGE_SENTINEL_TEXT
        else:
            extracted_text = self._extract_text(
                strategy, document, tolerate_failure=multimodal
            )

        encoded_binary = self._encode(document) if multimodal else None

        Log.info(
            f"Normalized '{document.name}': {len(extracted_text)} chars of text, "
            f"binary payload {'attached' if encoded_binary else 'omitted'}"
        )
        return NormalizedPayload(
            extracted_text=extracted_text,
            media_type=media_type,
            encoded_binary=encoded_binary,
        )

    def _extract_text(
        self,
        strategy: ExtractionStrategy,
        document: UploadedDocument,
        *,
        tolerate_failure: bool,
    ) -> str:
        extractor = self._extractors.get(strategy)
        if extractor is None:
            raise ExtractionError(f"No text extractor configured for {strategy.value}")
        try:
            return self._run_extractor(extractor, strategy, document.raw_bytes)
        except ExtractionError as exc:
            if not tolerate_failure:
                Log.error(f"Text extraction failed for '{document.name}': {exc}")
                raise
            Log.warning(
                f"Text extraction failed for '{document.name}', "
                f"relying on binary payload: {exc}"
            )
            return ""

    def _run_extractor(
        self,
        extractor: BaseTextExtractor,
        strategy: ExtractionStrategy,
        raw_bytes: bytes,
    ) -> str:
        if self._timeout is None:
            return self._call_extractor(extractor, strategy, raw_bytes)

        outcome: dict[str, str | ExtractionError] = {}
        finished = threading.Event()

        def run() -> None:
            try:
                outcome["text"] = self._call_extractor(extractor, strategy, raw_bytes)
            except ExtractionError as exc:
                outcome["error"] = exc
            finally:
                finished.set()

        # an abandoned extractor must not block interpreter exit
        threading.Thread(target=run, name=f"extract-{strategy.value}", daemon=True).start()
        if not finished.wait(self._timeout):
            raise ExtractionTimeoutError(
                f"{strategy.value} extraction timed out after {self._timeout}s"
            )

        error = outcome.get("error")
        if isinstance(error, ExtractionError):
            raise error
        text = outcome.get("text")
        if not isinstance(text, str):
            raise ExtractionError(f"{strategy.value} extraction did not complete")
        return text

    @staticmethod
    def _call_extractor(
        extractor: BaseTextExtractor,
        strategy: ExtractionStrategy,
        raw_bytes: bytes,
    ) -> str:
        try:
            return extractor.extract(raw_bytes)
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(f"{strategy.value} extraction failed: {exc}") from exc

    def _encode(self, document: UploadedDocument) -> str:
        try:
            encoded = strip_data_uri_prefix(self._encoder(document.raw_bytes))
        except EncodingError:
            Log.error(f"Binary encoding failed for '{document.name}'")
            raise
        except Exception as exc:
            Log.error(f"Binary encoding failed for '{document.name}': {exc}")
            raise EncodingError(f"binary encoding failed: {exc}") from exc
        if not encoded:
            raise EncodingError(f"binary encoding of '{document.name}' produced no data")
        return encoded

"""Holds the single currently-selected document for an interactive front end.

Lifecycle: EMPTY -> SELECTING -> READY -> CLEARED. Each selection runs
normalization off the event loop; only the most recent selection may commit
its result, so a slow upload that was superseded or cleared never overwrites
newer state. A failed selection leaves the previously committed document
untouched.
"""

import asyncio
from enum import Enum

from talentscout.ingestion.exceptions import NoUsableContentError, UploadError
from talentscout.ingestion.models import NormalizedPayload, UploadedDocument
from talentscout.ingestion.normalizer import DocumentNormalizer
from talentscout.logging.logger import Log


class UploadState(str, Enum):
    EMPTY = "empty"
    SELECTING = "selecting"
    READY = "ready"
    CLEARED = "cleared"


class UploadSession:
    """Single-slot, single-flight owner of the selected document."""

    def __init__(self, normalizer: DocumentNormalizer) -> None:
        self._normalizer = normalizer
        self._state = UploadState.EMPTY
        self._restore_state = UploadState.EMPTY
        self._document: UploadedDocument | None = None
        self._payload: NormalizedPayload | None = None
        self._generation = 0

    @property
    def state(self) -> UploadState:
        return self._state

    @property
    def document(self) -> UploadedDocument | None:
        return self._document

    @property
    def payload(self) -> NormalizedPayload | None:
        return self._payload

    async def select(self, document: UploadedDocument) -> NormalizedPayload | None:
        """Normalize and commit a newly selected document.

        Returns:
            The committed payload, or None if a later select/clear superseded
            this call before it finished.

        Raises:
            UploadError: normalization of the current selection failed.
        """
        self._generation += 1
        generation = self._generation
        if self._state is not UploadState.SELECTING:
            self._restore_state = self._state
        self._state = UploadState.SELECTING
        Log.info(f"Selected '{document.name}' (selection {generation})")

        try:
            payload = await asyncio.to_thread(self._normalizer.normalize, document)
        except asyncio.CancelledError:
            if generation == self._generation:
                self._state = self._restore_state
                Log.warning(f"Selection {generation} of '{document.name}' was cancelled")
            raise
        except Exception as exc:
            if generation != self._generation:
                Log.warning(f"Ignoring failure of superseded selection {generation}: {exc}")
                return None
            self._state = self._restore_state
            Log.error(f"Could not process '{document.name}': {exc}")
            raise UploadError(f"could not process file: {exc}") from exc

        if generation != self._generation:
            Log.info(f"Discarding stale result of superseded selection {generation}")
            return None

        self._document = document
        self._payload = payload
        self._state = UploadState.READY
        return payload

    async def paste_text(self, text: str) -> NormalizedPayload | None:
        """Use manually pasted resume text in place of an uploaded file."""
        return await self.select(UploadedDocument.from_text(text))

    def clear(self) -> None:
        """Drop the selected document and invalidate any in-flight selection."""
        self._generation += 1
        self._document = None
        self._payload = None
        self._state = UploadState.CLEARED
        Log.info("Upload cleared")

    def analysis_input(self) -> NormalizedPayload:
        """Return the committed payload, refusing one the model could not use.

        Raises:
            NoUsableContentError: nothing is committed or it carries no content.
        """
        if self._state is UploadState.SELECTING:
            raise NoUsableContentError("a document is still being processed")
        if self._state is not UploadState.READY or self._payload is None:
            raise NoUsableContentError("no document has been processed")
        if not self._payload.has_usable_content:
            raise NoUsableContentError(
                f"'{self._document.name if self._document else 'document'}' "
                "contains no usable text or binary content"
            )
        return self._payload

import base64
import binascii

from talentscout.ingestion.exceptions import EncodingError

_DATA_URI_MARKER = ";base64,"


def strip_data_uri_prefix(value: str) -> str:
    """Drop a leading 'data:<type>;base64,' declaration, leaving the bare payload."""
    if value.startswith("data:") and _DATA_URI_MARKER in value:
        return value.split(_DATA_URI_MARKER, 1)[1]
    return value


def encode_base64(raw_bytes: bytes) -> str:
    """Encode document bytes for inline transport to the analysis model.

    Raises:
        EncodingError: if there is nothing to encode or encoding fails.
    """
    if not raw_bytes:
        raise EncodingError("cannot encode an empty file")
    try:
        return base64.b64encode(raw_bytes).decode("ascii")
    except (TypeError, binascii.Error) as exc:
        raise EncodingError(f"base64 encoding failed: {exc}") from exc

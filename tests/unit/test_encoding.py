import pytest

from talentscout.ingestion.encoding import encode_base64, strip_data_uri_prefix
from talentscout.ingestion.exceptions import EncodingError


class TestEncodeBase64:
    def test_encodes_bytes(self) -> None:
        assert encode_base64(b"Hello") == "SGVsbG8="

    def test_result_has_no_data_uri_prefix(self) -> None:
        assert not encode_base64(b"%PDF-1.4").startswith("data:")

    def test_empty_bytes_raise(self) -> None:
        with pytest.raises(EncodingError, match="empty"):
            encode_base64(b"")


class TestStripDataUriPrefix:
    def test_strips_prefix(self) -> None:
        assert strip_data_uri_prefix("data:application/pdf;base64,JVBERi0=") == "JVBERi0="

    def test_leaves_bare_payload(self) -> None:
        assert strip_data_uri_prefix("JVBERi0=") == "JVBERi0="

    def test_leaves_non_base64_data_uri(self) -> None:
        assert strip_data_uri_prefix("data:text/plain,hello") == "data:text/plain,hello"

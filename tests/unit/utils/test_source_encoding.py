"""Unit tests for markdown source decoding."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from md2confluence.utils.encoding import detect_encoding, ensure_text, read_text_with_encoding_detection


@pytest.mark.unit
class TestReadTextWithEncodingDetection:
    """Tests for read_text_with_encoding_detection."""

    def test_utf8_decoded_first(self) -> None:
        """Valid UTF-8 is decoded without consulting chardet."""
        with patch("md2confluence.utils.encoding.detect_encoding") as mock_detect:
            assert read_text_with_encoding_detection("café *bold*".encode("utf-8")) == "café *bold*"
            mock_detect.assert_not_called()

    def test_detected_encoding_used(self) -> None:
        """A confident chardet result is used when UTF-8 fails."""
        data = "Привет".encode("cp1251")
        with patch("md2confluence.utils.encoding.detect_encoding", return_value="cp1251"):
            assert read_text_with_encoding_detection(data) == "Привет"

    def test_latin1_fallback(self) -> None:
        """Latin-1 decodes anything when detection gives up."""
        data = "naïve".encode("latin-1")
        with patch("md2confluence.utils.encoding.detect_encoding", return_value=None):
            assert read_text_with_encoding_detection(data) == "naïve"

    def test_unknown_detected_encoding_falls_through(self) -> None:
        """A detected codec Python does not know is skipped."""
        data = "naïve".encode("latin-1")
        with patch("md2confluence.utils.encoding.detect_encoding", return_value="no-such-codec"):
            assert read_text_with_encoding_detection(data) == "naïve"

    def test_replacement_when_all_fail(self) -> None:
        """Undecodable input falls back to UTF-8 with replacement."""
        with patch("md2confluence.utils.encoding.detect_encoding", return_value=None):
            text = read_text_with_encoding_detection(b"ab\xff", fallback_encodings=("ascii",))
        assert text == "ab�"


@pytest.mark.unit
class TestDetectEncoding:
    """Tests for detect_encoding."""

    def test_low_confidence_rejected(self) -> None:
        """Results below the threshold are discarded."""
        detected = {"encoding": "ascii", "confidence": 0.1}
        with patch("md2confluence.utils.encoding.chardet.detect", return_value=detected):
            assert detect_encoding(b"abc") is None

    def test_confident_result_returned(self) -> None:
        """Results above the threshold are returned."""
        with patch(
            "md2confluence.utils.encoding.chardet.detect", return_value={"encoding": "windows-1252", "confidence": 0.9}
        ):
            assert detect_encoding(b"abc") == "windows-1252"

    def test_no_encoding_detected(self) -> None:
        """A missing encoding gives None."""
        with patch("md2confluence.utils.encoding.chardet.detect", return_value={"encoding": None, "confidence": 0.0}):
            assert detect_encoding(b"") is None


@pytest.mark.unit
class TestEnsureText:
    """Tests for ensure_text."""

    def test_str_returned_unchanged(self) -> None:
        """Text input is returned as the same object."""
        source = "# Title"
        assert ensure_text(source) is source

    def test_bytes_decoded(self) -> None:
        """Bytes and bytearrays are decoded."""
        assert ensure_text(b"# Title") == "# Title"
        assert ensure_text(bytearray(b"# Title")) == "# Title"

    def test_other_types_rejected(self) -> None:
        """Non-text input raises TypeError."""
        with pytest.raises(TypeError, match="str or bytes"):
            ensure_text(42)  # type: ignore[arg-type]

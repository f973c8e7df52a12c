"""Tests for the error taxonomy."""

from uuid_compactor import (
    CompactUuidError,
    DecodeError,
    FormatError,
    LengthError,
    WordRangeError,
)


class TestExceptionHierarchy:
    """Tests for exception base classes."""

    def test_all_are_value_errors(self) -> None:
        """Test that every error can be caught as ValueError."""
        for error_class in (FormatError, DecodeError, LengthError, WordRangeError):
            assert issubclass(error_class, CompactUuidError)
            assert issubclass(error_class, ValueError)

    def test_decode_error_is_format_error(self) -> None:
        """Test that DecodeError is a kind of FormatError."""
        assert issubclass(DecodeError, FormatError)
        assert not issubclass(LengthError, FormatError)


class TestExceptionMessages:
    """Tests for exception messages."""

    def test_format_error_message(self) -> None:
        """Test the default FormatError message."""
        assert str(FormatError("xyz")) == "Not a compact uuid string: xyz"

    def test_format_error_custom_message(self) -> None:
        """Test FormatError with an explicit message."""
        error = FormatError("xyz", "Not a canonical uuid string: xyz")

        assert str(error) == "Not a canonical uuid string: xyz"
        assert error.text == "xyz"

    def test_decode_error_message(self) -> None:
        """Test that DecodeError uses the FormatError message."""
        error = DecodeError("xy%", "base64")

        assert str(error) == "Not a compact uuid string: xy%"
        assert error.codec == "base64"

    def test_length_error_message(self) -> None:
        """Test the LengthError message."""
        assert str(LengthError(26, 3)) == "Expecting a compact uuid string of length 26"

    def test_word_range_error_message(self) -> None:
        """Test the WordRangeError message."""
        error = WordRangeError("high", 2**64)

        assert "Word 'high' does not fit in 64 bits" in str(error)
        assert error.word == 2**64

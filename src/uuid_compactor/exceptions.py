"""Errors raised when compacting or expanding UUIDs."""


class CompactUuidError(ValueError):
    """Base exception for uuid-compactor errors."""

    pass


class FormatError(CompactUuidError):
    """Input is not a compact uuid string, or not a canonical UUID string."""

    def __init__(self, text: str, message: str | None = None):
        self.text = text
        super().__init__(message or f"Not a compact uuid string: {text}")


class DecodeError(FormatError):
    """Input contains a character outside the codec alphabet."""

    def __init__(self, text: str, codec: str | None = None):
        self.codec = codec
        super().__init__(text)


class LengthError(CompactUuidError):
    """Input length does not match the length the entry point requires."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expecting a compact uuid string of length {expected}")


class WordRangeError(CompactUuidError):
    """A 64-bit word is outside both the signed and the unsigned range."""

    def __init__(self, name: str, word: int):
        self.name = name
        self.word = word
        super().__init__(
            f"Word '{name}' does not fit in 64 bits: {word}. "
            f"Expected a value in [-2**63, 2**64)."
        )

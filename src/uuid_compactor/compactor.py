"""UUID compactor."""

import logging
import struct
from uuid import UUID

from uuid_compactor.codecs import (
    BASE32,
    BASE64,
    COMPACT32_LEN,
    COMPACT64_LEN,
    ByteTextCodec,
    CodecRegistry,
)
from uuid_compactor.config import DEFAULT_CONFIG, CompactorConfig
from uuid_compactor.exceptions import FormatError, LengthError, WordRangeError

logger = logging.getLogger(__name__)

__all__ = [
    "COMPACT32_LEN",
    "COMPACT64_LEN",
    "UuidCompactor",
    "pack_words",
    "unpack_words",
    "uuid_to_words",
    "words_to_uuid",
]

WORD_MIN = -(1 << 63)
UUID_BYTES = 16

_WORD_MASK = (1 << 64) - 1
_UNSIGNED_WORDS = struct.Struct(">QQ")
_SIGNED_WORDS = struct.Struct(">qq")


def _unsigned(name: str, word: int) -> int:
    if not WORD_MIN <= word <= _WORD_MASK:
        raise WordRangeError(name, word)
    return word & _WORD_MASK


def pack_words(high: int, low: int) -> bytes:
    """Pack two 64-bit words into a 16-byte big-endian buffer.

    Byte 0 is the most significant byte of ``high``, byte 15 the least
    significant byte of ``low``.

    Args:
        high: Most significant 64 bits, signed or unsigned
        low: Least significant 64 bits, signed or unsigned

    Returns:
        16 bytes

    Raises:
        WordRangeError: If a word does not fit in 64 bits
    """
    return _UNSIGNED_WORDS.pack(_unsigned("high", high), _unsigned("low", low))


def unpack_words(data: bytes) -> tuple[int, int]:
    """Unpack a 16-byte buffer into signed ``(high, low)`` words.

    Bytes are merged as unsigned values; only the assembled 64-bit word is
    read as two's complement, so no byte is ever sign-extended.
    """
    high, low = _SIGNED_WORDS.unpack(data)
    return high, low


def uuid_to_words(value: UUID) -> tuple[int, int]:
    """Split a UUID into signed ``(high, low)`` words."""
    return unpack_words(value.bytes)


def words_to_uuid(high: int, low: int) -> UUID:
    """Build a UUID from ``(high, low)`` words."""
    return UUID(bytes=pack_words(high, low))


def _as_uuid(value: UUID | str) -> UUID:
    if isinstance(value, UUID):
        return value
    if isinstance(value, str):
        try:
            return UUID(value)
        except ValueError as e:
            logger.debug("Rejected uuid string %r: %s", value, e)
            raise FormatError(value, f"Not a canonical uuid string: {value}") from e
    raise TypeError(f"Expected UUID or str, got {type(value).__name__}")


class UuidCompactor:
    """Converts UUIDs to URL-safe compact strings, and back.

    UUID strings are 36 characters, e.g. ``be177dbe-5639-4ee1-90b1-09e108ffdddc``.
    ``compact64()`` and ``compact32()`` shorten them to 22 and 26 characters.

    ``compact32()`` output is longer but unambiguous: upper-case letters and
    the digits 2-7 only, nothing to confuse with O, I or B.

    Instances hold no mutable state and can be shared between threads.
    """

    def __init__(self, config: CompactorConfig | None = None):
        """Initialize compactor.

        Args:
            config: Compactor configuration (defaults to DEFAULT_CONFIG)
        """
        self.config = config or DEFAULT_CONFIG
        self.default_codec = CodecRegistry.load(self.config.default_encoding)

    def compact(self, value: UUID | str) -> str:
        """Compact a UUID with the configured default encoding."""
        return self._compact(_as_uuid(value).bytes, self.default_codec)

    def compact64(self, value: UUID | str) -> str:
        """Compact a UUID to 22 characters of URL-safe base64.

        Args:
            value: UUID, or UUID string in the standard
                ``xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx`` format

        Returns:
            Compact UUID string

        Raises:
            FormatError: If value is a string that does not parse as a UUID
        """
        return self._compact(_as_uuid(value).bytes, BASE64)

    def compact32(self, value: UUID | str) -> str:
        """Compact a UUID to 26 characters of base32.

        Args:
            value: UUID, or UUID string in the standard
                ``xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx`` format

        Returns:
            Compact UUID string

        Raises:
            FormatError: If value is a string that does not parse as a UUID
        """
        return self._compact(_as_uuid(value).bytes, BASE32)

    def compact64_words(self, high: int, low: int) -> str:
        """Compact a UUID given as raw words, using base64.

        For sources that are neither ``uuid.UUID`` nor a UUID string.
        """
        return self._compact(pack_words(high, low), BASE64)

    def compact32_words(self, high: int, low: int) -> str:
        """Compact a UUID given as raw words, using base32."""
        return self._compact(pack_words(high, low), BASE32)

    def expand(self, text: str) -> UUID:
        """Expand a string from any of the compact functions back to a UUID.

        Args:
            text: Compact UUID string, 22 or 26 characters

        Returns:
            Decoded UUID

        Raises:
            FormatError: If the length is neither 22 nor 26
            DecodeError: If text holds characters outside the codec alphabet
        """
        codec = CodecRegistry.for_length(len(text))
        if codec is None:
            logger.debug("Rejected compact uuid string of length %d: %r", len(text), text)
            raise FormatError(text)
        return self._expand(text, codec)

    def expand64(self, text: str) -> UUID:
        """Expand a ``compact64()`` string back to a UUID.

        Raises:
            LengthError: If text is not 22 characters
            DecodeError: If text holds characters outside the base64url alphabet
        """
        self._check_length(text, BASE64)
        return self._expand(text, BASE64)

    def expand32(self, text: str) -> UUID:
        """Expand a ``compact32()`` string back to a UUID.

        Raises:
            LengthError: If text is not 26 characters
            DecodeError: If text holds characters outside the base32 alphabet
        """
        self._check_length(text, BASE32)
        return self._expand(text, BASE32)

    def expand_words(self, text: str) -> tuple[int, int]:
        """Expand a compact string to signed ``(high, low)`` words."""
        return uuid_to_words(self.expand(text))

    @staticmethod
    def _check_length(text: str, codec: ByteTextCodec) -> None:
        if len(text) != codec.compact_length:
            logger.debug(
                "Rejected %s compact uuid string of length %d: %r",
                codec.name,
                len(text),
                text,
            )
            raise LengthError(codec.compact_length, len(text))

    @staticmethod
    def _compact(data: bytes, codec: ByteTextCodec) -> str:
        # Strip the trailing "=" padding, always the same width for 16 bytes
        return codec.encode(data)[: codec.compact_length]

    @staticmethod
    def _expand(text: str, codec: ByteTextCodec) -> UUID:
        data = codec.decode(text)
        if len(data) != UUID_BYTES:
            logger.debug("Decoded %d bytes from %s text %r", len(data), codec.name, text)
            raise FormatError(text)
        return UUID(bytes=data)

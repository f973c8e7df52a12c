"""
uuid-compactor - URL-safe compact UUID strings

Converts 36-character UUID strings to 22-character base64url or
26-character base32 strings, and back.
"""

from uuid import UUID

from uuid_compactor.codecs import (
    BASE32,
    BASE64,
    COMPACT32_LEN,
    COMPACT64_LEN,
    ByteTextCodec,
    CodecRegistry,
)
from uuid_compactor.compactor import (
    UuidCompactor,
    pack_words,
    unpack_words,
    uuid_to_words,
    words_to_uuid,
)
from uuid_compactor.config import DEFAULT_CONFIG, CompactorConfig
from uuid_compactor.exceptions import (
    CompactUuidError,
    DecodeError,
    FormatError,
    LengthError,
    WordRangeError,
)
from uuid_compactor.validator import CompactValidator, ValidationResult

__version__ = "0.1.0"

# Shared process-wide instance; UuidCompactor holds no mutable state
default_compactor = UuidCompactor()


def compact64(value: UUID | str) -> str:
    """Compact a UUID to 22 characters using the shared compactor."""
    return default_compactor.compact64(value)


def compact32(value: UUID | str) -> str:
    """Compact a UUID to 26 characters using the shared compactor."""
    return default_compactor.compact32(value)


def expand(text: str) -> UUID:
    """Expand a 22 or 26 character compact string using the shared compactor."""
    return default_compactor.expand(text)


def expand64(text: str) -> UUID:
    """Expand a 22 character compact string using the shared compactor."""
    return default_compactor.expand64(text)


def expand32(text: str) -> UUID:
    """Expand a 26 character compact string using the shared compactor."""
    return default_compactor.expand32(text)


__all__ = [
    "BASE32",
    "BASE64",
    "COMPACT32_LEN",
    "COMPACT64_LEN",
    "DEFAULT_CONFIG",
    "ByteTextCodec",
    "CodecRegistry",
    "CompactUuidError",
    "CompactValidator",
    "CompactorConfig",
    "DecodeError",
    "FormatError",
    "LengthError",
    "UuidCompactor",
    "ValidationResult",
    "WordRangeError",
    "compact32",
    "compact64",
    "default_compactor",
    "expand",
    "expand32",
    "expand64",
    "pack_words",
    "unpack_words",
    "uuid_to_words",
    "words_to_uuid",
    "__version__",
]

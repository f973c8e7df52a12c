"""Byte/text codec configurations.

Both configurations wrap the standard library ``base64`` module. They only
differ in alphabet, padding block size and the length a 16-byte input
compacts to, so they are plain values rather than subclasses.
"""

import base64
import binascii
import logging
import string
from collections.abc import Callable
from dataclasses import dataclass

from uuid_compactor.exceptions import DecodeError

logger = logging.getLogger(__name__)

COMPACT64_LEN = 22
"""Length of the strings produced by the ``compact64`` functions."""

COMPACT32_LEN = 26
"""Length of the strings produced by the ``compact32`` functions."""

PAD = "="


@dataclass(frozen=True)
class ByteTextCodec:
    """Reversible bytes <-> text encoding with a fixed alphabet."""

    name: str
    alphabet: frozenset[str]
    compact_length: int
    block_size: int
    encoder: Callable[[bytes], bytes]
    decoder: Callable[[str], bytes]

    def encode(self, data: bytes) -> str:
        """Encode bytes to padded text."""
        return self.encoder(data).decode("ascii")

    def decode(self, text: str) -> bytes:
        """Decode unpadded text back to bytes.

        Args:
            text: Encoded text, without its trailing padding

        Returns:
            Decoded bytes

        Raises:
            DecodeError: If text holds a character outside the alphabet,
                or the standard library decoder rejects it
        """
        if not self.alphabet.issuperset(text):
            logger.debug("Rejected %s text with foreign characters: %r", self.name, text)
            raise DecodeError(text, self.name)

        padded = text + PAD * (-len(text) % self.block_size)
        try:
            return self.decoder(padded)
        except binascii.Error as e:
            logger.debug("Rejected %s text %r: %s", self.name, text, e)
            raise DecodeError(text, self.name) from e


BASE64 = ByteTextCodec(
    name="base64",
    alphabet=frozenset(string.ascii_letters + string.digits + "-_"),
    compact_length=COMPACT64_LEN,
    block_size=4,
    encoder=base64.urlsafe_b64encode,
    decoder=base64.urlsafe_b64decode,
)

# A-Z plus 2-7: no 0, 1 or 8 to confuse with O, I or B.
BASE32 = ByteTextCodec(
    name="base32",
    alphabet=frozenset(string.ascii_uppercase + "234567"),
    compact_length=COMPACT32_LEN,
    block_size=8,
    encoder=base64.b32encode,
    decoder=base64.b32decode,
)


class CodecRegistry:
    """Builtin codecs, looked up by name or by compact length."""

    BUILTIN_CODECS: dict[str, ByteTextCodec] = {
        BASE64.name: BASE64,
        BASE32.name: BASE32,
    }

    @classmethod
    def load(cls, codec_name: str) -> ByteTextCodec:
        """Load a codec by name.

        Args:
            codec_name: Name of codec ('base64' or 'base32')

        Returns:
            Codec configuration

        Raises:
            ValueError: If codec name is not recognized

        Example:
            >>> CodecRegistry.load('base32').compact_length
            26
        """
        if codec_name not in cls.BUILTIN_CODECS:
            raise ValueError(
                f"Unknown codec: {codec_name}. "
                f"Available: {', '.join(cls.BUILTIN_CODECS.keys())}"
            )
        return cls.BUILTIN_CODECS[codec_name]

    @classmethod
    def for_length(cls, length: int) -> ByteTextCodec | None:
        """Get the codec whose compact strings have this length, if any."""
        for codec in cls.BUILTIN_CODECS.values():
            if codec.compact_length == length:
                return codec
        return None


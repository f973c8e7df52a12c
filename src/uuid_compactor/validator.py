"""Compact UUID validator."""

from dataclasses import dataclass

from uuid_compactor.codecs import BASE64, CodecRegistry
from uuid_compactor.compactor import UuidCompactor
from uuid_compactor.exceptions import CompactUuidError


@dataclass
class ValidationResult:
    """Compact UUID validation result."""

    valid: bool
    error: str | None = None
    encoding: str | None = None
    warnings: list[str] | None = None

    def __post_init__(self) -> None:
        """Initialize warnings list."""
        if self.warnings is None:
            self.warnings = []


class CompactValidator:
    """Checks compact UUID strings without raising."""

    def __init__(self, compactor: UuidCompactor | None = None):
        """Initialize validator.

        Args:
            compactor: Compactor to validate with (a new one if omitted)
        """
        self.compactor = compactor or UuidCompactor()

    def validate(self, text: str, encoding: str | None = None) -> ValidationResult:
        """Validate a compact UUID string.

        Args:
            text: Compact UUID string to validate
            encoding: 'base64' or 'base32' to require that encoding,
                or None to accept either

        Returns:
            Validation result

        Raises:
            ValueError: If encoding is not a known codec name
        """
        expand = self.compactor.expand
        if encoding is not None:
            required = CodecRegistry.load(encoding)
            expand = self.compactor.expand64 if required is BASE64 else self.compactor.expand32

        try:
            value = expand(text)
        except CompactUuidError as e:
            return ValidationResult(valid=False, error=str(e))

        codec = CodecRegistry.for_length(len(text))
        result = ValidationResult(valid=True, encoding=codec.name)

        # Unused low bits of the last character are dropped by the decoder
        canonical = codec.encode(value.bytes)[: codec.compact_length]
        if canonical != text:
            result.warnings.append(f"Non-canonical compact uuid string: {text}")

        return result

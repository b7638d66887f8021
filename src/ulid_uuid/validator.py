"""Identifier validator."""

from dataclasses import dataclass

from ulid_uuid.codecs.base import Codec
from ulid_uuid.codecs.ulid import ULIDCodec
from ulid_uuid.codecs.uuid import UUIDCodec
from ulid_uuid.detector import IdentifierDetector, IdentifierKind
from ulid_uuid.exceptions import FormatError, IdentifierError, ShapeError


@dataclass
class ValidationResult:
    """Identifier validation result."""

    valid: bool
    kind: IdentifierKind
    error: str | None = None
    error_type: type[IdentifierError] | None = None


class IdentifierValidator:
    """Validate identifiers and report which kind of failure occurred.

    Unlike IdentifierConverter, failures are not collapsed: the result
    carries the ShapeError, RangeError or HexError class.
    """

    def __init__(self, detector: IdentifierDetector | None = None):
        """Initialize validator.

        Args:
            detector: Detector to classify input with (default: new detector)
        """
        self.detector = detector or IdentifierDetector()
        uuid_codec = UUIDCodec()
        self.codecs: dict[IdentifierKind, Codec] = {
            IdentifierKind.ULID: ULIDCodec(),
            IdentifierKind.UUID: uuid_codec,
            IdentifierKind.GUID: uuid_codec,
        }

    def validate(self, value: str) -> ValidationResult:
        """Validate an identifier.

        Args:
            value: Identifier text

        Returns:
            Validation result
        """
        kind = self.detector.classify(value)

        if kind is IdentifierKind.UNRECOGNIZED:
            error = ShapeError(value, "ULID|UUID|GUID")
            return ValidationResult(
                valid=False, kind=kind, error=str(error), error_type=ShapeError
            )

        try:
            self.codecs[kind].decode(value)
        except FormatError as e:
            return ValidationResult(
                valid=False, kind=kind, error=str(e), error_type=type(e)
            )

        return ValidationResult(valid=True, kind=kind)

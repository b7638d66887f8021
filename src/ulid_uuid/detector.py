"""Identifier type detection from text shape."""

from enum import Enum

from ulid_uuid.codecs.ulid import ULIDCodec
from ulid_uuid.codecs.uuid import UUIDCodec


class IdentifierKind(Enum):
    """Shape-based classification of an identifier string."""

    ULID = "ULID"
    UUID = "UUID"
    GUID = "GUID"
    UNRECOGNIZED = "UNRECOGNIZED"


class IdentifierDetector:
    """Classify identifier strings by length and charset.

    Classification only looks at shape. A string classified as ULID may still
    be out of range, and one classified as UUID may still contain non-hex
    characters; those are reported by the codecs on decode.
    """

    def __init__(self) -> None:
        """Initialize detector."""
        self.ulid_codec = ULIDCodec()

    def classify(self, value: str) -> IdentifierKind:
        """Classify a string.

        Args:
            value: Candidate identifier

        Returns:
            ULID for 26 Base32 characters, UUID for 36 characters with
            hyphens at 8-4-4-4-12 boundaries, GUID for 32 characters without
            hyphens, UNRECOGNIZED otherwise

        Example:
            >>> IdentifierDetector().classify("08A1YW3WAH8SNTQVYGDB2EP69T")
            <IdentifierKind.ULID: 'ULID'>
        """
        length = len(value)

        if length == ULIDCodec.LENGTH:
            if self.ulid_codec.has_shape(value):
                return IdentifierKind.ULID
            return IdentifierKind.UNRECOGNIZED

        if length == UUIDCodec.HYPHENATED_LENGTH:
            if all(value[index] == "-" for index in UUIDCodec.HYPHEN_POSITIONS):
                return IdentifierKind.UUID
            return IdentifierKind.UNRECOGNIZED

        if length == UUIDCodec.BARE_LENGTH and "-" not in value:
            return IdentifierKind.GUID

        return IdentifierKind.UNRECOGNIZED

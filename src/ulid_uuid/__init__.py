"""
ulid-uuid - ULID <-> UUID Converter

Converts 26-character ULIDs to hyphenated UUIDs, and UUIDs or bare GUIDs
back to ULIDs.
"""

from ulid_uuid.codecs import Codec, ULIDCodec, UUIDCodec
from ulid_uuid.converter import IdentifierConverter, convert
from ulid_uuid.detector import IdentifierDetector, IdentifierKind
from ulid_uuid.exceptions import (
    ConversionError,
    FormatError,
    HexError,
    IdentifierError,
    RangeError,
    ShapeError,
)
from ulid_uuid.validator import IdentifierValidator, ValidationResult

__version__ = "0.1.0"

__all__ = [
    "Codec",
    "ConversionError",
    "FormatError",
    "HexError",
    "IdentifierConverter",
    "IdentifierDetector",
    "IdentifierError",
    "IdentifierKind",
    "IdentifierValidator",
    "RangeError",
    "ShapeError",
    "ULIDCodec",
    "UUIDCodec",
    "ValidationResult",
    "convert",
]

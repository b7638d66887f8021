"""ULID <-> UUID conversion."""

import logging

from ulid_uuid.codecs.base import Codec
from ulid_uuid.codecs.ulid import ULIDCodec
from ulid_uuid.codecs.uuid import UUIDCodec
from ulid_uuid.detector import IdentifierDetector, IdentifierKind
from ulid_uuid.exceptions import ConversionError, FormatError

logger = logging.getLogger(__name__)


class IdentifierConverter:
    """Convert ULIDs to UUIDs and UUIDs/GUIDs to ULIDs."""

    def __init__(self, detector: IdentifierDetector | None = None):
        """Initialize converter.

        Args:
            detector: Detector to classify input with (default: new detector)
        """
        self.detector = detector or IdentifierDetector()
        self.ulid_codec = ULIDCodec()
        self.uuid_codec = UUIDCodec()
        # Recognized kind -> (source, target) codecs
        self.routes: dict[IdentifierKind, tuple[Codec, Codec]] = {
            IdentifierKind.ULID: (self.ulid_codec, self.uuid_codec),
            IdentifierKind.UUID: (self.uuid_codec, self.ulid_codec),
            IdentifierKind.GUID: (self.uuid_codec, self.ulid_codec),
        }

    def convert(self, value: str) -> str:
        """Convert an identifier to the opposite representation.

        Args:
            value: ULID, UUID or GUID text

        Returns:
            Hyphenated lowercase UUID for ULID input, uppercase ULID for
            UUID/GUID input

        Raises:
            ConversionError: If value is not a valid ULID, UUID or GUID

        Example:
            >>> IdentifierConverter().convert("cfa45f5d-9c38-4772-b39a-036a0b9f8d30")
            '6FMHFNV71R8XSB76G3D85SZ39G'
        """
        kind = self.detector.classify(value)
        logger.debug(f"Classified {value!r} as {kind.value}")

        if kind is IdentifierKind.UNRECOGNIZED:
            raise ConversionError(value)

        source, target = self.routes[kind]
        try:
            data = source.decode(value)
        except FormatError as e:
            logger.debug(f"{type(e).__name__} while decoding {value!r}: {e}")
            raise ConversionError(value) from e

        return target.encode(data)

    def to_uuid(self, ulid: str) -> str:
        """Convert a ULID to a UUID.

        Raises:
            FormatError: If ulid is not a valid ULID
        """
        return self.uuid_codec.encode(self.ulid_codec.decode(ulid))

    def to_ulid(self, uuid: str) -> str:
        """Convert a UUID or GUID to a ULID.

        Raises:
            FormatError: If uuid is not a valid UUID or GUID
        """
        return self.ulid_codec.encode(self.uuid_codec.decode(uuid))


_default_converter = IdentifierConverter()


def convert(value: str) -> str:
    """Convert with a shared default converter. See IdentifierConverter.convert."""
    return _default_converter.convert(value)

"""Identifier text codecs."""

from ulid_uuid.codecs.base import IDENTIFIER_SIZE, Codec
from ulid_uuid.codecs.ulid import ULIDCodec
from ulid_uuid.codecs.uuid import UUIDCodec

__all__ = [
    "IDENTIFIER_SIZE",
    "Codec",
    "ULIDCodec",
    "UUIDCodec",
]

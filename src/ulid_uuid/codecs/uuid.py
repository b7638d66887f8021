"""UUID/GUID hex codec."""

import re

from ulid_uuid.codecs.base import Codec
from ulid_uuid.exceptions import HexError, ShapeError


class UUIDCodec(Codec):
    """UUID text codec.

    Format (UUID): xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx (36 chars)
    Format (GUID): xxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxx (32 chars)

    Both forms decode; encoding always produces the lowercase hyphenated form.
    Version and variant bits are not inspected.
    """

    name = "UUID"

    HYPHENATED_LENGTH = 36
    BARE_LENGTH = 32
    HYPHEN_POSITIONS = (8, 13, 18, 23)
    # Byte offsets where a hyphen follows: 4-2-2-2-6 bytes
    GROUP_BOUNDARIES = (4, 6, 8, 10)

    HEX_REGEX = re.compile(r"^[0-9a-fA-F]{32}$")

    def encode(self, data: bytes) -> str:
        """Encode 16 bytes as a hyphenated lowercase UUID.

        Example:
            >>> UUIDCodec().encode(bytes(16))
            '00000000-0000-0000-0000-000000000000'
        """
        self._check_size(data)

        groups = []
        start = 0
        for end in (*self.GROUP_BOUNDARIES, len(data)):
            groups.append(data[start:end].hex())
            start = end

        return "-".join(groups)

    def decode(self, text: str) -> bytes:
        """Decode a UUID or GUID into 16 bytes.

        Raises:
            ShapeError: Length is neither 36 nor 32
            HexError: Misplaced hyphens or non-hex characters
        """
        if len(text) == self.HYPHENATED_LENGTH:
            if not self.has_hyphens(text):
                raise HexError(text, "hyphens must separate 8-4-4-4-12 groups")
            digits = text.replace("-", "")
        elif len(text) == self.BARE_LENGTH:
            digits = text
        else:
            raise ShapeError(text, self.name)

        if not self.HEX_REGEX.match(digits):
            raise HexError(text, "non-hexadecimal characters")

        return bytes.fromhex(digits)

    def has_hyphens(self, text: str) -> bool:
        """Check that hyphens appear exactly at the 8-4-4-4-12 boundaries."""
        return all(
            (char == "-") == (index in self.HYPHEN_POSITIONS)
            for index, char in enumerate(text)
        )

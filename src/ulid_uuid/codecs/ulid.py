"""ULID Base32 codec."""

from ulid_uuid.codecs.base import IDENTIFIER_SIZE, Codec
from ulid_uuid.exceptions import RangeError, ShapeError


class ULIDCodec(Codec):
    """ULID text codec.

    Format: 26 symbols of Crockford's Base32, 5 bits each, big-endian.

    26 x 5 = 130 bits carry a 128-bit value, so the two highest bits must be
    zero and the first symbol can be at most '7'.

    Example:
        01ARZ3NDEKTSV4RRFFQ69G5FAV
        └─time───┘└─randomness───┘
    """

    name = "ULID"

    ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
    LENGTH = 26
    MAX_VALUE = (1 << (IDENTIFIER_SIZE * 8)) - 1

    # Lowercase input decodes like uppercase
    DECODING = {
        **{char: index for index, char in enumerate(ALPHABET)},
        **{char.lower(): index for index, char in enumerate(ALPHABET)},
    }

    def encode(self, data: bytes) -> str:
        """Encode 16 bytes as an uppercase ULID.

        Example:
            >>> ULIDCodec().encode(bytes(16))
            '00000000000000000000000000'
        """
        self._check_size(data)
        value = int.from_bytes(data, "big")

        symbols = []
        for _ in range(self.LENGTH):
            symbols.append(self.ALPHABET[value & 0x1F])
            value >>= 5

        return "".join(reversed(symbols))

    def decode(self, text: str) -> bytes:
        """Decode a ULID into 16 bytes.

        Raises:
            ShapeError: Wrong length or a character outside the alphabet
            RangeError: Value does not fit in 128 bits
        """
        if not self.has_shape(text):
            raise ShapeError(text, self.name)

        value = 0
        for char in text:
            value = (value << 5) | self.DECODING[char]

        if value > self.MAX_VALUE:
            raise RangeError(text)

        return value.to_bytes(IDENTIFIER_SIZE, "big")

    def has_shape(self, text: str) -> bool:
        """Check length and alphabet without checking range."""
        return len(text) == self.LENGTH and all(char in self.DECODING for char in text)

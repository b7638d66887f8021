"""Base codec interface."""

from abc import ABC, abstractmethod

IDENTIFIER_SIZE = 16


class Codec(ABC):
    """Base class for 128-bit identifier text codecs."""

    name: str

    @abstractmethod
    def encode(self, data: bytes) -> str:
        """Encode identifier bytes as text.

        Args:
            data: Exactly 16 identifier bytes, big-endian

        Returns:
            Canonical text form

        Raises:
            ValueError: If data is not 16 bytes long
        """
        pass

    @abstractmethod
    def decode(self, text: str) -> bytes:
        """Decode text into identifier bytes.

        Args:
            text: Identifier text

        Returns:
            16 identifier bytes, big-endian

        Raises:
            FormatError: If text is not a valid identifier for this codec
        """
        pass

    def validate_format(self, text: str) -> bool:
        """Check whether text decodes with this codec."""
        try:
            self.decode(text)
        except ValueError:
            return False
        return True

    @staticmethod
    def _check_size(data: bytes) -> None:
        if len(data) != IDENTIFIER_SIZE:
            raise ValueError(
                f"Identifier must be {IDENTIFIER_SIZE} bytes, got {len(data)}"
            )

"""Identifier conversion exceptions."""


class IdentifierError(ValueError):
    """Base exception for ulid-uuid errors."""

    pass


class FormatError(IdentifierError):
    """Text could not be decoded by a codec."""

    pass


class ShapeError(FormatError):
    """Input length or charset matches no known identifier format."""

    def __init__(self, value: str, expected: str):
        self.value = value
        super().__init__(f"Invalid {expected} format: {value!r}")


class RangeError(FormatError):
    """ULID decodes to a value above 2^128 - 1."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f"ULID out of range: {value!r}\n\n"
            f"The first character must be between '0' and '7'."
        )


class HexError(FormatError):
    """UUID/GUID has the right length but bad hex digits or hyphens."""

    def __init__(self, value: str, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid UUID hex ({reason}): {value!r}")


class ConversionError(IdentifierError):
    """Input could not be converted to the other identifier form."""

    MESSAGE = "not valid ULID|UUID|GUID"

    def __init__(self, value: str):
        self.value = value
        super().__init__(self.MESSAGE)

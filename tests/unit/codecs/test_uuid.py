"""Tests for UUIDCodec class."""

import pytest
from ulid_uuid import HexError, ShapeError, UUIDCodec

UUID = "cfa45f5d-9c38-4772-b39a-036a0b9f8d30"
UUID_BYTES = bytes.fromhex("cfa45f5d9c384772b39a036a0b9f8d30")


class TestUUIDCodecEncode:
    """Tests for UUIDCodec.encode()."""

    def test_encode_known_value(self) -> None:
        """Test encoding known bytes."""
        assert UUIDCodec().encode(UUID_BYTES) == UUID

    def test_encode_groups(self) -> None:
        """Test hyphens fall after bytes 4, 6, 8 and 10."""
        encoded = UUIDCodec().encode(bytes(range(16)))

        assert encoded == "00010203-0405-0607-0809-0a0b0c0d0e0f"

    def test_encode_nil(self) -> None:
        """Test encoding all-zero bytes."""
        assert UUIDCodec().encode(bytes(16)) == "00000000-0000-0000-0000-000000000000"

    def test_encode_wrong_size(self) -> None:
        """Test that non-16-byte input raises ValueError."""
        with pytest.raises(ValueError, match="16 bytes"):
            UUIDCodec().encode(bytes(8))


class TestUUIDCodecDecode:
    """Tests for UUIDCodec.decode()."""

    def test_decode_hyphenated(self) -> None:
        """Test decoding the 36-character form."""
        assert UUIDCodec().decode(UUID) == UUID_BYTES

    def test_decode_guid(self) -> None:
        """Test decoding the bare 32-character form."""
        assert UUIDCodec().decode(UUID.replace("-", "")) == UUID_BYTES

    def test_decode_uppercase(self) -> None:
        """Test that hex digits are case-insensitive."""
        assert UUIDCodec().decode(UUID.upper()) == UUID_BYTES

    def test_decode_ignores_version_bits(self) -> None:
        """Test that any version/variant is accepted."""
        assert UUIDCodec().decode("ffffffff-ffff-ffff-ffff-ffffffffffff") == b"\xff" * 16

    def test_decode_non_hex(self) -> None:
        """Test that non-hex characters raise HexError."""
        with pytest.raises(HexError, match="non-hexadecimal"):
            UUIDCodec().decode("cfa45f5k-9c38-4772-!39a-036a0b9f8d30")

    def test_decode_guid_non_hex(self) -> None:
        """Test that non-hex characters in a GUID raise HexError."""
        with pytest.raises(HexError):
            UUIDCodec().decode("zfa45f5d9c384772b39a036a0b9f8d30")

    def test_decode_misplaced_hyphen(self) -> None:
        """Test that hyphens off the 8-4-4-4-12 grouping raise HexError."""
        with pytest.raises(HexError, match="hyphens"):
            UUIDCodec().decode("cfa45f5d9-c38-4772-b39a-036a0b9f8d30")

    def test_decode_extra_hyphen(self) -> None:
        """Test that a hyphen inside a group raises HexError."""
        with pytest.raises(HexError):
            UUIDCodec().decode("cfa45f5d-9c38-4772-b39a-036a0b9f8-30")

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "jfkldsfaj",
            "{cfa45f5d-9c38-4772-b39a-036a0b9f8d30}",
            "urn:uuid:cfa45f5d-9c38-4772-b39a-036a0b9f8d30",
            "cfa45f5d-9c38-4772-b39a-036a0b9f8d3",
        ],
    )
    def test_decode_wrong_length(self, value: str) -> None:
        """Test that unsupported lengths raise ShapeError."""
        with pytest.raises(ShapeError, match="Invalid UUID format"):
            UUIDCodec().decode(value)


class TestUUIDCodecValidateFormat:
    """Tests for UUIDCodec.validate_format()."""

    def test_valid(self) -> None:
        """Test valid UUIDs and GUIDs."""
        codec = UUIDCodec()

        assert codec.validate_format(UUID) is True
        assert codec.validate_format(UUID.replace("-", "")) is True

    def test_invalid(self) -> None:
        """Test invalid input."""
        codec = UUIDCodec()

        assert codec.validate_format("08A1YW3WAH8SNTQVYGDB2EP69T") is False
        assert codec.validate_format("cfa45f5k-9c38-4772-!39a-036a0b9f8d30") is False


class TestUUIDCodecRoundTrip:
    """Tests for encode/decode symmetry."""

    @pytest.mark.parametrize("data", [bytes(16), b"\xff" * 16, UUID_BYTES])
    def test_decode_encode(self, data: bytes) -> None:
        """Test that decoding an encoded value returns the original bytes."""
        codec = UUIDCodec()

        assert codec.decode(codec.encode(data)) == data

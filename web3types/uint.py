"""Fixed-size hashes and hex-encoded unsigned quantities."""

from __future__ import annotations

import re
from functools import total_ordering
from typing import ClassVar

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]*")
_DEC_DIGITS = re.compile(r"[0-9]+")


@total_ordering
class FixedHash:
    """Immutable big-endian byte string of a fixed length."""

    SIZE: ClassVar[int] = 0
    __slots__ = ("_data",)

    def __init__(self, data=None):
        raw = bytes(self.SIZE) if data is None else bytes(data)
        if len(raw) != self.SIZE:
            raise ValueError(
                f"{type(self).__name__} expects {self.SIZE} bytes, got {len(raw)}"
            )
        self._data = raw

    @classmethod
    def zero(cls):
        """Return the all-zero hash."""
        return cls()

    @classmethod
    def from_low_u64_be(cls, value):
        """Build a hash whose lowest eight bytes hold ``value`` big-endian."""
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < 2**64:
            raise ValueError(f"not a 64-bit unsigned integer: {value!r}")
        return cls.from_int(value)

    @classmethod
    def from_int(cls, value):
        """Build a hash from an unsigned integer that fits in ``SIZE`` bytes."""
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"not an unsigned integer: {value!r}")
        try:
            return cls(value.to_bytes(cls.SIZE, "big"))
        except OverflowError:
            raise ValueError(f"{value} does not fit in {cls.SIZE} bytes") from None

    def to_int(self):
        """Return the hash read as a big-endian unsigned integer."""
        return int.from_bytes(self._data, "big")

    @classmethod
    def from_hex(cls, text):
        """Parse a 0x-prefixed hex string of exactly ``2 * SIZE`` digits."""
        if not isinstance(text, str):
            raise ValueError(f"expected a hex string, got {type(text).__name__}")
        if not text.startswith("0x"):
            raise ValueError(f"invalid hash {text!r}: missing 0x prefix")
        digits = text[2:]
        if not _HEX_DIGITS.fullmatch(digits):
            raise ValueError(f"invalid hash {text!r}: not hexadecimal")
        if len(digits) != 2 * cls.SIZE:
            raise ValueError(
                f"invalid hash {text!r}: expected {2 * cls.SIZE} hex digits, got {len(digits)}"
            )
        return cls(bytes.fromhex(digits))

    def to_json(self):
        return "0x" + self._data.hex()

    @classmethod
    def from_json(cls, value):
        return cls.from_hex(value)

    def __bytes__(self):
        return self._data

    def __str__(self):
        digits = self._data.hex()
        return f"0x{digits[:4]}…{digits[-4:]}"

    def __repr__(self):
        return f"{type(self).__name__}('{self.to_json()}')"

    def __format__(self, spec):
        if spec == "x":
            return self._data.hex()
        if spec == "#x":
            return self.to_json()
        return format(str(self), spec)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._data == other._data

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._data < other._data

    def __hash__(self):
        return hash((type(self).__name__, self._data))


class H64(FixedHash):
    """8-byte hash."""

    SIZE = 8
    __slots__ = ()


class H128(FixedHash):
    """16-byte hash."""

    SIZE = 16
    __slots__ = ()


class H160(FixedHash):
    """20-byte hash, used for addresses."""

    SIZE = 20
    __slots__ = ()


class H256(FixedHash):
    """32-byte hash."""

    SIZE = 32
    __slots__ = ()


class H512(FixedHash):
    """64-byte hash."""

    SIZE = 64
    __slots__ = ()


class H520(FixedHash):
    """65-byte hash."""

    SIZE = 65
    __slots__ = ()


class H2048(FixedHash):
    """256-byte logs bloom."""

    SIZE = 256
    __slots__ = ()


Address = H160


def encode_quantity(value):
    """Encode an unsigned integer as a minimal 0x-prefixed hex string."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"not an unsigned integer: {value!r}")
    return f"{value:#x}"


def decode_quantity(value, bits=256):
    """Decode a 0x-prefixed hex or plain decimal string into an integer of at most ``bits`` bits."""
    if not isinstance(value, str):
        raise ValueError(f"expected a quantity string, got {type(value).__name__}")
    if value.startswith("0x"):
        digits = value[2:]
        if not digits or not _HEX_DIGITS.fullmatch(digits):
            raise ValueError(f"invalid hex quantity: {value!r}")
        if len(digits) > bits // 4:
            raise ValueError(f"quantity {value!r} is too long for {bits} bits")
        number = int(digits, 16)
    else:
        if not _DEC_DIGITS.fullmatch(value):
            raise ValueError(f"invalid decimal quantity: {value!r}")
        number = int(value)
    if number.bit_length() > bits:
        raise ValueError(f"quantity {value!r} overflows {bits} bits")
    return number


def uint_from_bytes(data):
    """Read up to 32 big-endian bytes as an unsigned integer."""
    raw = bytes(data)
    if len(raw) > 32:
        raise ValueError(f"at most 32 bytes fit in a 256-bit integer, got {len(raw)}")
    return int.from_bytes(raw, "big")
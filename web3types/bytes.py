"""Binary data wrappers and their JSON forms."""

from __future__ import annotations

import re

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]*")


class Bytes(bytes):
    """Arbitrary binary data, written in JSON as a 0x-prefixed hex string."""

    __slots__ = ()

    def to_json(self):
        return "0x" + self.hex()

    @classmethod
    def from_json(cls, value):
        if not isinstance(value, str):
            raise ValueError("expected a 0x-prefixed hex-encoded vector of bytes")
        if not value.startswith("0x"):
            raise ValueError(f"invalid value: string {value!r}, expected 0x prefix")
        digits = value[2:]
        if len(digits) % 2 or not _HEX_DIGITS.fullmatch(digits):
            raise ValueError(f"Invalid hex: {digits!r}")
        return cls(bytes.fromhex(digits))

    def __repr__(self):
        return f'Bytes("{self.to_json()}")'


class BytesArray(bytes):
    """Binary data written in JSON as an array of byte values."""

    __slots__ = ()

    def to_json(self):
        return list(self)

    @classmethod
    def from_json(cls, value):
        if not isinstance(value, list):
            raise ValueError("expected an array of bytes")
        for item in value:
            if isinstance(item, bool) or not isinstance(item, int) or not 0 <= item <= 255:
                raise ValueError(f"invalid byte value: {item!r}")
        return cls(value)

    def __repr__(self):
        return f"BytesArray({list(self)!r})"
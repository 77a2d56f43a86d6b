"""Miner work package."""

from __future__ import annotations

from dataclasses import dataclass

from web3types.uint import H256, encode_quantity


@dataclass(frozen=True)
class Work:
    """Proof-of-work package: hashes, target and an optional block number."""

    pow_hash: H256
    seed_hash: H256
    target: H256
    number: int | None = None

    def to_json(self):
        items = [self.pow_hash.to_json(), self.seed_hash.to_json(), self.target.to_json()]
        if self.number is not None:
            items.append(encode_quantity(self.number))
        return items

    @classmethod
    def from_json(cls, value):
        try:
            return cls._parse(value)
        except ValueError as exc:
            raise ValueError(f"Cannot deserialize Work: {exc}") from exc

    @classmethod
    def _parse(cls, value):
        if not isinstance(value, list):
            raise ValueError("expected an array")
        if len(value) == 4:
            *hashes, number = value
            if isinstance(number, bool) or not isinstance(number, int) or not 0 <= number < 2**64:
                raise ValueError(f"invalid block number: {number!r}")
        elif len(value) == 3:
            hashes, number = value, None
        else:
            raise ValueError(f"expected 3 or 4 elements, got {len(value)}")
        pow_hash, seed_hash, target = (H256.from_json(item) for item in hashes)
        return cls(pow_hash, seed_hash, target, number)
"""Fee history returned by eth_feeHistory."""

from __future__ import annotations

from dataclasses import dataclass

from web3types.block import BlockNumber
from web3types.uint import decode_quantity, encode_quantity


def _quantities(value):
    if not isinstance(value, list):
        raise ValueError("expected an array")
    return [decode_quantity(item, 256) for item in value]


def _ratios(value):
    if not isinstance(value, list):
        raise ValueError("expected an array")
    result = []
    for item in value:
        if isinstance(item, bool) or not isinstance(item, (int, float)):
            raise ValueError(f"expected a number, got {item!r}")
        result.append(float(item))
    return result


def _field(obj, key, parse):
    if key not in obj:
        raise ValueError(f"missing field `{key}`")
    try:
        return parse(obj[key])
    except ValueError as exc:
        raise ValueError(f"invalid `{key}`: {exc}") from exc


@dataclass
class FeeHistory:
    """Base fees, gas usage ratios and rewards over a range of blocks."""

    oldest_block: BlockNumber
    base_fee_per_gas: list[int]
    gas_used_ratio: list[float]
    reward: list[list[int]] | None = None

    def to_json(self):
        return {
            "oldestBlock": self.oldest_block.to_json(),
            "baseFeePerGas": [encode_quantity(fee) for fee in self.base_fee_per_gas],
            "gasUsedRatio": [float(ratio) for ratio in self.gas_used_ratio],
            "reward": None
            if self.reward is None
            else [[encode_quantity(item) for item in row] for row in self.reward],
        }

    @classmethod
    def from_json(cls, value):
        if not isinstance(value, dict):
            raise ValueError("invalid type: expected fee history object")
        raw_reward = value.get("reward")
        if raw_reward is None:
            reward = None
        else:
            if not isinstance(raw_reward, list):
                raise ValueError("invalid `reward`: expected an array")
            reward = [_quantities(row) for row in raw_reward]
        return cls(
            oldest_block=_field(value, "oldestBlock", BlockNumber.from_json),
            base_fee_per_gas=_field(value, "baseFeePerGas", _quantities),
            gas_used_ratio=_field(value, "gasUsedRatio", _ratios),
            reward=reward,
        )
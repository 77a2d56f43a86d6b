import json

import pytest

from web3types.block import BlockNumber, BlockTag
from web3types.fee_history import FeeHistory


def test_fee_history():
    fee_history = FeeHistory(
        oldest_block=BlockNumber(123456),
        base_fee_per_gas=[100, 110],
        gas_used_ratio=[1.0, 2.0, 3.0],
        reward=None,
    )
    serialized = fee_history.to_json()
    assert (
        json.dumps(serialized, sort_keys=True, separators=(",", ":"))
        == '{"baseFeePerGas":["0x64","0x6e"],"gasUsedRatio":[1.0,2.0,3.0],'
        '"oldestBlock":"0x1e240","reward":null}'
    )
    assert FeeHistory.from_json(serialized) == fee_history


def test_reward_round_trip():
    fee_history = FeeHistory(
        oldest_block=BlockNumber(BlockTag.LATEST),
        base_fee_per_gas=[7],
        gas_used_ratio=[0.5],
        reward=[[1, 2], [3, 4]],
    )
    data = fee_history.to_json()
    assert data["reward"] == [["0x1", "0x2"], ["0x3", "0x4"]]
    assert FeeHistory.from_json(data) == fee_history


def test_missing_reward_is_none():
    parsed = FeeHistory.from_json(
        {"oldestBlock": "0x1", "baseFeePerGas": [], "gasUsedRatio": [1]}
    )
    assert parsed.reward is None
    assert parsed.gas_used_ratio == [1.0]


def test_missing_field_is_an_error():
    with pytest.raises(ValueError, match="gasUsedRatio"):
        FeeHistory.from_json({"oldestBlock": "0x1", "baseFeePerGas": []})


def test_invalid_oldest_block_is_an_error():
    with pytest.raises(ValueError, match="missing 0x prefix"):
        FeeHistory.from_json(
            {"oldestBlock": "64", "baseFeePerGas": [], "gasUsedRatio": []}
        )


def test_non_numeric_ratio_is_an_error():
    with pytest.raises(ValueError):
        FeeHistory.from_json(
            {"oldestBlock": "0x1", "baseFeePerGas": [], "gasUsedRatio": ["1.0"]}
        )
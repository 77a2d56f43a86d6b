import pytest

from web3types.block import Block, BlockHeader, BlockId, BlockNumber, BlockTag
from web3types.bytes import Bytes
from web3types.uint import H64, H160, H256

BLOOM = "0x" + "0e670ec64341771606e55d6b4ca35a1a6b75ee3d5145a99d05921026d1527331" * 8


def block_json():
    return {
        "miner": "0x0000000000000000000000000000000000000001",
        "number": "0x1b4",
        "hash": "0x0e670ec64341771606e55d6b4ca35a1a6b75ee3d5145a99d05921026d1527331",
        "parentHash": "0x9646252be9520f6e71339a8df9c55e4d7619deeb018d2a3f2d21fc165dde5eb5",
        "mixHash": "0x1010101010101010101010101010101010101010101010101010101010101010",
        "nonce": "0x0000000000000000",
        "sealFields": [
            "0xe04d296d2460cfb8472af2c5fd05b5a214109c25688d3704aed5484f9a7792f2",
            "0x0000000000000000",
        ],
        "sha3Uncles": "0x1dcc4de8dec75d7aab85b567b6ccd41ad312451b948a7413f0a142fd40d49347",
        "logsBloom": BLOOM,
        "transactionsRoot": "0x56e81f171bcc55a6ff8345e692c0f86e5b48e01b996cadc001622fb5e363b421",
        "receiptsRoot": "0x56e81f171bcc55a6ff8345e692c0f86e5b48e01b996cadc001622fb5e363b421",
        "stateRoot": "0xd5855eb08b3387c0af375e9cdb6acfc05eb8f519e419b874b6ff2ffda7ed1dff",
        "difficulty": "0x27f07",
        "totalDifficulty": "0x27f07",
        "extraData": "0x0000000000000000000000000000000000000000000000000000000000000000",
        "size": "0x27f07",
        "gasLimit": "0x9f759",
        "minGasPrice": "0x9f759",
        "gasUsed": "0x9f759",
        "timestamp": "0x54e34e8e",
        "transactions": [],
        "uncles": [],
    }


def test_block_miner():
    data = block_json()
    block = Block.from_json(data)
    assert block.author == H160.from_low_u64_be(1)
    assert block.base_fee_per_gas is None

    data["miner"] = None
    assert Block.from_json(data).author == H160()

    del data["miner"]
    assert Block.from_json(data).author == H160()


def test_post_london_block():
    data = block_json()
    data["baseFeePerGas"] = "0x7"
    block = Block.from_json(data)
    assert block.base_fee_per_gas == 7


def test_block_fields_parsed():
    block = Block.from_json(block_json())
    assert block.number == 0x1B4
    assert block.gas_used == 0x9F759
    assert block.timestamp == 0x54E34E8E
    assert block.nonce == H64()
    assert len(block.seal_fields) == 2
    assert block.extra_data == Bytes(bytes(32))
    assert block.total_difficulty == 0x27F07


def test_block_round_trip():
    data = block_json()
    data["baseFeePerGas"] = "0x7"
    block = Block.from_json(data)
    encoded = block.to_json()
    assert encoded["baseFeePerGas"] == "0x7"
    assert encoded["miner"] == "0x0000000000000000000000000000000000000001"
    assert Block.from_json(encoded) == block


def test_block_without_base_fee_omits_key():
    encoded = Block.from_json(block_json()).to_json()
    assert "baseFeePerGas" not in encoded
    assert encoded["totalDifficulty"] == "0x27f07"


def test_block_with_hash_transactions():
    data = block_json()
    tx_hash = "0x" + "ab" * 32
    data["transactions"] = [tx_hash]
    block = Block.from_json(data, H256.from_json)
    assert block.transactions == [H256.from_hex(tx_hash)]
    assert block.to_json()["transactions"] == [tx_hash]


def test_block_missing_required_field():
    data = block_json()
    del data["parentHash"]
    with pytest.raises(ValueError, match="parentHash"):
        Block.from_json(data)


def test_block_missing_seal_fields_defaults_to_empty():
    data = block_json()
    del data["sealFields"]
    assert Block.from_json(data).seal_fields == []


def test_block_header_parse_and_round_trip():
    header = BlockHeader.from_json(block_json())
    assert header.author == H160.from_low_u64_be(1)
    assert header.number == 0x1B4
    assert BlockHeader.from_json(header.to_json()) == header


def test_block_header_requires_logs_bloom():
    data = block_json()
    del data["logsBloom"]
    with pytest.raises(ValueError, match="logsBloom"):
        BlockHeader.from_json(data)


@pytest.mark.parametrize(
    "tag, text",
    [
        (BlockTag.LATEST, "latest"),
        (BlockTag.EARLIEST, "earliest"),
        (BlockTag.PENDING, "pending"),
        (BlockTag.FINALIZED, "finalized"),
        (BlockTag.SAFE, "safe"),
    ],
)
def test_serialize_deserialize_block_tag(tag, text):
    serialized = BlockNumber(tag).to_json()
    assert serialized == text
    assert BlockNumber.from_json(serialized) == BlockNumber(tag)


def test_serialize_deserialize_block_number():
    serialized = BlockNumber(100).to_json()
    assert serialized == "0x64"
    assert BlockNumber.from_json(serialized) == BlockNumber(100)


def test_block_number_missing_prefix():
    with pytest.raises(ValueError) as info:
        BlockNumber.from_json("64")
    assert str(info.value) == "invalid block number: missing 0x prefix"


def test_block_number_too_large():
    with pytest.raises(ValueError, match="invalid block number"):
        BlockNumber.from_json("0x" + "f" * 17)


def test_block_number_not_a_string():
    with pytest.raises(ValueError):
        BlockNumber.from_json(100)


def test_block_number_of_rejects_negative():
    with pytest.raises(ValueError):
        BlockNumber.of(-1)


def test_block_id_by_hash():
    block_id = BlockId.of(H256.from_low_u64_be(1))
    assert block_id.to_json() == {"blockHash": "0x" + "0" * 63 + "1"}


def test_block_id_by_number_and_tag():
    assert BlockId.of(100).to_json() == "0x64"
    assert BlockId.of(BlockTag.LATEST).to_json() == "latest"
    assert BlockId.of(BlockNumber(7)) == BlockId(BlockNumber(7))
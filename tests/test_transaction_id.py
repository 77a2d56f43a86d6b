import pytest

from web3types.block import BlockId, BlockNumber, BlockTag
from web3types.transaction_id import TransactionId
from web3types.uint import H160, H256


def test_by_hash_keeps_hash():
    tx_hash = H256.from_low_u64_be(3)
    ident = TransactionId.by_hash(tx_hash)
    assert ident.hash == tx_hash
    assert ident.block is None
    assert ident.index is None


def test_by_block_number():
    ident = TransactionId.by_block(5, 2)
    assert ident.block == BlockId(BlockNumber(5))
    assert ident.index == 2
    assert ident.hash is None


def test_by_block_tag_and_hash():
    assert TransactionId.by_block(BlockTag.LATEST, 0).block == BlockId(
        BlockNumber(BlockTag.LATEST)
    )
    block_hash = H256.from_low_u64_be(7)
    assert TransactionId.by_block(block_hash, 1).block == BlockId(block_hash)


def test_equality():
    assert TransactionId.by_block(5, 2) == TransactionId.by_block(BlockNumber(5), 2)
    assert TransactionId.by_block(5, 2) != TransactionId.by_block(5, 3)


def test_by_hash_rejects_other_types():
    with pytest.raises(ValueError):
        TransactionId.by_hash(H160.from_low_u64_be(1))


@pytest.mark.parametrize("index", [-1, 2**64, True, "1"])
def test_by_block_rejects_bad_index(index):
    with pytest.raises(ValueError):
        TransactionId.by_block(5, index)


def test_hash_and_block_together_are_rejected():
    with pytest.raises(ValueError):
        TransactionId(hash=H256(), block=BlockId.of(1), index=0)


def test_empty_id_is_rejected():
    with pytest.raises(ValueError):
        TransactionId()
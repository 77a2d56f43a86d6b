"""Ways of identifying a transaction."""

from __future__ import annotations

from dataclasses import dataclass

from web3types.block import BlockId
from web3types.uint import H256


@dataclass(frozen=True)
class TransactionId:
    """A transaction given by its hash, or by its block and index within it."""

    hash: H256 | None = None
    block: BlockId | None = None
    index: int | None = None

    def __post_init__(self):
        if self.hash is not None:
            if not isinstance(self.hash, H256):
                raise ValueError(f"invalid transaction hash: {self.hash!r}")
            if self.block is not None or self.index is not None:
                raise ValueError("a transaction id holds either a hash or a block and index")
            return
        if not isinstance(self.block, BlockId):
            raise ValueError(f"invalid block id: {self.block!r}")
        index = self.index
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < 2**64:
            raise ValueError(f"invalid transaction index: {index!r}")

    @classmethod
    def by_hash(cls, hash):
        return cls(hash=hash)

    @classmethod
    def by_block(cls, block, index):
        """Identify by block (hash, number, tag or id) and position in it."""
        return cls(block=BlockId.of(block), index=index)
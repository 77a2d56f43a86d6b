"""Blocks, block headers and block identifiers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from web3types.bytes import Bytes
from web3types.uint import H64, H160, H256, H2048, decode_quantity, encode_quantity


class BlockTag(Enum):
    """Named positions in the chain that stand in for a block number."""

    FINALIZED = "finalized"
    SAFE = "safe"
    LATEST = "latest"
    EARLIEST = "earliest"
    PENDING = "pending"


_TAGS = {tag.value: tag for tag in BlockTag}


@dataclass(frozen=True)
class BlockNumber:
    """A block given by a tag or by its number on the canonical chain."""

    value: BlockTag | int

    def __post_init__(self):
        if isinstance(self.value, BlockTag):
            return
        if (
            isinstance(self.value, bool)
            or not isinstance(self.value, int)
            or not 0 <= self.value < 2**64
        ):
            raise ValueError(f"invalid block number: {self.value!r}")

    @classmethod
    def of(cls, value):
        """Wrap a tag or a 64-bit unsigned integer."""
        if isinstance(value, BlockNumber):
            return value
        return cls(value)

    def to_json(self):
        if isinstance(self.value, BlockTag):
            return self.value.value
        return encode_quantity(self.value)

    @classmethod
    def from_json(cls, value):
        if not isinstance(value, str):
            raise ValueError(
                f"invalid block number: expected a string, got {type(value).__name__}"
            )
        tag = _TAGS.get(value)
        if tag is not None:
            return cls(tag)
        if not value.startswith("0x"):
            raise ValueError("invalid block number: missing 0x prefix")
        try:
            number = decode_quantity(value, 64)
        except ValueError as exc:
            raise ValueError(f"invalid block number: {exc}") from exc
        return cls(number)


@dataclass(frozen=True)
class BlockId:
    """A block given by its hash or by its number."""

    value: H256 | BlockNumber

    def __post_init__(self):
        if not isinstance(self.value, (H256, BlockNumber)):
            raise ValueError(f"invalid block id: {self.value!r}")

    @classmethod
    def of(cls, value):
        """Wrap a hash, a block number, a tag or an integer."""
        if isinstance(value, BlockId):
            return value
        if isinstance(value, (H256, BlockNumber)):
            return cls(value)
        return cls(BlockNumber.of(value))

    def to_json(self):
        if isinstance(self.value, H256):
            return {"blockHash": self.value.to_json()}
        return self.value.to_json()


def _object(value, what):
    if not isinstance(value, dict):
        raise ValueError(f"invalid type: expected {what} object")
    return value


def _required(obj, key, parse):
    if key not in obj:
        raise ValueError(f"missing field `{key}`")
    try:
        return parse(obj[key])
    except ValueError as exc:
        raise ValueError(f"invalid `{key}`: {exc}") from exc


def _optional(obj, key, parse):
    raw = obj.get(key)
    if raw is None:
        return None
    try:
        return parse(raw)
    except ValueError as exc:
        raise ValueError(f"invalid `{key}`: {exc}") from exc


def _array(parse):
    def parse_array(value):
        if not isinstance(value, list):
            raise ValueError("expected an array")
        return [parse(item) for item in value]

    return parse_array


def _u64(value):
    return decode_quantity(value, 64)


def _u256(value):
    return decode_quantity(value, 256)


def _encode_optional(value, encode):
    return None if value is None else encode(value)


def _parse_head(obj):
    return {
        "hash": _optional(obj, "hash", H256.from_json),
        "parent_hash": _required(obj, "parentHash", H256.from_json),
        "uncles_hash": _required(obj, "sha3Uncles", H256.from_json),
        "author": _optional(obj, "miner", H160.from_json) or H160(),
        "state_root": _required(obj, "stateRoot", H256.from_json),
        "transactions_root": _required(obj, "transactionsRoot", H256.from_json),
        "receipts_root": _required(obj, "receiptsRoot", H256.from_json),
        "number": _optional(obj, "number", _u64),
        "gas_used": _required(obj, "gasUsed", _u256),
        "gas_limit": _required(obj, "gasLimit", _u256),
        "base_fee_per_gas": _optional(obj, "baseFeePerGas", _u256),
        "extra_data": _required(obj, "extraData", Bytes.from_json),
        "timestamp": _required(obj, "timestamp", _u256),
        "difficulty": _required(obj, "difficulty", _u256),
        "mix_hash": _optional(obj, "mixHash", H256.from_json),
        "nonce": _optional(obj, "nonce", H64.from_json),
    }


def _encode_head(block):
    data = {
        "hash": _encode_optional(block.hash, H256.to_json),
        "parentHash": block.parent_hash.to_json(),
        "sha3Uncles": block.uncles_hash.to_json(),
        "miner": block.author.to_json(),
        "stateRoot": block.state_root.to_json(),
        "transactionsRoot": block.transactions_root.to_json(),
        "receiptsRoot": block.receipts_root.to_json(),
        "number": _encode_optional(block.number, encode_quantity),
        "gasUsed": encode_quantity(block.gas_used),
        "gasLimit": encode_quantity(block.gas_limit),
    }
    if block.base_fee_per_gas is not None:
        data["baseFeePerGas"] = encode_quantity(block.base_fee_per_gas)
    data["extraData"] = block.extra_data.to_json()
    data["logsBloom"] = _encode_optional(block.logs_bloom, H2048.to_json)
    data["timestamp"] = encode_quantity(block.timestamp)
    data["difficulty"] = encode_quantity(block.difficulty)
    return data


def _encode_tail(block):
    return {
        "mixHash": _encode_optional(block.mix_hash, H256.to_json),
        "nonce": _encode_optional(block.nonce, H64.to_json),
    }


def _encode_transaction(tx):
    encode = getattr(tx, "to_json", None)
    return encode() if callable(encode) else tx


@dataclass
class BlockHeader:
    """A block header as returned by a node."""

    hash: H256 | None
    parent_hash: H256
    uncles_hash: H256
    author: H160
    state_root: H256
    transactions_root: H256
    receipts_root: H256
    number: int | None
    gas_used: int
    gas_limit: int
    base_fee_per_gas: int | None
    extra_data: Bytes
    logs_bloom: H2048
    timestamp: int
    difficulty: int
    mix_hash: H256 | None
    nonce: H64 | None

    def to_json(self):
        data = _encode_head(self)
        data.update(_encode_tail(self))
        return data

    @classmethod
    def from_json(cls, value):
        obj = _object(value, "block header")
        fields = _parse_head(obj)
        fields["logs_bloom"] = _required(obj, "logsBloom", H2048.from_json)
        return cls(**fields)


@dataclass
class Block:
    """A block as returned by a node, holding transactions of any kind."""

    hash: H256 | None = None
    parent_hash: H256 = field(default_factory=H256)
    uncles_hash: H256 = field(default_factory=H256)
    author: H160 = field(default_factory=H160)
    state_root: H256 = field(default_factory=H256)
    transactions_root: H256 = field(default_factory=H256)
    receipts_root: H256 = field(default_factory=H256)
    number: int | None = None
    gas_used: int = 0
    gas_limit: int = 0
    base_fee_per_gas: int | None = None
    extra_data: Bytes = field(default_factory=Bytes)
    logs_bloom: H2048 | None = None
    timestamp: int = 0
    difficulty: int = 0
    total_difficulty: int | None = None
    seal_fields: list[Bytes] = field(default_factory=list)
    uncles: list[H256] = field(default_factory=list)
    transactions: list[Any] = field(default_factory=list)
    size: int | None = None
    mix_hash: H256 | None = None
    nonce: H64 | None = None

    def to_json(self):
        data = _encode_head(self)
        data["totalDifficulty"] = _encode_optional(self.total_difficulty, encode_quantity)
        data["sealFields"] = [item.to_json() for item in self.seal_fields]
        data["uncles"] = [item.to_json() for item in self.uncles]
        data["transactions"] = [_encode_transaction(tx) for tx in self.transactions]
        data["size"] = _encode_optional(self.size, encode_quantity)
        data.update(_encode_tail(self))
        return data

    @classmethod
    def from_json(cls, value, parse_transaction=None):
        """Parse a block; each transaction goes through ``parse_transaction`` if given."""
        obj = _object(value, "block")
        parse_tx = parse_transaction if parse_transaction is not None else (lambda tx: tx)
        fields = _parse_head(obj)
        fields["logs_bloom"] = _optional(obj, "logsBloom", H2048.from_json)
        fields["total_difficulty"] = _optional(obj, "totalDifficulty", _u256)
        fields["seal_fields"] = (
            _required(obj, "sealFields", _array(Bytes.from_json)) if "sealFields" in obj else []
        )
        fields["uncles"] = _required(obj, "uncles", _array(H256.from_json))
        fields["transactions"] = _required(obj, "transactions", _array(parse_tx))
        fields["size"] = _optional(obj, "size", _u256)
        return cls(**fields)
"""Event logs and the filters used to query them."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from web3types.block import BlockNumber
from web3types.bytes import Bytes
from web3types.uint import H160, H256, decode_quantity, encode_quantity


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


def _hash_list(value):
    if not isinstance(value, list):
        raise ValueError("expected an array")
    return [H256.from_json(item) for item in value]


def _u64(value):
    return decode_quantity(value, 64)


def _u256(value):
    return decode_quantity(value, 256)


def _string(value):
    if not isinstance(value, str):
        raise ValueError("expected a string")
    return value


def _boolean(value):
    if not isinstance(value, bool):
        raise ValueError("expected a boolean")
    return value


def _encode_optional(value, encode):
    return None if value is None else encode(value)


@dataclass
class Log:
    """A log entry produced by a transaction."""

    address: H160
    topics: list[H256] = field(default_factory=list)
    data: Bytes = field(default_factory=Bytes)
    block_hash: H256 | None = None
    block_number: int | None = None
    transaction_hash: H256 | None = None
    transaction_index: int | None = None
    log_index: int | None = None
    transaction_log_index: int | None = None
    log_type: str | None = None
    removed: bool | None = None

    def is_removed(self):
        """True if the log was removed by a chain reorganisation."""
        if self.removed is not None:
            return self.removed
        return self.log_type == "removed"

    def to_json(self):
        return {
            "address": self.address.to_json(),
            "topics": [topic.to_json() for topic in self.topics],
            "data": self.data.to_json(),
            "blockHash": _encode_optional(self.block_hash, H256.to_json),
            "blockNumber": _encode_optional(self.block_number, encode_quantity),
            "transactionHash": _encode_optional(self.transaction_hash, H256.to_json),
            "transactionIndex": _encode_optional(self.transaction_index, encode_quantity),
            "logIndex": _encode_optional(self.log_index, encode_quantity),
            "transactionLogIndex": _encode_optional(self.transaction_log_index, encode_quantity),
            "logType": self.log_type,
            "removed": self.removed,
        }

    @classmethod
    def from_json(cls, value):
        obj = _object(value, "log")
        return cls(
            address=_required(obj, "address", H160.from_json),
            topics=_required(obj, "topics", _hash_list),
            data=_required(obj, "data", Bytes.from_json),
            block_hash=_optional(obj, "blockHash", H256.from_json),
            block_number=_optional(obj, "blockNumber", _u64),
            transaction_hash=_optional(obj, "transactionHash", H256.from_json),
            transaction_index=_optional(obj, "transactionIndex", _u64),
            log_index=_optional(obj, "logIndex", _u256),
            transaction_log_index=_optional(obj, "transactionLogIndex", _u256),
            log_type=_optional(obj, "logType", _string),
            removed=_optional(obj, "removed", _boolean),
        )


@dataclass(frozen=True)
class TopicFilter:
    """Topic constraints of an event.

    Each topic is None (any value), a single ``H256`` or a list of ``H256``
    (one of them).
    """

    topic0: Any = None
    topic1: Any = None
    topic2: Any = None
    topic3: Any = None


def _topic_to_option(topic):
    if topic is None:
        return None
    if isinstance(topic, H256):
        return [topic]
    return list(topic)


def _value_or_array(items):
    if not items:
        return None
    if len(items) == 1:
        return items[0].to_json()
    return [item.to_json() for item in items]


@dataclass(frozen=True)
class Filter:
    """Criteria for selecting logs."""

    from_block: BlockNumber | None = None
    to_block: BlockNumber | None = None
    block_hash: H256 | None = None
    address: tuple[H160, ...] | None = None
    topics: tuple[tuple[H256, ...] | None, ...] | None = None
    limit: int | None = None

    def to_json(self):
        data = {}
        if self.from_block is not None:
            data["fromBlock"] = self.from_block.to_json()
        if self.to_block is not None:
            data["toBlock"] = self.to_block.to_json()
        if self.block_hash is not None:
            data["blockHash"] = self.block_hash.to_json()
        if self.address is not None:
            data["address"] = _value_or_array(self.address)
        if self.topics is not None:
            data["topics"] = [
                None if topic is None else _value_or_array(topic) for topic in self.topics
            ]
        if self.limit is not None:
            data["limit"] = self.limit
        return data


class FilterBuilder:
    """Fluent builder of a log filter."""

    def __init__(self):
        self._filter = Filter()

    def _set(self, **changes):
        self._filter = replace(self._filter, **changes)
        return self

    def from_block(self, block):
        """Set the first block; clears a block hash set before."""
        return self._set(block_hash=None, from_block=BlockNumber.of(block))

    def to_block(self, block):
        """Set the last block; clears a block hash set before."""
        return self._set(block_hash=None, to_block=BlockNumber.of(block))

    def block_hash(self, hash):
        """Select a single block by hash; clears the block range."""
        return self._set(from_block=None, to_block=None, block_hash=hash)

    def address(self, address):
        return self._set(address=tuple(address))

    def topics(self, topic1=None, topic2=None, topic3=None, topic4=None):
        """Set up to four topic positions; trailing unset positions are dropped."""
        entries = [topic1, topic2, topic3, topic4]
        while entries and entries[-1] is None:
            entries.pop()
        return self._set(
            topics=tuple(None if entry is None else tuple(entry) for entry in entries)
        )

    def topic_filter(self, topic_filter):
        return self.topics(
            _topic_to_option(topic_filter.topic0),
            _topic_to_option(topic_filter.topic1),
            _topic_to_option(topic_filter.topic2),
            _topic_to_option(topic_filter.topic3),
        )

    def limit(self, limit):
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
            raise ValueError(f"invalid limit: {limit!r}")
        return self._set(limit=limit)

    def build(self):
        return self._filter
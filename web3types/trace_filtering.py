"""Traces returned by the transaction-trace filtering API."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

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


def _u256(value):
    return decode_quantity(value, 256)


def _uint(bits):
    def parse(value):
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < 2**bits:
            raise ValueError(f"expected a {bits}-bit unsigned integer")
        return value

    return parse


def _usize_list(value):
    if not isinstance(value, list):
        raise ValueError("expected an array")
    return [_uint(64)(item) for item in value]


def _string(value):
    if not isinstance(value, str):
        raise ValueError("expected a string")
    return value


def _enum(enum_cls):
    def parse(value):
        if not isinstance(value, str):
            raise ValueError(f"expected a string for {enum_cls.__name__}")
        try:
            return enum_cls(value)
        except ValueError:
            raise ValueError(f"unknown variant {value!r} of {enum_cls.__name__}") from None

    return parse


@dataclass(frozen=True)
class TraceFilter:
    """Criteria for selecting traces."""

    from_block: BlockNumber | None = None
    to_block: BlockNumber | None = None
    from_address: tuple[H160, ...] | None = None
    to_address: tuple[H160, ...] | None = None
    after: int | None = None
    count: int | None = None

    def to_json(self):
        data = {}
        if self.from_block is not None:
            data["fromBlock"] = self.from_block.to_json()
        if self.to_block is not None:
            data["toBlock"] = self.to_block.to_json()
        if self.from_address is not None:
            data["fromAddress"] = [item.to_json() for item in self.from_address]
        if self.to_address is not None:
            data["toAddress"] = [item.to_json() for item in self.to_address]
        if self.after is not None:
            data["after"] = self.after
        if self.count is not None:
            data["count"] = self.count
        return data


def _non_negative(value, what):
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"invalid {what}: {value!r}")
    return value


class TraceFilterBuilder:
    """Fluent builder of a trace filter."""

    def __init__(self):
        self._filter = TraceFilter()

    def _set(self, **changes):
        self._filter = replace(self._filter, **changes)
        return self

    def from_block(self, block):
        return self._set(from_block=BlockNumber.of(block))

    def to_block(self, block):
        return self._set(to_block=BlockNumber.of(block))

    def to_address(self, address):
        return self._set(to_address=tuple(address))

    def from_address(self, address):
        return self._set(from_address=tuple(address))

    def after(self, after):
        """Skip this many traces of the output."""
        return self._set(after=_non_negative(after, "offset"))

    def count(self, count):
        """Return at most this many traces."""
        return self._set(count=_non_negative(count, "count"))

    def build(self):
        return self._filter


class ActionType(Enum):
    """Kind of an external action."""

    CALL = "call"
    CREATE = "create"
    SUICIDE = "suicide"
    REWARD = "reward"


class CallType(Enum):
    """Kind of a message call."""

    NONE = "none"
    CALL = "call"
    CALL_CODE = "callcode"
    DELEGATE_CALL = "delegatecall"
    STATIC_CALL = "staticcall"


class RewardType(Enum):
    """Origin of a reward."""

    BLOCK = "block"
    UNCLE = "uncle"
    EMPTY_STEP = "emptyStep"
    EXTERNAL = "external"


@dataclass
class CallResult:
    """Outcome of a call."""

    gas_used: int = 0
    output: Bytes = field(default_factory=Bytes)

    def to_json(self):
        return {"gasUsed": encode_quantity(self.gas_used), "output": self.output.to_json()}

    @classmethod
    def from_json(cls, value):
        obj = _object(value, "call result")
        return cls(
            gas_used=_required(obj, "gasUsed", _u256),
            output=_required(obj, "output", Bytes.from_json),
        )


@dataclass
class CreateResult:
    """Outcome of a contract creation."""

    gas_used: int = 0
    code: Bytes = field(default_factory=Bytes)
    address: H160 = field(default_factory=H160)

    def to_json(self):
        return {
            "gasUsed": encode_quantity(self.gas_used),
            "code": self.code.to_json(),
            "address": self.address.to_json(),
        }

    @classmethod
    def from_json(cls, value):
        obj = _object(value, "create result")
        return cls(
            gas_used=_required(obj, "gasUsed", _u256),
            code=_required(obj, "code", Bytes.from_json),
            address=_required(obj, "address", H160.from_json),
        )


@dataclass
class Call:
    """A message call action."""

    sender: H160 = field(default_factory=H160)
    to: H160 = field(default_factory=H160)
    value: int = 0
    gas: int = 0
    input: Bytes = field(default_factory=Bytes)
    call_type: CallType = CallType.NONE

    def to_json(self):
        return {
            "from": self.sender.to_json(),
            "to": self.to.to_json(),
            "value": encode_quantity(self.value),
            "gas": encode_quantity(self.gas),
            "input": self.input.to_json(),
            "callType": self.call_type.value,
        }

    @classmethod
    def from_json(cls, value):
        obj = _object(value, "call")
        return cls(
            sender=_required(obj, "from", H160.from_json),
            to=_required(obj, "to", H160.from_json),
            value=_required(obj, "value", _u256),
            gas=_required(obj, "gas", _u256),
            input=_required(obj, "input", Bytes.from_json),
            call_type=_required(obj, "callType", _enum(CallType)),
        )


@dataclass
class Create:
    """A contract creation action."""

    sender: H160 = field(default_factory=H160)
    value: int = 0
    gas: int = 0
    init: Bytes = field(default_factory=Bytes)

    def to_json(self):
        return {
            "from": self.sender.to_json(),
            "value": encode_quantity(self.value),
            "gas": encode_quantity(self.gas),
            "init": self.init.to_json(),
        }

    @classmethod
    def from_json(cls, value):
        obj = _object(value, "create")
        return cls(
            sender=_required(obj, "from", H160.from_json),
            value=_required(obj, "value", _u256),
            gas=_required(obj, "gas", _u256),
            init=_required(obj, "init", Bytes.from_json),
        )


@dataclass
class Suicide:
    """A self-destruct action."""

    address: H160 = field(default_factory=H160)
    refund_address: H160 = field(default_factory=H160)
    balance: int = 0

    def to_json(self):
        return {
            "address": self.address.to_json(),
            "refundAddress": self.refund_address.to_json(),
            "balance": encode_quantity(self.balance),
        }

    @classmethod
    def from_json(cls, value):
        obj = _object(value, "suicide")
        return cls(
            address=_required(obj, "address", H160.from_json),
            refund_address=_required(obj, "refundAddress", H160.from_json),
            balance=_required(obj, "balance", _u256),
        )


@dataclass
class Reward:
    """A reward action."""

    author: H160
    value: int
    reward_type: RewardType

    def to_json(self):
        return {
            "author": self.author.to_json(),
            "value": encode_quantity(self.value),
            "rewardType": self.reward_type.value,
        }

    @classmethod
    def from_json(cls, value):
        obj = _object(value, "reward")
        return cls(
            author=_required(obj, "author", H160.from_json),
            value=_required(obj, "value", _u256),
            reward_type=_required(obj, "rewardType", _enum(RewardType)),
        )


_ACTION_KINDS = (Call, Create, Suicide, Reward)
_RESULT_KINDS = (CallResult, CreateResult)


def parse_action(value):
    """Parse whichever action shape the value matches first."""
    for kind in _ACTION_KINDS:
        try:
            return kind.from_json(value)
        except ValueError:
            continue
    raise ValueError("data did not match any variant of untagged enum Action")


def parse_result(value):
    """Parse a call or create result; null gives None."""
    if value is None:
        return None
    for kind in _RESULT_KINDS:
        try:
            return kind.from_json(value)
        except ValueError:
            continue
    raise ValueError("data did not match any variant of untagged enum Res")


def _encode_optional(value, encode):
    return None if value is None else encode(value)


@dataclass
class Trace:
    """A trace located in a block and transaction."""

    action: Call | Create | Suicide | Reward
    result: CallResult | CreateResult | None
    trace_address: list[int]
    subtraces: int
    transaction_position: int | None
    transaction_hash: H256 | None
    block_number: int
    block_hash: H256
    action_type: ActionType
    error: str | None = None

    def to_json(self):
        return {
            "action": self.action.to_json(),
            "result": _encode_optional(self.result, lambda result: result.to_json()),
            "traceAddress": list(self.trace_address),
            "subtraces": self.subtraces,
            "transactionPosition": self.transaction_position,
            "transactionHash": _encode_optional(self.transaction_hash, H256.to_json),
            "blockNumber": self.block_number,
            "blockHash": self.block_hash.to_json(),
            "type": self.action_type.value,
            "error": self.error,
        }

    @classmethod
    def from_json(cls, value):
        obj = _object(value, "trace")
        return cls(
            action=_required(obj, "action", parse_action),
            result=_optional(obj, "result", parse_result),
            trace_address=_required(obj, "traceAddress", _usize_list),
            subtraces=_required(obj, "subtraces", _uint(64)),
            transaction_position=_optional(obj, "transactionPosition", _uint(64)),
            transaction_hash=_optional(obj, "transactionHash", H256.from_json),
            block_number=_required(obj, "blockNumber", _uint(64)),
            block_hash=_required(obj, "blockHash", H256.from_json),
            action_type=_required(obj, "type", _enum(ActionType)),
            error=_optional(obj, "error", _string),
        )
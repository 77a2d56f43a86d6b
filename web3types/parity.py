"""Peer information and pending-transaction filters of Parity nodes."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from web3types.uint import FixedHash, H160, decode_quantity, encode_quantity


def _object(value, what):
    if not isinstance(value, dict):
        raise ValueError(f"invalid type: expected {what} object")
    return value


def _field(obj, key):
    try:
        return obj[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None


def _uint(value, key, bits):
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < 2**bits:
        raise ValueError(f"invalid value for `{key}`: expected a {bits}-bit unsigned integer")
    return value


def _string(value, key):
    if not isinstance(value, str):
        raise ValueError(f"invalid value for `{key}`: expected a string")
    return value


def _optional(value, parse):
    return None if value is None else parse(value)


@dataclass
class PeerNetworkInfo:
    """Remote and local addresses of a peer connection."""

    remote_address: str
    local_address: str

    def to_json(self):
        return {"remoteAddress": self.remote_address, "localAddress": self.local_address}

    @classmethod
    def from_json(cls, value):
        obj = _object(value, "network info")
        return cls(
            remote_address=_string(_field(obj, "remoteAddress"), "remoteAddress"),
            local_address=_string(_field(obj, "localAddress"), "localAddress"),
        )


@dataclass
class EthProtocolInfo:
    """Eth protocol version, difficulty and chain head."""

    version: int
    difficulty: int | None
    head: str

    def to_json(self):
        return {
            "version": self.version,
            "difficulty": _optional(self.difficulty, encode_quantity),
            "head": self.head,
        }

    @classmethod
    def from_json(cls, value):
        obj = _object(value, "eth protocol info")
        return cls(
            version=_uint(_field(obj, "version"), "version", 32),
            difficulty=_optional(obj.get("difficulty"), lambda v: decode_quantity(v, 256)),
            head=_string(_field(obj, "head"), "head"),
        )


@dataclass
class PipProtocolInfo:
    """Pip protocol version, difficulty and chain head."""

    version: int
    difficulty: int
    head: str

    def to_json(self):
        return {
            "version": self.version,
            "difficulty": encode_quantity(self.difficulty),
            "head": self.head,
        }

    @classmethod
    def from_json(cls, value):
        obj = _object(value, "pip protocol info")
        return cls(
            version=_uint(_field(obj, "version"), "version", 32),
            difficulty=decode_quantity(_field(obj, "difficulty"), 256),
            head=_string(_field(obj, "head"), "head"),
        )


@dataclass
class PeerProtocolsInfo:
    """Protocol details a peer speaks."""

    eth: EthProtocolInfo | None = None
    pip: PipProtocolInfo | None = None

    def to_json(self):
        return {
            "eth": _optional(self.eth, EthProtocolInfo.to_json),
            "pip": _optional(self.pip, PipProtocolInfo.to_json),
        }

    @classmethod
    def from_json(cls, value):
        obj = _object(value, "protocols info")
        return cls(
            eth=_optional(obj.get("eth"), EthProtocolInfo.from_json),
            pip=_optional(obj.get("pip"), PipProtocolInfo.from_json),
        )


@dataclass
class ParityPeerInfo:
    """Details of one peer."""

    id: str | None
    name: str
    caps: list[str]
    network: PeerNetworkInfo
    protocols: PeerProtocolsInfo

    def to_json(self):
        return {
            "id": self.id,
            "name": self.name,
            "caps": list(self.caps),
            "network": self.network.to_json(),
            "protocols": self.protocols.to_json(),
        }

    @classmethod
    def from_json(cls, value):
        obj = _object(value, "peer info")
        caps = _field(obj, "caps")
        if not isinstance(caps, list):
            raise ValueError("invalid value for `caps`: expected an array")
        return cls(
            id=_optional(obj.get("id"), lambda v: _string(v, "id")),
            name=_string(_field(obj, "name"), "name"),
            caps=[_string(item, "caps") for item in caps],
            network=PeerNetworkInfo.from_json(_field(obj, "network")),
            protocols=PeerProtocolsInfo.from_json(_field(obj, "protocols")),
        )


@dataclass
class ParityPeerType:
    """Peer counts and the list of peers of a node."""

    active: int
    connected: int
    max: int
    peers: list[ParityPeerInfo] = field(default_factory=list)

    def to_json(self):
        return {
            "active": self.active,
            "connected": self.connected,
            "max": self.max,
            "peers": [peer.to_json() for peer in self.peers],
        }

    @classmethod
    def from_json(cls, value):
        obj = _object(value, "peers")
        peers = _field(obj, "peers")
        if not isinstance(peers, list):
            raise ValueError("invalid value for `peers`: expected an array")
        return cls(
            active=_uint(_field(obj, "active"), "active", 64),
            connected=_uint(_field(obj, "connected"), "connected", 64),
            max=_uint(_field(obj, "max"), "max", 32),
            peers=[ParityPeerInfo.from_json(peer) for peer in peers],
        )


class FilterOperator(Enum):
    """Comparison applied by a filter condition."""

    LOWER_THAN = "lt"
    EQUAL = "eq"
    GREATER_THAN = "gt"


def _encode_value(value):
    if isinstance(value, FixedHash):
        return value.to_json()
    return encode_quantity(value)


@dataclass(frozen=True)
class FilterCondition:
    """A comparison of a transaction field against a value."""

    operator: FilterOperator
    value: Any

    @classmethod
    def lower_than(cls, value):
        return cls(FilterOperator.LOWER_THAN, value)

    @classmethod
    def equal(cls, value):
        return cls(FilterOperator.EQUAL, value)

    @classmethod
    def greater_than(cls, value):
        return cls(FilterOperator.GREATER_THAN, value)

    def to_json(self):
        return {self.operator.value: _encode_value(self.value)}


def _condition(value):
    return value if isinstance(value, FilterCondition) else FilterCondition.equal(value)


@dataclass(frozen=True)
class ToFilter:
    """Recipient filter: an address, or contract creation when no address is set."""

    address: H160 | None = None

    @classmethod
    def action(cls):
        """Match contract-creation transactions."""
        return cls()

    def to_json(self):
        if self.address is None:
            return {"action": "contract_creation"}
        return {"eq": self.address.to_json()}


@dataclass(frozen=True)
class ParityPendingTransactionFilter:
    """Filter for pending transactions."""

    sender: FilterCondition | None = None
    to: ToFilter | None = None
    gas: FilterCondition | None = None
    gas_price: FilterCondition | None = None
    value: FilterCondition | None = None
    nonce: FilterCondition | None = None

    @classmethod
    def builder(cls):
        return ParityPendingTransactionFilterBuilder()

    def to_json(self):
        entries = (
            ("from", self.sender),
            ("to", self.to),
            ("gas", self.gas),
            ("gas_price", self.gas_price),
            ("value", self.value),
            ("nonce", self.nonce),
        )
        return {key: item.to_json() for key, item in entries if item is not None}


class ParityPendingTransactionFilterBuilder:
    """Fluent builder of a pending-transaction filter."""

    def __init__(self):
        self._filter = ParityPendingTransactionFilter()

    def _set(self, **changes):
        self._filter = replace(self._filter, **changes)
        return self

    def from_address(self, address):
        return self._set(sender=FilterCondition.equal(address))

    def to(self, to_or_action):
        if isinstance(to_or_action, H160):
            to_or_action = ToFilter(to_or_action)
        return self._set(to=to_or_action)

    def gas(self, gas):
        return self._set(gas=_condition(gas))

    def gas_price(self, gas_price):
        return self._set(gas_price=_condition(gas_price))

    def value(self, value):
        return self._set(value=_condition(value))

    def nonce(self, nonce):
        return self._set(nonce=_condition(nonce))

    def build(self):
        return self._filter
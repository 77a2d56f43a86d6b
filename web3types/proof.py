"""Account and storage proofs returned by eth_getProof."""

from __future__ import annotations

from dataclasses import dataclass, field

from web3types.bytes import Bytes
from web3types.uint import H256, decode_quantity, encode_quantity


def _object(value, what):
    if not isinstance(value, dict):
        raise ValueError(f"invalid type: expected {what} object")
    return value


def _field(obj, key):
    try:
        return obj[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None


def _bytes_list(value, key):
    if not isinstance(value, list):
        raise ValueError(f"invalid type for `{key}`: expected an array")
    return [Bytes.from_json(item) for item in value]


@dataclass
class StorageProof:
    """A storage key-value pair and its state proof."""

    key: int = 0
    value: int = 0
    proof: list[Bytes] = field(default_factory=list)

    def to_json(self):
        return {
            "key": encode_quantity(self.key),
            "value": encode_quantity(self.value),
            "proof": [item.to_json() for item in self.proof],
        }

    @classmethod
    def from_json(cls, value):
        obj = _object(value, "storage proof")
        return cls(
            key=decode_quantity(_field(obj, "key"), 256),
            value=decode_quantity(_field(obj, "value"), 256),
            proof=_bytes_list(_field(obj, "proof"), "proof"),
        )


@dataclass
class Proof:
    """Account proof with the requested storage entries."""

    balance: int = 0
    code_hash: H256 = field(default_factory=H256)
    nonce: int = 0
    storage_hash: H256 = field(default_factory=H256)
    account_proof: list[Bytes] = field(default_factory=list)
    storage_proof: list[StorageProof] = field(default_factory=list)

    def to_json(self):
        return {
            "balance": encode_quantity(self.balance),
            "codeHash": self.code_hash.to_json(),
            "nonce": encode_quantity(self.nonce),
            "storageHash": self.storage_hash.to_json(),
            "accountProof": [item.to_json() for item in self.account_proof],
            "storageProof": [item.to_json() for item in self.storage_proof],
        }

    @classmethod
    def from_json(cls, value):
        obj = _object(value, "proof")
        storage = _field(obj, "storageProof")
        if not isinstance(storage, list):
            raise ValueError("invalid type for `storageProof`: expected an array")
        return cls(
            balance=decode_quantity(_field(obj, "balance"), 256),
            code_hash=H256.from_json(_field(obj, "codeHash")),
            nonce=decode_quantity(_field(obj, "nonce"), 256),
            storage_hash=H256.from_json(_field(obj, "storageHash")),
            account_proof=_bytes_list(_field(obj, "accountProof"), "accountProof"),
            storage_proof=[StorageProof.from_json(item) for item in storage],
        )
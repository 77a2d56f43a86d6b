import pytest

from web3types.parity import (
    EthProtocolInfo,
    FilterCondition,
    FilterOperator,
    ParityPeerInfo,
    ParityPeerType,
    ParityPendingTransactionFilter,
    PeerNetworkInfo,
    PeerProtocolsInfo,
    PipProtocolInfo,
    ToFilter,
)
from web3types.uint import H160, H256, encode_quantity


def _peers():
    peer = ParityPeerInfo(
        id="peer-one",
        name="node/v1",
        caps=["eth/63", "par/1"],
        network=PeerNetworkInfo(remote_address="10.0.0.1:30303", local_address="127.0.0.1:30303"),
        protocols=PeerProtocolsInfo(
            eth=EthProtocolInfo(version=63, difficulty=None, head=H256.from_low_u64_be(1).to_json()),
            pip=PipProtocolInfo(version=1, difficulty=100, head=H256.from_low_u64_be(2).to_json()),
        ),
    )
    return ParityPeerType(active=1, connected=1, max=25, peers=[peer])


def test_peer_type_round_trip():
    peers = _peers()
    assert ParityPeerType.from_json(peers.to_json()) == peers


def test_network_info_uses_camel_case():
    data = _peers().peers[0].network.to_json()
    assert set(data) == {"remoteAddress", "localAddress"}
    assert data["remoteAddress"] == "10.0.0.1:30303"


def test_missing_optional_fields_become_none():
    info = ParityPeerInfo.from_json(
        {
            "name": "node",
            "caps": [],
            "network": {"remoteAddress": "a", "localAddress": "b"},
            "protocols": {},
        }
    )
    assert info.id is None
    assert info.protocols == PeerProtocolsInfo()
    assert info.to_json()["protocols"] == {"eth": None, "pip": None}


def test_eth_difficulty_serialized_as_quantity():
    eth = EthProtocolInfo(version=63, difficulty=100, head="0x00")
    assert eth.to_json()["difficulty"] == encode_quantity(100)
    assert EthProtocolInfo.from_json(eth.to_json()) == eth


def test_version_must_fit_u32():
    with pytest.raises(ValueError):
        EthProtocolInfo.from_json({"version": 2**32, "head": "x"})


def test_missing_required_field_is_rejected():
    with pytest.raises(ValueError, match="name"):
        ParityPeerInfo.from_json({"caps": [], "network": {}, "protocols": {}})


def test_filter_condition_json():
    assert FilterCondition.lower_than(5).to_json() == {"lt": "0x5"}
    address = H160.from_low_u64_be(1)
    assert FilterCondition.equal(address).to_json() == {"eq": address.to_json()}
    assert FilterCondition.greater_than(7).operator is FilterOperator.GREATER_THAN


def test_to_filter_json():
    address = H160.from_low_u64_be(9)
    assert ToFilter(address).to_json() == {"eq": address.to_json()}
    assert ToFilter.action().to_json() == {"action": "contract_creation"}


def test_empty_filter_serializes_to_empty_object():
    assert ParityPendingTransactionFilter().to_json() == {}


def test_builder_sets_fields():
    address = H160.from_low_u64_be(5)
    flt = (
        ParityPendingTransactionFilter.builder()
        .from_address(address)
        .to(ToFilter.action())
        .gas(21000)
        .gas_price(FilterCondition.greater_than(10))
        .value(FilterCondition.lower_than(3))
        .nonce(2)
        .build()
    )
    assert flt.sender == FilterCondition.equal(address)
    assert flt.gas == FilterCondition.equal(21000)
    data = flt.to_json()
    assert list(data) == ["from", "to", "gas", "gas_price", "value", "nonce"]
    assert data["to"] == {"action": "contract_creation"}
    assert data["gas_price"] == FilterCondition.greater_than(10).to_json()


def test_build_is_unaffected_by_later_changes():
    builder = ParityPendingTransactionFilter.builder().gas(1)
    first = builder.build()
    builder.gas(2)
    assert first.gas == FilterCondition.equal(1)
    assert builder.build().gas == FilterCondition.equal(2)
import dataclasses
import json

import pytest

from cwmcp.contract import (
    CONTRACT_MAINNET,
    CONTRACT_TESTNET,
    CwContract,
    Network,
    default_contracts,
)


def test_default_contracts_order_and_networks():
    contracts = default_contracts()
    assert [c.network for c in contracts] == [Network.MAINNET, Network.TESTNET]


def test_default_contracts_chain_ids_and_addresses():
    mainnet, testnet = default_contracts()
    assert mainnet.chain_id == "archway-1"
    assert testnet.chain_id == "constantine-3"
    assert mainnet.contract_address == CONTRACT_MAINNET
    assert testnet.contract_address == CONTRACT_TESTNET


def test_to_dict_uses_variant_name_for_network():
    contract = CwContract(Network.TESTNET, "chain-x", "addr1")
    assert contract.to_dict() == {
        "network": "Testnet",
        "chain_id": "chain-x",
        "contract_address": "addr1",
    }


def test_to_dict_round_trips_through_json():
    for contract in default_contracts():
        data = json.loads(json.dumps(contract.to_dict()))
        rebuilt = CwContract(Network(data["network"]), data["chain_id"], data["contract_address"])
        assert rebuilt == contract


def test_contract_is_immutable():
    contract = default_contracts()[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        contract.chain_id = "other"
    assert contract.chain_id == "archway-1"
    assert contract.to_dict()["chain_id"] == "archway-1"
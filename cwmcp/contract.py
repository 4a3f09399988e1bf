"""Deployed contract addresses and the networks they live on."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

#: Replace with the addresses of your own deployed contract.
CONTRACT_MAINNET = "archway1gaf9nw7n8v5lpjz9caxjpps006kxfcrzcuc8y5qp4clslhven2ns2g0ule"
CONTRACT_TESTNET = "archway1r8kepegwhldwqanuurc769l2g0qxlsm2sm6t5rhqjzcerxsgshls267f7a"

MAINNET_CHAIN_ID = "archway-1"
TESTNET_CHAIN_ID = "constantine-3"


class Network(Enum):
    """The kind of network a contract is deployed on."""

    MAINNET = "Mainnet"
    TESTNET = "Testnet"


@dataclass(frozen=True)
class CwContract:
    """A contract deployment: network, chain id and address."""

    network: Network
    chain_id: str
    contract_address: str

    def to_dict(self) -> dict[str, str]:
        """Return the JSON-ready form of this deployment."""
        return {
            "network": self.network.value,
            "chain_id": self.chain_id,
            "contract_address": self.contract_address,
        }


def default_contracts() -> tuple[CwContract, ...]:
    """Return the configured mainnet and testnet deployments, in that order."""
    return (
        CwContract(Network.MAINNET, MAINNET_CHAIN_ID, CONTRACT_MAINNET),
        CwContract(Network.TESTNET, TESTNET_CHAIN_ID, CONTRACT_TESTNET),
    )
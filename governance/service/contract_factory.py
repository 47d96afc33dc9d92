from typing import Dict, Optional

from web3 import Web3
from web3.contract import Contract

from abi.core_voting_abi import CORE_VOTING_ABI
from abi.timelock_abi import TIMELOCK_ABI
from abi.voting_vault_abi import GSC_VAULT_ABI, LOCKING_VAULT_ABI, VESTING_VAULT_ABI
from constants.governance_contract_address import GOVERNANCE_CONTRACT_ADDRESS
from utils.formatter_utils import to_normalized_address

CONTRACT_ABIS = {
    "CoreVoting": CORE_VOTING_ABI,
    "Timelock": TIMELOCK_ABI,
    "LockingVault": LOCKING_VAULT_ABI,
    "VestingVault": VESTING_VAULT_ABI,
    "GSCVault": GSC_VAULT_ABI,
}


def get_contract_at(w3: Web3, name: str, address: str) -> Contract:
    abi = CONTRACT_ABIS.get(name)
    if abi is None:
        raise ValueError(f"Unknown contract {name}. Known: {', '.join(CONTRACT_ABIS)}")
    return w3.eth.contract(address=to_normalized_address(address), abi=abi)


class GovernanceContracts(object):
    """Contract handles for the deployed council system."""

    def __init__(
        self,
        core_voting: Contract,
        gsc_core_voting: Contract,
        timelock: Contract,
        locking_vault: Contract,
        vesting_vault: Contract,
        gsc_vault: Contract,
    ):
        self.core_voting = core_voting
        self.gsc_core_voting = gsc_core_voting
        self.timelock = timelock
        self.locking_vault = locking_vault
        self.vesting_vault = vesting_vault
        self.gsc_vault = gsc_vault

    @classmethod
    def from_addresses(cls, w3: Web3, addresses: Optional[Dict[str, str]] = None) -> "GovernanceContracts":
        addresses = {**GOVERNANCE_CONTRACT_ADDRESS, **(addresses or {})}
        return cls(
            core_voting=get_contract_at(w3, "CoreVoting", addresses["core_voting"]),
            gsc_core_voting=get_contract_at(w3, "CoreVoting", addresses["gsc_core_voting"]),
            timelock=get_contract_at(w3, "Timelock", addresses["timelock"]),
            locking_vault=get_contract_at(w3, "LockingVault", addresses["locking_vault"]),
            vesting_vault=get_contract_at(w3, "VestingVault", addresses["vesting_vault"]),
            gsc_vault=get_contract_at(w3, "GSCVault", addresses["gsc_vault"]),
        )

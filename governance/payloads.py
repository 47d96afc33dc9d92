from typing import List, Tuple

from constants.governance_constants import EGP16_GSC_IDLE_DURATION, EGP16_GSC_VOTE_POWER_BOUND
from governance.service.contract_factory import GovernanceContracts
from utils.formatter_utils import to_calldata_bytes

# (targets, calldatas)
Payload = Tuple[List[str], List[bytes]]


def build_egp16_timelock_payload(
    contracts: GovernanceContracts,
    vote_power_bound: int = EGP16_GSC_VOTE_POWER_BOUND,
    idle_duration: int = EGP16_GSC_IDLE_DURATION,
) -> Payload:
    """Calls the Timelock performs once EGP-16 passes: retune the GSCVault membership rules."""
    gsc_vault = contracts.gsc_vault
    targets = [gsc_vault.address, gsc_vault.address]
    calldatas = [
        to_calldata_bytes(gsc_vault.encode_abi("setVotePowerBound", args=[vote_power_bound])),
        to_calldata_bytes(gsc_vault.encode_abi("setIdleDuration", args=[idle_duration])),
    ]
    return targets, calldatas


def build_gsc_probe_payload(contracts: GovernanceContracts) -> Payload:
    """A read-only call for steering committee proposals; executing it changes no state."""
    gsc_vault = contracts.gsc_vault
    return [gsc_vault.address], [to_calldata_bytes(gsc_vault.encode_abi("votingPowerBound"))]

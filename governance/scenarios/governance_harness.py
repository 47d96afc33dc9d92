from typing import Dict, List, Optional

from web3.exceptions import ContractLogicError, Web3RPCError

from config.settings import Settings, settings as default_settings
from governance.models.event import ProposalExecutedEvent
from governance.models.proposal import ProposalInfo
from governance.models.proposal_context import ProposalContext
from governance.network.fork_network import ForkNetwork
from governance.service.contract_factory import GovernanceContracts
from governance.service.core_voting_service import CoreVotingService
from governance.service.timelock_service import TimelockService
from governance.service.transaction_service import TransactionService
from governance.service.voting_vault_service import GSCVaultService, VotingVaultService
from utils.exceptions import ProposalAssertionError, TransactionRevertedError
from utils.logger_utils import get_logger

logger = get_logger("Governance Harness")

# What a blocked CoreVoting.execute looks like from the client side
EXECUTION_REJECTED_ERRORS = (ContractLogicError, Web3RPCError, TransactionRevertedError)


class GovernanceHarness(object):
    """Wires the fork network, contract handles and services for one deployment."""

    def __init__(
        self,
        network: ForkNetwork,
        contracts: Optional[GovernanceContracts] = None,
        settings: Optional[Settings] = None,
    ):
        self.network = network
        self.settings = settings or default_settings
        self.contracts = contracts or GovernanceContracts.from_addresses(network.w3)

        self.transactions = TransactionService(network.w3, receipt_timeout=self.settings.fork.receipt_timeout)
        self.core_voting = CoreVotingService(self.contracts.core_voting, self.transactions)
        self.gsc_core_voting = CoreVotingService(self.contracts.gsc_core_voting, self.transactions)
        self.timelock = TimelockService(self.contracts.timelock, self.transactions)
        self.locking_vault = VotingVaultService(self.contracts.locking_vault)
        self.vesting_vault = VotingVaultService(self.contracts.vesting_vault)
        self.gsc_vault = GSCVaultService(self.contracts.gsc_vault)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "GovernanceHarness":
        settings = settings or default_settings
        network = ForkNetwork.from_uri(settings.fork.rpc_url, timeout=settings.fork.rpc_timeout)
        return cls(network, settings=settings)

    def reset_fork(self) -> None:
        fork = self.settings.fork
        self.network.reset(fork.mainnet_fork_url, fork.block_number)

    def impersonate(self, address: str) -> str:
        return self.network.impersonate_funded_account(address, self.settings.governance.impersonated_balance_wei)

    def last_call_from_now(self) -> int:
        return self.network.latest_timestamp() + self.settings.governance.last_call_offset_seconds


def assert_proposal_matches(actual: ProposalInfo, expected: Dict[str, object]) -> None:
    """Field-by-field comparison; every mismatching field is reported at once."""
    actual_fields = actual.model_dump()
    mismatches = {
        field: (value, actual_fields[field])
        for field, value in expected.items()
        if actual_fields[field] != value
    }
    if mismatches:
        raise ProposalAssertionError("Proposals aren't equal.", mismatches)


def assert_single_execution(
    service: CoreVotingService, ctx: ProposalContext
) -> ProposalExecutedEvent:
    """Exactly one ProposalExecuted since the proposal was created, carrying its id."""
    events = service.get_proposal_executed_events(from_block=ctx.current_block)
    if len(events) != 1:
        raise ProposalAssertionError(
            f"Expected exactly one ProposalExecuted event since block {ctx.current_block}, got {len(events)}"
        )

    first_arg = list(events[0].args.values())[0]
    if first_arg != ctx.proposal_id:
        raise ProposalAssertionError(
            "ProposalExecuted carries the wrong proposal id.", {"proposalId": (ctx.proposal_id, first_arg)}
        )
    return events[0]


def executed_proposal_ids(service: CoreVotingService, from_block: int) -> List[int]:
    return [event.proposal_id for event in service.get_proposal_executed_events(from_block=from_block)]

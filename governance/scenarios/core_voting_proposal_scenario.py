from web3 import Web3
from web3.types import TxReceipt

from constants.governance_constants import EGP16_GSC_IDLE_DURATION, EGP16_GSC_VOTE_POWER_BOUND, EMPTY_EXTRA_DATA
from constants.governance_contract_address import ADDRESS_ONE
from governance.enums.ballot import Ballot
from governance.enums.voting_body import VotingBody
from governance.models.event import ProposalExecutedEvent
from governance.models.proposal_context import ProposalContext
from governance.payloads import build_egp16_timelock_payload
from governance.scenarios.governance_harness import (
    GovernanceHarness,
    assert_proposal_matches,
    assert_single_execution,
)
from utils.call_hash_utils import create_call_hash
from utils.exceptions import ProposalAssertionError
from utils.logger_utils import get_logger

logger = get_logger("Core Voting Proposal Scenario")


class CoreVotingProposalScenario(object):
    """
    EGP-16 on the general body.

    The proposal asks the Timelock to register the hash of the EGP-16 payload. Once the
    proposal executes and the Timelock wait has passed, anyone can run the payload.
    """

    def __init__(self, harness: GovernanceHarness, proposer: str = ADDRESS_ONE):
        self.harness = harness
        self.proposer = proposer

    @property
    def core_voting(self):
        return self.harness.core_voting

    def setup(self) -> ProposalContext:
        harness = self.harness
        proposer = harness.impersonate(self.proposer)

        timelock_targets, timelock_calldatas = build_egp16_timelock_payload(harness.contracts)
        timelock_call_hash = create_call_hash(timelock_targets, timelock_calldatas)

        targets = [harness.timelock.address]
        calldatas = [harness.timelock.encode_register_call(timelock_call_hash)]
        vaults = [harness.locking_vault.address]
        last_call = harness.last_call_from_now()
        current_block = harness.network.latest_block()

        proposal_id, _ = self.core_voting.submit_proposal(
            sender=proposer,
            vaults=vaults,
            extra_data=[EMPTY_EXTRA_DATA],
            targets=targets,
            calldatas=calldatas,
            last_call=last_call,
            ballot=Ballot.YES,
        )

        return ProposalContext(
            voting_body=VotingBody.CORE,
            proposer=proposer,
            proposal_id=proposal_id,
            current_block=current_block,
            proposal_info=self.core_voting.get_proposal(proposal_id),
            vaults=vaults,
            targets=targets,
            calldatas=calldatas,
            last_call=last_call,
            timelock_call_hash=Web3.to_hex(timelock_call_hash),
            timelock_targets=timelock_targets,
            timelock_calldatas=timelock_calldatas,
        )

    def assert_proposal_created(self, ctx: ProposalContext) -> None:
        proposal = self.core_voting.get_proposal(ctx.proposal_id)
        unlock, expiration = self.core_voting.expected_schedule(ctx.current_block)

        assert_proposal_matches(
            proposal,
            {
                "proposal_hash": Web3.to_hex(create_call_hash(ctx.targets, ctx.calldatas)),
                "created": ctx.current_block,
                "unlock": unlock,
                "expiration": expiration,
                "quorum": self.harness.settings.governance.core_voting_quorum,
                "last_call": ctx.last_call,
            },
        )
        logger.info(f"Proposal {ctx.proposal_id} stored as expected: unlock {unlock}, expiration {expiration}")

    def advance_past_unlock(self, ctx: ProposalContext) -> int:
        return self.harness.network.mine(ctx.proposal_info.unlock - ctx.current_block - 1)

    def execute_proposal(self, ctx: ProposalContext) -> ProposalExecutedEvent:
        self.advance_past_unlock(ctx)
        self.core_voting.execute(ctx.proposer, ctx.proposal_id, ctx.targets, ctx.calldatas)
        return assert_single_execution(self.core_voting, ctx)

    def execute_timelocked_call(self, ctx: ProposalContext) -> TxReceipt:
        """Runs after execute_proposal: waits out the Timelock and executes the registered payload."""
        harness = self.harness
        if not harness.timelock.is_registered(ctx.timelock_call_hash):
            raise ProposalAssertionError(f"Call {ctx.timelock_call_hash} is not registered in the Timelock")

        wait_time = harness.timelock.wait_time()
        harness.network.increase_to(harness.network.latest_timestamp() + wait_time + 1)
        harness.network.mine(1)

        receipt = harness.timelock.execute(ctx.proposer, ctx.timelock_targets, ctx.timelock_calldatas)
        logger.info(f"Timelocked call {ctx.timelock_call_hash} executed after waiting {wait_time}s")
        return receipt

    def assert_payload_applied(self) -> None:
        gsc_vault = self.harness.gsc_vault
        actual = {
            "voting_power_bound": (EGP16_GSC_VOTE_POWER_BOUND, gsc_vault.voting_power_bound()),
            "idle_duration": (EGP16_GSC_IDLE_DURATION, gsc_vault.idle_duration()),
        }
        mismatches = {field: pair for field, pair in actual.items() if pair[0] != pair[1]}
        if mismatches:
            raise ProposalAssertionError("GSCVault was not updated by the timelocked call.", mismatches)

from typing import List, Optional, Sequence

from web3 import Web3

from constants.governance_constants import EMPTY_EXTRA_DATA
from governance.enums.ballot import Ballot
from governance.enums.voting_body import VotingBody
from governance.models.event import ProposalExecutedEvent
from governance.models.proposal_context import ProposalContext
from governance.payloads import build_gsc_probe_payload
from governance.scenarios.governance_harness import (
    EXECUTION_REJECTED_ERRORS,
    GovernanceHarness,
    assert_proposal_matches,
    assert_single_execution,
    executed_proposal_ids,
)
from utils.call_hash_utils import create_call_hash
from utils.exceptions import HarnessError, ProposalAssertionError
from utils.formatter_utils import to_normalized_address
from utils.logger_utils import get_logger

logger = get_logger("GSC Proposal Scenario")

# CoreVoting.execute reverts with this when yes votes do not reach quorum
QUORUM_REVERT_REASON = "Cannot execute"


class GSCProposalScenario(object):
    """
    Steering committee track: quorum is a member count, each proven member weighs 1.

    The first member proposes (and votes YES with it). Execution must be rejected until
    enough other members have voted to reach the quorum stored on the proposal.
    """

    def __init__(self, harness: GovernanceHarness, members: Optional[Sequence[str]] = None):
        self.harness = harness
        self._members = [to_normalized_address(member) for member in members] if members else None

    @property
    def core_voting(self):
        return self.harness.gsc_core_voting

    def members(self) -> List[str]:
        if self._members is None:
            configured = self.harness.settings.governance.gsc_members
            if configured:
                self._members = [to_normalized_address(member) for member in configured]
            else:
                self._members = self.harness.gsc_vault.discover_members(
                    from_block=self.harness.settings.governance.gsc_discovery_from_block
                )

        quorum = self.harness.settings.governance.gsc_quorum
        if len(self._members) < quorum:
            raise HarnessError(f"Need at least {quorum} GSC members to reach quorum, found {len(self._members)}")
        return self._members

    def setup(self) -> ProposalContext:
        harness = self.harness
        proposer = harness.impersonate(self.members()[0])

        targets, calldatas = build_gsc_probe_payload(harness.contracts)
        vaults = [harness.gsc_vault.address]
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
            voting_body=VotingBody.GSC,
            proposer=proposer,
            proposal_id=proposal_id,
            current_block=current_block,
            proposal_info=self.core_voting.get_proposal(proposal_id),
            vaults=vaults,
            targets=targets,
            calldatas=calldatas,
            last_call=last_call,
        )

    def assert_proposal_created(self, ctx: ProposalContext) -> None:
        proposal = self.core_voting.get_proposal(ctx.proposal_id)
        unlock, expiration = self.core_voting.expected_schedule(
            ctx.current_block,
            lock_duration=self.core_voting.lock_duration(),
            extra_vote_time=self.core_voting.extra_vote_time(),
        )

        assert_proposal_matches(
            proposal,
            {
                "proposal_hash": Web3.to_hex(create_call_hash(ctx.targets, ctx.calldatas)),
                "created": ctx.current_block,
                "unlock": unlock,
                "expiration": expiration,
                "quorum": self.harness.settings.governance.gsc_quorum,
                "last_call": ctx.last_call,
            },
        )

    def advance_past_unlock(self, ctx: ProposalContext) -> int:
        blocks = ctx.proposal_info.unlock - self.harness.network.latest_block()
        if blocks < 1:
            return self.harness.network.latest_block()
        return self.harness.network.mine(blocks)

    def assert_execution_blocked(self, ctx: ProposalContext) -> None:
        """
        Execution attempted now must be rejected for lack of quorum and leave no ProposalExecuted behind.

        The proposal has to be unlocked and short of quorum beforehand, otherwise a revert
        would say nothing about the quorum check.
        """
        proposal = ctx.proposal_info
        power = self.core_voting.get_proposal_voting_power(ctx.proposal_id)
        if power.total >= proposal.quorum:
            raise ProposalAssertionError(
                f"GSC proposal {ctx.proposal_id} already reached quorum",
                {"total_voting_power": (f"< {proposal.quorum}", power.total)},
            )
        latest = self.harness.network.latest_block()
        if latest < proposal.unlock:
            raise ProposalAssertionError(
                f"GSC proposal {ctx.proposal_id} is still locked", {"latest_block": (f">= {proposal.unlock}", latest)}
            )

        try:
            self.core_voting.execute(ctx.proposer, ctx.proposal_id, ctx.targets, ctx.calldatas)
        except EXECUTION_REJECTED_ERRORS as e:
            if QUORUM_REVERT_REASON not in str(e):
                raise ProposalAssertionError(
                    f"GSC proposal {ctx.proposal_id} reverted for a reason other than quorum: {e}"
                ) from e
            logger.info(f"Execution of GSC proposal {ctx.proposal_id} rejected as expected: {e}")
        else:
            raise ProposalAssertionError(
                f"GSC proposal {ctx.proposal_id} executed with voting power {power.total} below quorum"
            )

        if ctx.proposal_id in executed_proposal_ids(self.core_voting, ctx.current_block):
            raise ProposalAssertionError(f"ProposalExecuted emitted for blocked GSC proposal {ctx.proposal_id}")

    def voters_for_quorum(self) -> List[str]:
        """Members besides the proposer needed to reach quorum."""
        quorum = self.harness.settings.governance.gsc_quorum
        return self.members()[1:quorum]

    def assert_voters_eligible(self, ctx: ProposalContext, voters: Sequence[str]) -> None:
        """Each voter must carry GSC vote power at the proposal's creation block."""
        gsc_vault = self.harness.gsc_vault
        powerless = {}
        for voter in voters:
            power = gsc_vault.query_vote_power(voter, ctx.proposal_info.created)
            if power == 0:
                powerless[voter] = (f"joined {gsc_vault.joined(voter)}, vote power >= 1", power)
        if powerless:
            raise HarnessError(f"GSC members without vote power at block {ctx.proposal_info.created}: {powerless}")

    def cast_member_votes(self, ctx: ProposalContext, voters: Optional[Sequence[str]] = None) -> int:
        """Batch-votes YES from voters and returns the proposal's resulting YES power."""
        voters = list(voters) if voters is not None else self.voters_for_quorum()
        voters = [self.harness.impersonate(voter) for voter in voters]
        self.assert_voters_eligible(ctx, voters)
        self.core_voting.vote_batch(voters, ctx.vaults, ctx.proposal_id, Ballot.YES)
        return self.core_voting.get_proposal_voting_power(ctx.proposal_id).yes

    def execute_proposal(self, ctx: ProposalContext) -> ProposalExecutedEvent:
        self.advance_past_unlock(ctx)
        self.core_voting.execute(ctx.proposer, ctx.proposal_id, ctx.targets, ctx.calldatas)
        return assert_single_execution(self.core_voting, ctx)

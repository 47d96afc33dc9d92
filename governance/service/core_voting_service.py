from typing import List, Sequence, Tuple, Union

from web3.contract import Contract
from web3.types import TxReceipt

from constants.governance_constants import EMPTY_EXTRA_DATA, EXTRA_VOTE_TIME_DAYS, LOCK_DURATION_DAYS
from governance.enums.ballot import Ballot
from governance.mappers.event_mapper import GovernanceEventMapper
from governance.mappers.proposal_mapper import ProposalMapper
from governance.models.event import ProposalExecutedEvent
from governance.models.proposal import ProposalInfo, ProposalVotingPower
from governance.models.vote import VoteRecord
from governance.service.transaction_service import TransactionService
from utils.formatter_utils import BytesLike, to_calldata_bytes, to_normalized_address
from utils.logger_utils import get_logger
from utils.validation_utils import validate_index_aligned

logger = get_logger("Core Voting Service")

BlockIdentifier = Union[int, str]


class CoreVotingService(object):
    """
    Thin client over a deployed CoreVoting contract (general body or GSC).
    All rules (quorum, unlock, expiration) are enforced on-chain; this only calls and reads.
    """

    def __init__(self, contract: Contract, transaction_service: TransactionService):
        self.contract = contract
        self.transactions = transaction_service

    @property
    def address(self) -> str:
        return self.contract.address

    # --- read accessors ---

    def day_in_blocks(self) -> int:
        return self.contract.functions.DAY_IN_BLOCKS().call()

    def lock_duration(self) -> int:
        return self.contract.functions.lockDuration().call()

    def extra_vote_time(self) -> int:
        return self.contract.functions.extraVoteTime().call()

    def base_quorum(self) -> int:
        return self.contract.functions.baseQuorum().call()

    def min_proposal_power(self) -> int:
        return self.contract.functions.minProposalPower().call()

    def proposal_count(self) -> int:
        return self.contract.functions.proposalCount().call()

    def get_proposal(self, proposal_id: int) -> ProposalInfo:
        raw = self.contract.functions.proposals(proposal_id).call()
        return ProposalMapper.accessor_tuple_to_proposal(raw)

    def get_proposal_voting_power(self, proposal_id: int) -> ProposalVotingPower:
        raw = self.contract.functions.getProposalVotingPower(proposal_id).call()
        return ProposalMapper.voting_power_to_model(raw)

    def get_vote(self, voter: str, proposal_id: int) -> VoteRecord:
        voter = to_normalized_address(voter)
        raw = self.contract.functions.votes(voter, proposal_id).call()
        return ProposalMapper.vote_tuple_to_vote(voter, proposal_id, raw)

    def expected_schedule(
        self, created_block: int, lock_duration: int = None, extra_vote_time: int = None
    ) -> Tuple[int, int]:
        """
        (unlock, expiration) CoreVoting stores for a proposal whose `created` is created_block.
        The proposal transaction is mined in created_block + 1. Durations default to the
        deployment values of 3 and 5 days worth of blocks.
        """
        if lock_duration is None or extra_vote_time is None:
            day_in_blocks = self.day_in_blocks()
            if lock_duration is None:
                lock_duration = day_in_blocks * LOCK_DURATION_DAYS
            if extra_vote_time is None:
                extra_vote_time = day_in_blocks * EXTRA_VOTE_TIME_DAYS
        unlock = created_block + 1 + lock_duration
        expiration = unlock + extra_vote_time
        return unlock, expiration

    def encode_call(self, fn_name: str, *args) -> bytes:
        return to_calldata_bytes(self.contract.encode_abi(fn_name, args=list(args)))

    # --- transactions ---

    def submit_proposal(
        self,
        sender: str,
        vaults: Sequence[str],
        targets: Sequence[str],
        calldatas: Sequence[BytesLike],
        last_call: int,
        ballot: Ballot = Ballot.YES,
        extra_data: Sequence[BytesLike] = None,
    ) -> Tuple[int, TxReceipt]:
        """Submits a proposal and returns (proposal id, receipt). The proposer votes with `ballot`."""
        validate_index_aligned(list(targets), list(calldatas))
        vaults = [to_normalized_address(vault) for vault in vaults]
        if extra_data is None:
            extra_data = [EMPTY_EXTRA_DATA] * len(vaults)

        receipt = self.transactions.transact_and_wait(
            self.contract.functions.proposal(
                vaults,
                [to_calldata_bytes(data) for data in extra_data],
                [to_normalized_address(target) for target in targets],
                [to_calldata_bytes(data) for data in calldatas],
                last_call,
                int(ballot),
            ),
            sender,
        )
        proposal_id = self.proposal_count() - 1
        logger.info(f"Proposal {proposal_id} created on {self.address} in block {receipt['blockNumber']}")
        return proposal_id, receipt

    def _vote_function(self, vaults: Sequence[str], proposal_id: int, ballot: Ballot, extra_data=None):
        vaults = [to_normalized_address(vault) for vault in vaults]
        if extra_data is None:
            extra_data = [EMPTY_EXTRA_DATA] * len(vaults)
        return self.contract.functions.vote(
            vaults, [to_calldata_bytes(data) for data in extra_data], proposal_id, int(ballot)
        )

    def vote(
        self,
        sender: str,
        vaults: Sequence[str],
        proposal_id: int,
        ballot: Ballot = Ballot.YES,
        extra_data: Sequence[BytesLike] = None,
    ) -> TxReceipt:
        return self.transactions.transact_and_wait(
            self._vote_function(vaults, proposal_id, ballot, extra_data), sender
        )

    def vote_batch(
        self,
        voters: Sequence[str],
        vaults: Sequence[str],
        proposal_id: int,
        ballot: Ballot = Ballot.YES,
    ) -> List[TxReceipt]:
        """Every voter votes the same ballot through the same vaults; receipts are awaited together."""
        calls = [(self._vote_function(vaults, proposal_id, ballot), voter) for voter in voters]
        receipts = self.transactions.send_batch_and_wait(calls)
        logger.info(f"{len(receipts)} votes cast on proposal {proposal_id} ({ballot.name})")
        return receipts

    def execute(
        self, sender: str, proposal_id: int, targets: Sequence[str], calldatas: Sequence[BytesLike]
    ) -> TxReceipt:
        receipt = self.transactions.transact_and_wait(
            self.contract.functions.execute(
                proposal_id,
                [to_normalized_address(target) for target in targets],
                [to_calldata_bytes(data) for data in calldatas],
            ),
            sender,
        )
        logger.info(f"Proposal {proposal_id} executed in block {receipt['blockNumber']}")
        return receipt

    # --- events ---

    def get_proposal_executed_events(
        self, from_block: BlockIdentifier, to_block: BlockIdentifier = "latest"
    ) -> List[ProposalExecutedEvent]:
        logs = self.contract.events.ProposalExecuted.get_logs(from_block=from_block, to_block=to_block)
        return [GovernanceEventMapper.web3_event_to_proposal_executed(log) for log in logs]

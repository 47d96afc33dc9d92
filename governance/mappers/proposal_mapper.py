from typing import Any, Sequence

from web3 import Web3

from governance.enums.ballot import Ballot
from governance.models.proposal import ProposalInfo, ProposalVotingPower
from governance.models.vote import VoteRecord
from utils.formatter_utils import to_normalized_address


class ProposalMapper(object):
    @staticmethod
    def accessor_tuple_to_proposal(raw: Sequence[Any]) -> ProposalInfo:
        # (proposalHash, created, unlock, expiration, quorum, lastCall)
        if len(raw) != 6:
            raise ValueError(f"proposals() returned {len(raw)} fields, expected 6")
        return ProposalInfo(
            proposal_hash=Web3.to_hex(raw[0]),
            created=int(raw[1]),
            unlock=int(raw[2]),
            expiration=int(raw[3]),
            quorum=int(raw[4]),
            last_call=int(raw[5]),
        )

    @staticmethod
    def voting_power_to_model(raw: Sequence[int]) -> ProposalVotingPower:
        yes, no, maybe = (int(power) for power in raw)
        return ProposalVotingPower(yes=yes, no=no, maybe=maybe)

    @staticmethod
    def vote_tuple_to_vote(voter: str, proposal_id: int, raw: Sequence[Any]) -> VoteRecord:
        return VoteRecord(
            voter=to_normalized_address(voter),
            proposal_id=proposal_id,
            voting_power=int(raw[0]),
            ballot=Ballot(int(raw[1])),
        )

from typing import List

from pydantic import BaseModel, ConfigDict

from governance.enums.voting_body import VotingBody
from governance.models.proposal import ProposalInfo


class ProposalContext(BaseModel):
    """Everything the assertion phase needs from the setup phase of a scenario."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    voting_body: VotingBody
    proposer: str
    proposal_id: int
    # Block height observed right before the proposal transaction was sent
    current_block: int
    proposal_info: ProposalInfo
    vaults: List[str]
    targets: List[str]
    calldatas: List[bytes]
    last_call: int
    # Payload registered in the Timelock by the proposal, when there is one
    timelock_call_hash: str | None = None
    timelock_targets: List[str] = []
    timelock_calldatas: List[bytes] = []

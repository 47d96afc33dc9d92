from pydantic import BaseModel, ConfigDict


class ProposalInfo(BaseModel):
    """Public view of CoreVoting.proposals(id). votingPower is not exposed by the accessor."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    proposal_hash: str
    created: int
    unlock: int
    expiration: int
    quorum: int
    last_call: int


class ProposalVotingPower(BaseModel):
    model_config = ConfigDict(frozen=True)

    yes: int = 0
    no: int = 0
    maybe: int = 0

    @property
    def total(self) -> int:
        return self.yes + self.no + self.maybe

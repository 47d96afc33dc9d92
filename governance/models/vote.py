from pydantic import BaseModel, ConfigDict

from governance.enums.ballot import Ballot


class VoteRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    voter: str
    proposal_id: int
    voting_power: int
    ballot: Ballot

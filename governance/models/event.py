from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class ProposalExecutedEvent(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: str = "proposal_executed"
    proposal_id: int
    address: str | None = None
    block_number: int | None = None
    transaction_hash: str | None = None
    log_index: int | None = None
    args: Dict[str, Any] = Field(default_factory=dict)


class MembershipProvedEvent(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: str = "membership_proved"
    who: str
    when: int
    block_number: int | None = None

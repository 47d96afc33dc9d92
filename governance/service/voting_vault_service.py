from typing import List, Union

from web3.contract import Contract

from constants.governance_constants import EMPTY_EXTRA_DATA
from governance.mappers.event_mapper import GovernanceEventMapper
from utils.formatter_utils import to_normalized_address
from utils.logger_utils import get_logger

logger = get_logger("Voting Vault Service")

BlockIdentifier = Union[int, str]


class VotingVaultService(object):
    """LockingVault / VestingVault: token-weighted voting power."""

    def __init__(self, contract: Contract):
        self.contract = contract

    @property
    def address(self) -> str:
        return self.contract.address

    def query_vote_power_view(self, user: str, block_number: int) -> int:
        return self.contract.functions.queryVotePowerView(to_normalized_address(user), block_number).call()


class GSCVaultService(object):
    """GSCVault: one unit of voting power per proven member."""

    def __init__(self, contract: Contract):
        self.contract = contract

    @property
    def address(self) -> str:
        return self.contract.address

    def voting_power_bound(self) -> int:
        return self.contract.functions.votingPowerBound().call()

    def idle_duration(self) -> int:
        return self.contract.functions.idleDuration().call()

    def get_user_vaults(self, member: str) -> List[str]:
        return self.contract.functions.getUserVaults(to_normalized_address(member)).call()

    def joined(self, member: str) -> int:
        return self.contract.functions.members(to_normalized_address(member)).call()

    def is_member(self, member: str) -> bool:
        return len(self.get_user_vaults(member)) > 0

    def query_vote_power(self, member: str, block_number: int) -> int:
        return self.contract.functions.queryVotePower(
            to_normalized_address(member), block_number, EMPTY_EXTRA_DATA
        ).call()

    def discover_members(self, from_block: BlockIdentifier = 0, to_block: BlockIdentifier = "latest") -> List[str]:
        """
        Members who proved membership since from_block and still hold vaults, in proving order.
        Kicked members keep their MembershipProved logs, hence the vault check.
        """
        logs = self.contract.events.MembershipProved.get_logs(from_block=from_block, to_block=to_block)

        candidates: List[str] = []
        for log in logs:
            who = GovernanceEventMapper.web3_event_to_membership_proved(log).who
            if who not in candidates:
                candidates.append(who)

        members = [who for who in candidates if self.is_member(who)]
        logger.info(f"Discovered {len(members)} GSC members out of {len(candidates)} proven addresses")
        return members

# MIT License
#
# Copyright (c) 2018 Evgeny Medvedev, evge.medvedev@gmail.com
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
#
# Modified By: Cuong CT, 6/12/2025
# Change Description: Maps decoded governance events (web3 EventData) to Pydantic models.

from typing import Any, Dict

from web3 import Web3

from governance.models.event import MembershipProvedEvent, ProposalExecutedEvent
from utils.formatter_utils import to_normalized_address


def _to_hex(val):
    if val is None:
        return None
    if isinstance(val, (bytes, bytearray)):
        return Web3.to_hex(val)
    return str(val)


class GovernanceEventMapper(object):
    @staticmethod
    def web3_event_to_proposal_executed(web3_event: Dict[str, Any]) -> ProposalExecutedEvent:
        args = dict(web3_event.get("args", {}))
        return ProposalExecutedEvent(
            proposal_id=int(args["proposalId"]),
            address=web3_event.get("address"),
            block_number=web3_event.get("blockNumber"),
            transaction_hash=_to_hex(web3_event.get("transactionHash")),
            log_index=web3_event.get("logIndex"),
            args=args,
        )

    @staticmethod
    def web3_event_to_membership_proved(web3_event: Dict[str, Any]) -> MembershipProvedEvent:
        args = web3_event.get("args", {})
        return MembershipProvedEvent(
            who=to_normalized_address(args["who"]),
            when=int(args["when"]),
            block_number=web3_event.get("blockNumber"),
        )

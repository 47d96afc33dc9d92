from unittest.mock import MagicMock

import pytest
from eth_utils import function_signature_to_4byte_selector
from web3 import Web3

from abi.timelock_abi import TIMELOCK_ABI
from constants.governance_contract_address import GOVERNANCE_CONTRACT_ADDRESS
from governance.service.timelock_service import TimelockService
from governance.service.voting_vault_service import GSCVaultService, VotingVaultService

CALL_HASH = "0x" + "34" * 32
MEMBER_A = "0x000000000000000000000000000000000000000A"
MEMBER_B = "0x000000000000000000000000000000000000000b"


@pytest.fixture
def real_timelock():
    return Web3().eth.contract(address=GOVERNANCE_CONTRACT_ADDRESS["timelock"], abi=TIMELOCK_ABI)


def test_encode_register_call(real_timelock):
    service = TimelockService(real_timelock, MagicMock())

    calldata = service.encode_register_call(CALL_HASH)

    assert calldata == function_signature_to_4byte_selector("registerCall(bytes32)") + bytes.fromhex("34" * 32)


def test_is_registered_reads_call_timestamps():
    contract = MagicMock()
    contract.functions.callTimestamps.return_value.call.return_value = 0
    service = TimelockService(contract, MagicMock())

    assert service.is_registered(CALL_HASH) is False
    contract.functions.callTimestamps.assert_called_once_with(bytes.fromhex("34" * 32))


def test_timelock_execute():
    contract = MagicMock()
    transactions = MagicMock()
    transactions.transact_and_wait.return_value = {"status": 1, "blockNumber": 7}
    service = TimelockService(contract, transactions)

    receipt = service.execute(MEMBER_A, [GOVERNANCE_CONTRACT_ADDRESS["gsc_vault"]], ["0x01"])

    assert receipt["blockNumber"] == 7
    contract.functions.execute.assert_called_once_with([GOVERNANCE_CONTRACT_ADDRESS["gsc_vault"]], [b"\x01"])


def test_discover_members_keeps_current_members_in_order():
    contract = MagicMock()
    contract.events.MembershipProved.get_logs.return_value = [
        {"args": {"who": MEMBER_B, "when": 1}, "blockNumber": 10},
        {"args": {"who": MEMBER_A, "when": 2}, "blockNumber": 11},
        {"args": {"who": MEMBER_B, "when": 3}, "blockNumber": 12},
    ]
    kicked = Web3.to_checksum_address(MEMBER_A)
    contract.functions.getUserVaults.side_effect = lambda who: MagicMock(
        call=MagicMock(return_value=[] if who == kicked else ["0xvault"])
    )
    service = GSCVaultService(contract)

    members = service.discover_members(from_block=5)

    assert members == [Web3.to_checksum_address(MEMBER_B)]
    contract.events.MembershipProved.get_logs.assert_called_once_with(from_block=5, to_block="latest")


def test_vault_reads():
    locking = MagicMock()
    locking.functions.queryVotePowerView.return_value.call.return_value = 10 ** 24
    gsc = MagicMock()
    gsc.functions.queryVotePower.return_value.call.return_value = 1
    gsc.functions.members.return_value.call.return_value = 1_650_000_000
    gsc.functions.votingPowerBound.return_value.call.return_value = 110_000 * 10 ** 18

    assert VotingVaultService(locking).query_vote_power_view(MEMBER_A, 100) == 10 ** 24
    locking.functions.queryVotePowerView.assert_called_once_with(Web3.to_checksum_address(MEMBER_A), 100)

    service = GSCVaultService(gsc)
    assert service.query_vote_power(MEMBER_A, 100) == 1
    gsc.functions.queryVotePower.assert_called_once_with(Web3.to_checksum_address(MEMBER_A), 100, b"")
    assert service.joined(MEMBER_A) == 1_650_000_000
    assert service.voting_power_bound() == 110_000 * 10 ** 18

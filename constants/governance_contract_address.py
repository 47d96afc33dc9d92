# constants/governance_contract_address.py

# Element Finance council deployment on Ethereum mainnet.
# optimisticGrants and optimisticRewardsVault were never deployed, so they stay zero.
GOVERNANCE_CONTRACT_ADDRESS = {
    "airdrop": "0xd04a459FFD3A5E3C93d5cD8BB13d26a9845716c2",
    "core_voting": "0xEaCD577C3F6c44C3ffA398baaD97aE12CDCFed4a",
    "element_token": "0x5c6D51ecBA4D8E4F20373e3ce96a62342B125D6d",
    "gsc_core_voting": "0x40309f197e7f94B555904DF0f788a3F48cF326aB",
    "gsc_vault": "0xcA870E8aa4FCEa85b5f0c6F4209C8CBA9265B940",
    "locking_vault": "0x02Bd4A3b1b95b01F2Aa61655415A5d3EAAcaafdD",
    "optimistic_grants": "0x0000000000000000000000000000000000000000",
    "optimistic_rewards_vault": "0x0000000000000000000000000000000000000000",
    "spender": "0xDa2Baf34B5717b257e52039f78d02B9C58751781",
    "timelock": "0x81758f3361A769016eae4844072FA6d7f828a651",
    "treasury": "0x82eF450FB7f06E3294F2f19ed1713b255Af0f541",
    "vesting_vault": "0x6De73946eab234F1EE61256F10067D713aF0e37A",
    "frozen_vesting_vault": "0x716D4e863536aC862AD34bC4eCaCBa07d8831bEA",
    "unfrozen_vesting_vault": "0x38dbc89Fc52948192843920E78c8B609474b60B4",
}

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# Proposer account for the general body; it carries delegated LockingVault power on mainnet.
ADDRESS_ONE = "0x0000000000000000000000000000000000000001"

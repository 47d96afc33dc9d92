# constants/governance_constants.py

WEI_PER_TOKEN = 10 ** 18

# Quorum stored for proposals on the general body (token weight, 18 decimals)
CORE_VOTING_QUORUM = 1_100_000 * WEI_PER_TOKEN

# Quorum stored for proposals on the steering committee (member count)
GSC_QUORUM = 3

# Multiples of DAY_IN_BLOCKS used by CoreVoting for lockDuration and extraVoteTime
LOCK_DURATION_DAYS = 3
EXTRA_VOTE_TIME_DAYS = 5

SECONDS_PER_DAY = 24 * 60 * 60
LAST_CALL_OFFSET_SECONDS = 14 * SECONDS_PER_DAY

# Balance given to every impersonated account so it can pay for gas (100 ETH)
IMPERSONATED_BALANCE_WEI = 100 * WEI_PER_TOKEN

# Empty extra vault data, one entry per voting vault
EMPTY_EXTRA_DATA = b""

# EGP-16 steering committee parameters, applied by the Timelock to the GSCVault
EGP16_GSC_VOTE_POWER_BOUND = 110_000 * WEI_PER_TOKEN
EGP16_GSC_IDLE_DURATION = 4 * SECONDS_PER_DAY

# --- VOTING VAULTS (LockingVault, VestingVault) ---
VOTING_VAULT_ABI = [
    {
        "inputs": [
            {"internalType": "address", "name": "user", "type": "address"},
            {"internalType": "uint256", "name": "blockNumber", "type": "uint256"}
        ],
        "name": "queryVotePowerView",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "address", "name": "user", "type": "address"},
            {"internalType": "uint256", "name": "blockNumber", "type": "uint256"},
            {"internalType": "bytes", "name": "", "type": "bytes"}
        ],
        "name": "queryVotePower",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "nonpayable",
        "type": "function"
    }
]

LOCKING_VAULT_ABI = VOTING_VAULT_ABI + [
    {
        "inputs": [{"internalType": "address", "name": "who", "type": "address"}],
        "name": "deposits",
        "outputs": [
            {"internalType": "address", "name": "", "type": "address"},
            {"internalType": "uint96", "name": "", "type": "uint96"}
        ],
        "stateMutability": "view",
        "type": "function"
    }
]

VESTING_VAULT_ABI = VOTING_VAULT_ABI + [
    {
        "inputs": [],
        "name": "unvestedMultiplier",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    }
]

# --- GSC VAULT (membership-count voting power) ---
GSC_VAULT_ABI = [
    {
        "inputs": [
            {"internalType": "address", "name": "who", "type": "address"},
            {"internalType": "uint256", "name": "", "type": "uint256"},
            {"internalType": "bytes", "name": "", "type": "bytes"}
        ],
        "name": "queryVotePower",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"internalType": "address", "name": "who", "type": "address"}],
        "name": "getUserVaults",
        "outputs": [{"internalType": "address[]", "name": "", "type": "address[]"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"internalType": "address", "name": "", "type": "address"}],
        "name": "members",
        "outputs": [{"internalType": "uint256", "name": "joined", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "votingPowerBound",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "idleDuration",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"internalType": "uint256", "name": "_newBound", "type": "uint256"}],
        "name": "setVotePowerBound",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [{"internalType": "uint256", "name": "_idleDuration", "type": "uint256"}],
        "name": "setIdleDuration",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "internalType": "address", "name": "who", "type": "address"},
            {"indexed": False, "internalType": "uint256", "name": "when", "type": "uint256"}
        ],
        "name": "MembershipProved",
        "type": "event"
    }
]

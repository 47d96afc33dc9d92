# --- CORE VOTING (Council CoreVoting, also deployed as the GSC CoreVoting) ---
CORE_VOTING_ABI = [
    {
        "inputs": [
            {"internalType": "address[]", "name": "votingVaults", "type": "address[]"},
            {"internalType": "bytes[]", "name": "extraVaultData", "type": "bytes[]"},
            {"internalType": "address[]", "name": "targets", "type": "address[]"},
            {"internalType": "bytes[]", "name": "calldatas", "type": "bytes[]"},
            {"internalType": "uint256", "name": "lastCall", "type": "uint256"},
            {"internalType": "enum CoreVoting.Ballot", "name": "ballot", "type": "uint8"}
        ],
        "name": "proposal",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "address[]", "name": "votingVaults", "type": "address[]"},
            {"internalType": "bytes[]", "name": "extraVaultData", "type": "bytes[]"},
            {"internalType": "uint256", "name": "proposalId", "type": "uint256"},
            {"internalType": "enum CoreVoting.Ballot", "name": "ballot", "type": "uint8"}
        ],
        "name": "vote",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "uint256", "name": "proposalId", "type": "uint256"},
            {"internalType": "address[]", "name": "targets", "type": "address[]"},
            {"internalType": "bytes[]", "name": "calldatas", "type": "bytes[]"}
        ],
        "name": "execute",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "name": "proposals",
        "outputs": [
            {"internalType": "bytes32", "name": "proposalHash", "type": "bytes32"},
            {"internalType": "uint128", "name": "created", "type": "uint128"},
            {"internalType": "uint128", "name": "unlock", "type": "uint128"},
            {"internalType": "uint128", "name": "expiration", "type": "uint128"},
            {"internalType": "uint128", "name": "quorum", "type": "uint128"},
            {"internalType": "uint128", "name": "lastCall", "type": "uint128"}
        ],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"internalType": "uint256", "name": "proposalId", "type": "uint256"}],
        "name": "getProposalVotingPower",
        "outputs": [{"internalType": "uint128[3]", "name": "", "type": "uint128[3]"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "address", "name": "", "type": "address"},
            {"internalType": "uint256", "name": "", "type": "uint256"}
        ],
        "name": "votes",
        "outputs": [
            {"internalType": "uint128", "name": "votingPower", "type": "uint128"},
            {"internalType": "enum CoreVoting.Ballot", "name": "castBallot", "type": "uint8"}
        ],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "address", "name": "target", "type": "address"},
            {"internalType": "bytes4", "name": "functionSelector", "type": "bytes4"}
        ],
        "name": "quorums",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"internalType": "address", "name": "", "type": "address"}],
        "name": "approvedVaults",
        "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "DAY_IN_BLOCKS",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "lockDuration",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "extraVoteTime",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "baseQuorum",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "minProposalPower",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "proposalCount",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "anonymous": False,
        "inputs": [
            {"indexed": False, "internalType": "uint256", "name": "proposalId", "type": "uint256"},
            {"indexed": False, "internalType": "uint256", "name": "created", "type": "uint256"},
            {"indexed": False, "internalType": "uint256", "name": "execution", "type": "uint256"},
            {"indexed": False, "internalType": "uint256", "name": "expiration", "type": "uint256"}
        ],
        "name": "ProposalCreated",
        "type": "event"
    },
    {
        "anonymous": False,
        "inputs": [
            {"indexed": False, "internalType": "uint256", "name": "proposalId", "type": "uint256"}
        ],
        "name": "ProposalExecuted",
        "type": "event"
    },
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "internalType": "address", "name": "voter", "type": "address"},
            {"indexed": True, "internalType": "uint256", "name": "proposalId", "type": "uint256"},
            {
                "components": [
                    {"internalType": "uint128", "name": "votingPower", "type": "uint128"},
                    {"internalType": "enum CoreVoting.Ballot", "name": "castBallot", "type": "uint8"}
                ],
                "indexed": False,
                "internalType": "struct CoreVoting.Vote",
                "name": "vote",
                "type": "tuple"
            }
        ],
        "name": "Voted",
        "type": "event"
    }
]

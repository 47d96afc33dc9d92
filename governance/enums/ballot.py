from enum import IntEnum


class Ballot(IntEnum):
    """CoreVoting.Ballot, in declaration order."""

    YES = 0
    NO = 1
    MAYBE = 2

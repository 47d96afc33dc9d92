from enum import Enum


class VotingBody(str, Enum):
    CORE = "core"
    GSC = "gsc"

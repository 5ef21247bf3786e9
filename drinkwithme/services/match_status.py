from enum import Enum


class MatchStatus(str, Enum):
    accepted = "accepted"

from enum import Enum


class SwipeOutcome(str, Enum):
    recorded = "recorded"  # stored, no match formed
    duplicate = "duplicate"  # (swiper, swiped) already existed, nothing stored
    matched = "matched"
    match_exists = "match_exists"


class PoolStatus(str, Enum):
    ok = "ok"
    needs_selection = "needs_selection"

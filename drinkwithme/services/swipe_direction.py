from enum import Enum


class SwipeDirection(str, Enum):
    left = "left"
    right = "right"

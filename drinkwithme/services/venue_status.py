from enum import Enum


class VenueStatus(str, Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"

"""Domain Types: identifier aliases and known lifecycle values.

Invariants:
    - Identifiers are store-generated integers, immutable once assigned
    - Enums list the values the product knows about; the submission status
      column still accepts any string a caseworker sends

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
SubmissionId = NewType("SubmissionId", int)
ClientId = NewType("ClientId", int)


# ─── Enums ───────────────────────────────────────────────────────

class SubmissionStatus(str, Enum):
    """Contact submission lifecycle. Transitions are not enforced."""
    NEW = "new"
    IN_PROGRESS = "in-progress"
    CLOSED = "closed"


class ProjectStatus(str, Enum):
    """Client project lifecycle; every project starts in PLANNING."""
    PLANNING = "planning"
    IN_PROGRESS = "in-progress"
    REVIEW = "review"
    COMPLETED = "completed"


class EngineerAvailability(str, Enum):
    AVAILABLE = "available"
    BUSY = "busy"

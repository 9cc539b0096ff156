"""Match data models.

Pure data structures for discovery: scored candidates and swipe decisions.
None of these are persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field as dataclass_field
from enum import Enum
from typing import Any

from .profile import Profile


class Direction(Enum):
    """Which way a candidate was swiped."""
    ACCEPT = "accept"
    REJECT = "reject"


class SessionState(Enum):
    """Lifecycle of a swipe session."""
    ACTIVE = "active"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class Decision:
    """A swipe on one candidate, handed to whoever owns the session."""
    candidate_id: str
    direction: Direction

    def to_dict(self) -> dict[str, Any]:
        return {"candidate_id": self.candidate_id, "direction": self.direction.value}


@dataclass
class Candidate:
    """A profile under consideration, with its computed match score."""
    profile: Profile
    match_score: int = 0
    # The candidate's own skills that produced the score
    matching_teach_skills: list[str] = dataclass_field(default_factory=list)
    matching_want_skills: list[str] = dataclass_field(default_factory=list)

    @property
    def id(self) -> str:
        return self.profile.id

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary (profile fields plus scoring details)."""
        data = self.profile.to_dict()
        data["match_score"] = self.match_score
        data["matching_teach_skills"] = list(self.matching_teach_skills)
        data["matching_want_skills"] = list(self.matching_want_skills)
        return data

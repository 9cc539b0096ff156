"""SkillSwap - local neighbourhood skill exchange."""

from .models import Candidate, Decision, Direction, Profile, SessionState
from .services.match_service import SwipeSession, rank_candidates, score_candidate, start_discovery

__all__ = [
    "Candidate",
    "Decision",
    "Direction",
    "Profile",
    "SessionState",
    "SwipeSession",
    "rank_candidates",
    "score_candidate",
    "start_discovery",
]

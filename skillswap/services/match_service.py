"""Match Service - Candidate scoring, ranking and swipe sessions.

This module handles:
- Scoring a candidate's skill-exchange potential against the active user
- Ranking candidates for discovery (stable, deterministic)
- Walking through the ranking one swipe at a time

Interface Contract:
- score_candidate(me, candidate) -> int
- rank_candidates(me, candidates) -> list[Candidate]
- start_discovery(me, profiles) -> SwipeSession
- Nothing here performs I/O and nothing here raises on well-typed input
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Sequence

from skillswap.models import Candidate, Decision, Direction, Profile, SessionState

logger = logging.getLogger(__name__)

POINTS_PER_SKILL = 2

DecisionSink = Callable[[Decision], None]


def _matching(skills: Iterable[str], against: Sequence[str]) -> list[str]:
    """Skills contained (case-insensitively) in at least one entry of ``against``."""
    lowered = [a.lower() for a in against]
    return [s for s in skills if any(s.lower() in a for a in lowered)]


def score_candidate(me: Profile, candidate: Profile) -> int:
    """Score ``candidate`` from ``me``'s point of view.

    Each candidate teach skill found inside one of my want skills is worth 2,
    as is each candidate want skill found inside one of my teach skills.
    Substring matching means "Yoga" matches "Beginner Yoga". The score is not
    symmetric: score_candidate(a, b) need not equal score_candidate(b, a).
    """
    return _to_candidate(me, candidate).match_score


def _to_candidate(me: Profile, candidate: Profile) -> Candidate:
    teaches = _matching(candidate.teach_skills, me.want_skills)
    wants = _matching(candidate.want_skills, me.teach_skills)
    return Candidate(
        profile=candidate,
        match_score=POINTS_PER_SKILL * (len(teaches) + len(wants)),
        matching_teach_skills=teaches,
        matching_want_skills=wants,
    )


def rank_candidates(me: Profile, candidates: Iterable[Profile]) -> list[Candidate]:
    """Score every candidate and order them by descending score.

    ``sorted`` is stable, so equal scores keep their input order. The ranker
    does not exclude ``me``; callers filter identity themselves.
    """
    scored = [_to_candidate(me, c) for c in candidates]
    return sorted(scored, key=lambda c: c.match_score, reverse=True)


class SwipeSession:
    """A single pass through a ranked candidate list.

    The cursor starts at 0 and moves forward by exactly one per decision.
    Once it reaches the end the session is EXHAUSTED for good; build a new
    session to start over.
    """

    def __init__(
        self,
        ranked_candidates: Sequence[Candidate],
        on_decision: DecisionSink | None = None,
    ):
        self._candidates = list(ranked_candidates)
        self._cursor = 0
        self._on_decision = on_decision

    @property
    def candidates(self) -> list[Candidate]:
        return list(self._candidates)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def state(self) -> SessionState:
        if self._cursor >= len(self._candidates):
            return SessionState.EXHAUSTED
        return SessionState.ACTIVE

    @property
    def remaining(self) -> int:
        return max(len(self._candidates) - self._cursor, 0)

    def find(self, candidate_id: str) -> Candidate | None:
        """The ranked candidate with ``candidate_id``, wherever the cursor is."""
        for candidate in self._candidates:
            if candidate.id == candidate_id:
                return candidate
        return None

    def current(self) -> Candidate | None:
        """The candidate on top of the deck, or None when exhausted."""
        if self.state is SessionState.EXHAUSTED:
            return None
        return self._candidates[self._cursor]

    def decide(self, direction: Direction) -> Decision | None:
        """Swipe the current candidate and move on.

        Returns the Decision for the candidate that was current before the
        cursor advanced. On an exhausted session this does nothing and
        returns None.
        """
        candidate = self.current()
        if candidate is None:
            return None

        decision = Decision(candidate_id=candidate.id, direction=direction)
        self._cursor += 1
        logger.debug(
            "[swipe] %s %s cursor=%d/%d",
            direction.value, candidate.id, self._cursor, len(self._candidates),
        )
        if self._on_decision is not None:
            self._on_decision(decision)
        return decision


def start_discovery(
    me: Profile,
    profiles: Iterable[Profile],
    on_decision: DecisionSink | None = None,
) -> SwipeSession:
    """Build a fresh session over everyone except ``me``."""
    others = [p for p in profiles if p.id != me.id]
    ranked = rank_candidates(me, others)
    logger.info("[discover] user=%s candidates=%d", me.id, len(ranked))
    return SwipeSession(ranked, on_decision=on_decision)

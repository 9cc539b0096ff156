"""Trade Advisor - AI "fair trade" proposals between two neighbours.

Interface Contract:
- suggest(me, other) -> str
- Never raises: failures are logged and answered with a fixed fallback text
"""

from __future__ import annotations

import logging

from skillswap.models import Profile

logger = logging.getLogger(__name__)

EMPTY_SUGGESTION = "Could not generate a suggestion at this time."
FALLBACK_SUGGESTION = "Error generating suggestion. Try proposing a simple 1-for-1 hour trade!"


class TradeAdvisor:
    """Asks an LLM for a fair trade between two profiles."""

    def __init__(self, llm_service=None):
        """Initialize with optional LLM service dependency.

        Args:
            llm_service: LLM service for generation. If None, uses default.
        """
        self._llm = llm_service

    @property
    def llm(self):
        """Lazy load LLM service."""
        if self._llm is None:
            from skillswap.services.llm_service import LLMService
            self._llm = LLMService.get_instance()
        return self._llm

    def suggest(self, me: Profile, other: Profile) -> str:
        """Propose a trade between ``me`` and ``other``."""
        prompt = self._build_prompt(me, other)
        try:
            text = self.llm.call(prompt)
        except Exception as e:
            logger.error("[trade] suggestion failed for %s/%s: %s", me.id, other.id, e)
            return FALLBACK_SUGGESTION
        return (text or "").strip() or EMPTY_SUGGESTION

    @staticmethod
    def overlaps(me: Profile, other: Profile) -> tuple[list[str], list[str]]:
        """Exact skill overlaps: (what I can teach them, what they can teach me)."""
        mine = [s for s in me.teach_skills if s in other.want_skills]
        theirs = [s for s in other.teach_skills if s in me.want_skills]
        return mine, theirs

    def _build_prompt(self, me: Profile, other: Profile) -> str:
        """Build prompt for the trade suggestion."""
        mine, theirs = self.overlaps(me, other)
        return f'''You are a "Fair Trade Expert" for SkillSwap, a local neighborhood exchange app.

Context:
Neighbor A ({me.display_name}) teaches: {', '.join(me.teach_skills)} and wants to learn: {', '.join(me.want_skills)}.
Neighbor B ({other.display_name}) teaches: {', '.join(other.teach_skills)} and wants to learn: {', '.join(other.want_skills)}.

The most logical trade is:
Neighbor A teaches {' or '.join(mine)} to Neighbor B.
Neighbor B teaches {' or '.join(theirs)} to Neighbor A.

Task:
Provide a concise, friendly, and practical "Fair Trade Suggestion" for these two.
Include session duration (e.g., "1 hour of Yoga for 45 mins of Spanish practice"),
frequency, and one fun local meeting idea.
Keep it under 100 words.'''

"""Profile Store - Every neighbour's profile, keyed by user id.

Interface Contract:
- get_all_profiles() -> list[Profile] (store order, no ranking)
- get(user_id) -> Profile | None
- save(profile) -> Profile
- add_match(user_id, match_id) -> Profile
- Read/write failures raise StoreError
"""

from __future__ import annotations

import logging
from pathlib import Path
from threading import Lock

from skillswap.models import Profile
from skillswap.services.json_store import JsonDocument, StoreError

logger = logging.getLogger(__name__)


class ProfileStore:
    """JSON file backed profile storage (thread-safe)."""

    def __init__(self, path: Path):
        self._doc = JsonDocument(path, "profiles")
        self._lock = Lock()

    def get_all_profiles(self) -> list[Profile]:
        with self._lock:
            return self._doc.load(Profile.from_dict)

    def get(self, user_id: str) -> Profile | None:
        for profile in self.get_all_profiles():
            if profile.id == user_id:
                return profile
        return None

    def save(self, profile: Profile) -> Profile:
        """Insert or replace the profile with ``profile.id``.

        A replaced profile moves to the end, as a freshly completed
        onboarding does.
        """
        with self._lock:
            profiles = [p for p in self._doc.load(Profile.from_dict) if p.id != profile.id]
            profiles.append(profile)
            self._doc.save(profiles)
        logger.info("[profiles] saved id=%s total=%d", profile.id, len(profiles))
        return profile

    def add_match(self, user_id: str, match_id: str) -> Profile:
        """Record that ``user_id`` accepted ``match_id`` in discovery."""
        with self._lock:
            profiles = self._doc.load(Profile.from_dict)
            for profile in profiles:
                if profile.id == user_id:
                    if match_id not in profile.matches:
                        profile.matches.append(match_id)
                        self._doc.save(profiles)
                    return profile
        raise StoreError(f"Unknown user: {user_id}")

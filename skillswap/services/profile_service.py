"""Profile Service - Onboarding and profile management.

This module handles:
- Turning the onboarding form into a validated Profile
- Geocoding the address the user entered
- Saving the result to the profile store

Interface Contract:
- complete_profile(user_id, form) -> Profile
- get(user_id) -> Profile
- Methods raise ProfileServiceError on failure
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from skillswap.models import Profile, clean_skills

logger = logging.getLogger(__name__)


class ProfileServiceError(Exception):
    """Raised when a profile cannot be built or found."""
    pass


@dataclass
class OnboardingForm:
    """What the user typed on the "Finish your profile" screen."""
    display_name: str
    city: str
    country: str
    region: str = ""
    postal_code: str = ""
    teach_skills: list[str] = field(default_factory=list)
    want_skills: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OnboardingForm":
        """Create from a request payload, tolerating missing keys."""
        def text(key: str) -> str:
            value = data.get(key)
            return value.strip() if isinstance(value, str) else ""

        def skills(key: str) -> list[str]:
            value = data.get(key) or []
            if not isinstance(value, list):
                raise ProfileServiceError(f"'{key}' must be a list")
            return clean_skills(str(s) for s in value)

        return cls(
            display_name=text("display_name"),
            city=text("city"),
            country=text("country"),
            region=text("region"),
            postal_code=text("postal_code"),
            teach_skills=skills("teach_skills"),
            want_skills=skills("want_skills"),
        )


class ProfileService:
    """Service for onboarding and profile lookup."""

    def __init__(self, store, geocoder=None):
        """Initialize with store and optional geocoder dependency.

        Args:
            store: ProfileStore to read and write profiles
            geocoder: Geocoder for the address. If None, creates default.
        """
        self.store = store
        self._geocoder = geocoder

    @property
    def geocoder(self):
        """Lazy load geocoder."""
        if self._geocoder is None:
            from skillswap.services.geocoding_service import Geocoder
            self._geocoder = Geocoder()
        return self._geocoder

    def get(self, user_id: str) -> Profile:
        """Look up a profile.

        Raises:
            ProfileServiceError: If the user has no profile
        """
        profile = self.store.get(user_id)
        if profile is None:
            raise ProfileServiceError(f"No profile for user {user_id}")
        return profile

    def complete_profile(self, user_id: str, form: OnboardingForm) -> Profile:
        """Build, geocode and save the profile for ``user_id``.

        Matches recorded on an earlier version of the profile are kept.

        Raises:
            ProfileServiceError: If display name, city or country is missing
        """
        missing = [
            label for label, value in (
                ("display name", form.display_name),
                ("city", form.city),
                ("country", form.country),
            ) if not value
        ]
        if missing:
            raise ProfileServiceError(f"Missing required fields: {', '.join(missing)}")

        location = self.geocoder.geocode(form.country, form.region, form.city, form.postal_code)
        previous = self.store.get(user_id)

        profile = Profile(
            id=user_id,
            display_name=form.display_name,
            city=form.city,
            region=form.region,
            country=form.country,
            postal_code=form.postal_code,
            teach_skills=form.teach_skills,
            want_skills=form.want_skills,
            location=location,
            matches=list(previous.matches) if previous else [],
        )
        self.store.save(profile)
        logger.info("[onboarding] user=%s at %.4f,%.4f", user_id, location.lat, location.lng)
        return profile


def welcome_message(profile: Profile) -> str:
    return "Profile set up! Welcome to SkillSwap, " + profile.display_name

"""Neighborhood views: the skill map and the gallery of active users."""

from __future__ import annotations

from typing import Any, Iterable

from skillswap.models import Profile
from skillswap.services.geocoding_service import DEFAULT_LOCATION

MAP_ZOOM = 12


def build_map(current: Profile, profiles: Iterable[Profile]) -> dict[str, Any]:
    """Map centre on the current user plus a marker per located neighbour."""
    center = current.location or DEFAULT_LOCATION
    markers = [
        {
            "id": p.id,
            "display_name": p.display_name,
            "city": p.city,
            "position": p.location.to_dict(),
            "teach_skills": list(p.teach_skills),
            "want_skills": list(p.want_skills),
        }
        for p in profiles
        if p.id != current.id and p.location is not None
    ]
    return {"center": center.to_dict(), "zoom": MAP_ZOOM, "markers": markers}


def build_gallery(current: Profile, profiles: Iterable[Profile]) -> list[dict[str, Any]]:
    """Everyone but the current user, with a headline teach/want skill."""
    return [
        {
            "id": p.id,
            "display_name": p.display_name,
            "place": p.place,
            "teach": p.teach_skills[0] if p.teach_skills else "TBD",
            "want": p.want_skills[0] if p.want_skills else "TBD",
        }
        for p in profiles
        if p.id != current.id
    ]

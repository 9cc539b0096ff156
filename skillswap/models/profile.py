"""Profile data models.

Pure data structures with no business logic.
These can be safely used by any module.
"""

from __future__ import annotations

from dataclasses import dataclass, field as dataclass_field
from typing import Any, Iterable

from .schema import (
    ValidationError,
    optional_str,
    require_mapping,
    require_number,
    require_str,
    str_list,
)


def clean_skills(skills: Iterable[str]) -> list[str]:
    """Strip entries and drop the blank ones, keeping order."""
    return [s.strip() for s in skills if s and s.strip()]


@dataclass(frozen=True)
class Location:
    """A point on the map."""
    lat: float
    lng: float

    def to_dict(self) -> dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}

    @classmethod
    def from_dict(cls, data: Any) -> "Location":
        data = require_mapping(data, "location")
        return cls(lat=require_number(data, "lat"), lng=require_number(data, "lng"))


@dataclass
class Profile:
    """A neighbour's identity, address and skill-exchange preferences."""
    id: str
    display_name: str
    city: str = ""
    region: str = ""
    country: str = ""
    postal_code: str = ""
    teach_skills: list[str] = dataclass_field(default_factory=list)
    want_skills: list[str] = dataclass_field(default_factory=list)
    location: Location | None = None
    matches: list[str] = dataclass_field(default_factory=list)

    def __post_init__(self):
        self.teach_skills = clean_skills(self.teach_skills)
        self.want_skills = clean_skills(self.want_skills)

    @property
    def place(self) -> str:
        """``"City, Country"`` as shown on cards."""
        return ", ".join(p for p in (self.city, self.country) if p)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "display_name": self.display_name,
            "city": self.city,
            "region": self.region,
            "country": self.country,
            "postal_code": self.postal_code,
            "teach_skills": list(self.teach_skills),
            "want_skills": list(self.want_skills),
            "location": self.location.to_dict() if self.location else None,
            "matches": list(self.matches),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Profile":
        """Create from dictionary, validating every field.

        Raises:
            ValidationError: If a required field is missing or mistyped
        """
        data = require_mapping(data, "profile")
        location = data.get("location")
        return cls(
            id=require_str(data, "id"),
            display_name=require_str(data, "display_name"),
            city=optional_str(data, "city"),
            region=optional_str(data, "region"),
            country=optional_str(data, "country"),
            postal_code=optional_str(data, "postal_code"),
            teach_skills=str_list(data, "teach_skills"),
            want_skills=str_list(data, "want_skills"),
            location=Location.from_dict(location) if location is not None else None,
            matches=str_list(data, "matches"),
        )


__all__ = ["Location", "Profile", "ValidationError", "clean_skills"]

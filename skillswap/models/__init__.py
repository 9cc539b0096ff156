"""Data models - Pure data structures with no business logic."""

from .match import Candidate, Decision, Direction, SessionState
from .message import Account, Message
from .profile import Location, Profile, clean_skills
from .schema import SCHEMA_VERSION, ValidationError

__all__ = [
    "Account",
    "Candidate",
    "Decision",
    "Direction",
    "Location",
    "Message",
    "Profile",
    "SCHEMA_VERSION",
    "SessionState",
    "ValidationError",
    "clean_skills",
]

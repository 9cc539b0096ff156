"""Service layer - Business logic modules.

Each service module has a clear interface and can be developed/tested independently.
"""

from .auth_service import AuthError, AuthService
from .chat_service import ChatService, ChatServiceError
from .chat_store import ChatStore, conversation_id
from .geocoding_service import Geocoder
from .json_store import StoreError
from .llm_service import LLMService, LLMServiceError
from .match_service import SwipeSession, rank_candidates, score_candidate, start_discovery
from .profile_service import OnboardingForm, ProfileService, ProfileServiceError
from .profile_store import ProfileStore
from .trade_advisor import TradeAdvisor

__all__ = [
    "AuthError",
    "AuthService",
    "ChatService",
    "ChatServiceError",
    "ChatStore",
    "Geocoder",
    "LLMService",
    "LLMServiceError",
    "OnboardingForm",
    "ProfileService",
    "ProfileServiceError",
    "ProfileStore",
    "StoreError",
    "SwipeSession",
    "TradeAdvisor",
    "conversation_id",
    "rank_candidates",
    "score_candidate",
    "start_discovery",
]

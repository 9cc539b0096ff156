"""Global configuration values."""

import os
from pathlib import Path

# Where stores keep their JSON documents (Persistent Disk in production)
DATA_DIR = Path(os.environ.get("DATA_DIR", "./data"))

# LLM provider used by the trade advisor: "gemini" or "openai"
LLM_PROVIDER = os.environ.get("LLM_PROVIDER", "gemini").lower()

# Default Gemini model (can be overridden via env)
DEFAULT_MODEL = os.environ.get("GEMINI_MODEL", "gemini-2.0-flash")

# Model used when LLM_PROVIDER=openai
OPENAI_MODEL = os.environ.get("OPENAI_MODEL", "gpt-4o")

GEMINI_API_KEY = os.environ.get("GEMINI_API_KEY") or os.environ.get("GOOGLE_API_KEY")
OPENAI_API_KEY = os.environ.get("OPENAI_API_KEY")

# Geocoding (OpenStreetMap Nominatim)
NOMINATIM_URL = os.environ.get("NOMINATIM_URL", "https://nominatim.openstreetmap.org/search")
GEOCODER_USER_AGENT = os.environ.get("GEOCODER_USER_AGENT", "SkillSwap/1.0 (neighbourhood skill exchange)")
GEOCODER_TIMEOUT = int(os.environ.get("GEOCODER_TIMEOUT", "10"))

# Used when geocoding fails completely (centre of India)
DEFAULT_LOCATION = (20.5937, 78.9629)

SECRET_KEY = os.environ.get("SECRET_KEY", "skillswap-dev-secret-key")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Upper bound on in-memory swipe sessions kept by the web app
MAX_DISCOVERY_SESSIONS = int(os.environ.get("MAX_DISCOVERY_SESSIONS", "1000"))

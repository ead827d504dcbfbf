"""
Central settings for the coaching API.

Everything comes from the environment (a local .env is loaded first) so keys
stay out of the code. Import what you need:
`from config import OPENAI_API_KEY, RATE_LIMIT_POLICIES`.
"""

import os
from dotenv import load_dotenv

load_dotenv()


def _env_int(name, default):
    value = os.getenv(name, "").strip()
    return int(value) if value else default


# ============================================================================
# OPENAI
# ============================================================================
# Empty key is allowed so the app (and the tests) can import without one;
# calls will then fail with a 401 from the provider.
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_CHAT_MODEL = os.getenv("OPENAI_CHAT_MODEL", "gpt-4o")
OPENAI_TRANSCRIBE_MODEL = os.getenv("OPENAI_TRANSCRIBE_MODEL", "whisper-1")
TRANSCRIBE_LANGUAGE = os.getenv("TRANSCRIBE_LANGUAGE", "ja")

# Interview generation gives up on the model after this many seconds and
# serves the static fallback questions instead.
LLM_TIMEOUT_SECONDS = float(os.getenv("LLM_TIMEOUT_SECONDS", "30"))

# ============================================================================
# SUPABASE
# ============================================================================
SUPABASE_URL = os.getenv("SUPABASE_URL", "")
SUPABASE_KEY = os.getenv("SUPABASE_KEY", "")
SUPABASE_AUTH_COOKIE = os.getenv("SUPABASE_AUTH_COOKIE", "sb-access-token")

# ============================================================================
# RATE LIMITING
# ============================================================================
# "memory://" keeps counters in-process (single node). Point this at a shared
# store such as "redis://host:6379" when running more than one instance.
RATE_LIMIT_STORAGE_URI = os.getenv("RATE_LIMIT_STORAGE_URI", "memory://")

# Per-endpoint limits in `limits` notation ("<count>/<n> <unit>").
RATE_LIMIT_POLICIES = {
    "chat": os.getenv("RATE_LIMIT_CHAT", "30/10 minutes"),
    "transcribe": os.getenv("RATE_LIMIT_TRANSCRIBE", "15/10 minutes"),
    "interview_generate": os.getenv("RATE_LIMIT_INTERVIEW_GENERATE", "10/10 minutes"),
    "interview_analyze": os.getenv("RATE_LIMIT_INTERVIEW_ANALYZE", "10/10 minutes"),
}

# ============================================================================
# AUDIO UPLOADS
# ============================================================================
MAX_AUDIO_FILE_SIZE = _env_int("MAX_AUDIO_FILE_SIZE", 25 * 1024 * 1024)

ALLOWED_AUDIO_TYPES = [
    "audio/webm",
    "audio/mp3",
    "audio/mp4",
    "audio/mpeg",
    "audio/m4a",
    "audio/wav",
    "audio/flac",
]

# ============================================================================
# SERVER
# ============================================================================
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

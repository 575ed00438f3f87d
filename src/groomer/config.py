import os

from dotenv import load_dotenv

# Load from .env if it exists (useful for local development)
load_dotenv()


def _env_float(name: str, default: float) -> float | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    value = float(raw)
    # 0 disables the timeout
    return value if value > 0 else None


LOGGING_LEVEL = os.getenv("LOGGING_LEVEL", "INFO").upper()

# === LLM providers ===
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
MISTRAL_API_KEY = os.getenv("MISTRAL_API_KEY", "")
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")

# Used when the caller sends no key. Mistral first to match the deployed default.
DEFAULT_LLM_API_KEY = (
    os.getenv("LLM_API_KEY", "") or MISTRAL_API_KEY or OPENAI_API_KEY or GEMINI_API_KEY
)

# Keyed by ProviderKind value
PROVIDER_API_KEYS = {
    "openai": OPENAI_API_KEY,
    "mistral": MISTRAL_API_KEY,
    "gemini": GEMINI_API_KEY,
}

OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
MISTRAL_MODEL = os.getenv("MISTRAL_MODEL", "mistral-large-latest")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash-lite")

OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
MISTRAL_BASE_URL = os.getenv("MISTRAL_BASE_URL", "https://api.mistral.ai/v1")

LLM_TEMPERATURE = 0.0
LLM_TIMEOUT_S = _env_float("LLM_TIMEOUT_S", 60.0)

# === Analysis policy ===
ANALYSIS_REPAIR_ENABLED = os.getenv("ANALYSIS_REPAIR_ENABLED", "1") == "1"
ANALYSIS_RAW_FALLBACK = os.getenv("ANALYSIS_RAW_FALLBACK", "0") == "1"

# === Jira ===
JIRA_BASE_URL = os.getenv("JIRA_BASE_URL", "https://your-instance.atlassian.net")
JIRA_DEFAULT_MAX_RESULTS = 50
JIRA_DEFAULT_FIELDS = [
    "summary",
    "status",
    "assignee",
    "created",
    "priority",
    "issuetype",
]
JIRA_TIMEOUT_S = 30.0

# === Server ===
PORT = int(os.getenv("PORT", "3000"))
FRONTEND_ORIGINS = os.getenv("FRONTEND_ORIGINS", "*")
CACHE_CONTROL_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, private",
    "Pragma": "no-cache",
    "Expires": "0",
}

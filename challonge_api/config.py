"""
Client configuration.

Loads settings from environment variables with sensible defaults.
"""

import os


def _get_float(key: str, default: float) -> float:
    """Get float from environment variable."""
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _get_str(key: str, default: str) -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


# =============================================================================
# API SETTINGS
# =============================================================================
BASE_URL = _get_str('CHALLONGE_BASE_URL', 'https://api.challonge.com/v1')

# Request timeout (in seconds) applied to every call
TIMEOUT_SECONDS = _get_float('CHALLONGE_TIMEOUT', 30.0)

# =============================================================================
# CREDENTIALS
# =============================================================================
# Only used by ChallongeClient.from_env(); an explicitly constructed client
# never reads these.
USERNAME = _get_str('CHALLONGE_USERNAME', '')
API_KEY = _get_str('CHALLONGE_API_KEY', '')

# =============================================================================
# LOGGING
# =============================================================================
LOG_LEVEL = _get_str('LOG_LEVEL', 'INFO')

"""
Audit configuration.

All configuration is loaded from environment variables.
Never hardcode model names or display strings in code.
"""

import os
from functools import lru_cache

from dotenv import load_dotenv

# Load .env file into environment variables
load_dotenv()


class Settings:
    """Settings loaded from environment variables."""

    # Entity kind used to look up the actor behind an audit row.
    # Empty means "no identity provider configured".
    AUDIT_ACTOR_MODEL: str = os.getenv("AUDIT_ACTOR_MODEL", "")
    AUDIT_NULL_STRING: str = os.getenv("AUDIT_NULL_STRING", "nothing")
    AUDIT_UNKNOWN_STRING: str = os.getenv("AUDIT_UNKNOWN_STRING", "unknown")


@lru_cache()
def get_settings() -> Settings:
    """
    Return cached settings instance.

    The Settings object is created once and reused, so
    environment variables are only read on first access.
    """
    return Settings()

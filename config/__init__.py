"""
Config package for global settings and environment variables.
"""

from .settings import (
    FOOTER_TEXT,
    RELATED_PATTERNS_LIMIT,
    SITE_DESCRIPTION,
    SITE_TITLE,
    STATIC_SITE_DIR,
    USE_CASE_PREVIEW_COUNT,
    logger,
)

__all__ = [
    "logger",
    "SITE_TITLE",
    "SITE_DESCRIPTION",
    "FOOTER_TEXT",
    "RELATED_PATTERNS_LIMIT",
    "USE_CASE_PREVIEW_COUNT",
    "STATIC_SITE_DIR",
]

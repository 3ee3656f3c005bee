"""Shared constants for resume-ingest."""

from __future__ import annotations

# Prompt versions (increment when prompt templates change)
FILE_IMPORT_PROMPT_VERSION = "v1"
TAILORING_PROMPT_VERSION = "v1"

# LLM token pricing (USD per 1M tokens)
TOKEN_PRICES: dict[str, dict[str, float]] = {
    "claude-haiku-4-5-20251001": {"input": 0.80, "output": 4.00},
    "claude-sonnet-4-5-20250514": {"input": 3.00, "output": 15.00},
}

# Upload media tags accepted by the file import pipeline
SUPPORTED_MEDIA_TYPES: dict[str, str] = {
    "pdf": "application/pdf",
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
}

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Provenance suffixes appended to generated record titles
TITLE_SUFFIX_FILE = "(File)"
TITLE_SUFFIX_LINKEDIN = "(LinkedIn)"
TITLE_SUFFIX_AI = "(AI)"

# Tailoring bounds
TAILORED_SKILLS_LIMIT = 5
TAILORED_SKILL_MIN_LEVEL = 4
TAILORED_REFERENCES_LIMIT = 3
HEADLINE_MAX_WORDS = 5

SKILL_LEVEL_MIN = 0
SKILL_LEVEL_MAX = 5

LINKEDIN_NETWORK = "LinkedIn"
LINKEDIN_ICON = "linkedin"

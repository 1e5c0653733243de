"""
Extract step of the PR review: turn the provider response payload into the
comment text.

Malformed payloads never raise. They produce an empty review and a warning in
the log, so a broken response shows up as an empty comment rather than a failed
job.
"""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_RESPONSE_FILE = Path("review-response.json")
DEFAULT_REVIEW_FILE = Path("review.txt")

UNKNOWN_ERROR = "Unknown error"


def format_error_review(error_message: str) -> str:
    return f"""⚠️ **AI Review Error**

Could not generate review: {error_message}

This might be due to:
- Invalid API key
- Rate limiting
- Network issues
- Service unavailability

Please check the GitHub Actions logs for more details."""


def _error_message(error: Any) -> str:
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str):
            return message
    return UNKNOWN_ERROR


def _first_text(document: dict[str, Any]) -> str:
    """content[0].text, or empty string if any step of that path is missing."""
    content = document.get("content")
    if not isinstance(content, list) or not content:
        logger.warning("Response has no content blocks")
        return ""
    block = content[0]
    text = block.get("text") if isinstance(block, dict) else None
    if not isinstance(text, str):
        logger.warning("First content block has no text")
        return ""
    return text


def extract_review_text(document: Any) -> str:
    """Review text for a parsed response payload (error message if the provider failed)."""
    if not isinstance(document, dict):
        logger.warning("Response payload is not an object: type=%s", type(document).__name__)
        return ""
    if "error" in document:
        message = _error_message(document["error"])
        logger.error("❌ Error: %s", message)
        return format_error_review(message)
    text = _first_text(document)
    if text:
        logger.info("✅ Review extracted successfully")
    return text


def extract_review(
    response_file: Path = DEFAULT_RESPONSE_FILE,
    review_file: Path = DEFAULT_REVIEW_FILE,
) -> str:
    """Read response_file, write the review text to review_file and return it."""
    raw = Path(response_file).read_text(encoding="utf-8", errors="replace")
    try:
        document = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("Response payload is not valid JSON: %s", e)
        document = None

    review_text = extract_review_text(document)
    Path(review_file).write_text(review_text, encoding="utf-8")
    logger.info("Review length: %s characters", len(review_text))
    return review_text

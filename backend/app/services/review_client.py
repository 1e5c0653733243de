"""
Request step of the PR review: send request.json to Claude and save the raw
response payload for the extract step.
"""

import json
import logging
from pathlib import Path
from typing import Any

from anthropic import Anthropic, APIError

from app.core.config import get_settings
from app.schemas.review import ReviewRequest

logger = logging.getLogger(__name__)

DEFAULT_RESPONSE_FILE = Path("review-response.json")


def _get_client() -> Anthropic:
    settings = get_settings()
    settings.validate_for_review_request()
    # Retries belong to the orchestrator
    return Anthropic(api_key=settings.anthropic_api_key, max_retries=0)


def _error_payload(exc: APIError) -> dict[str, Any]:
    """Provider error body when it has one, otherwise an equivalent error document."""
    body = getattr(exc, "body", None)
    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        return body
    return {
        "type": "error",
        "error": {"type": type(exc).__name__, "message": exc.message},
    }


def request_review(
    request_file: Path = Path("request.json"),
    response_file: Path = DEFAULT_RESPONSE_FILE,
) -> dict[str, Any]:
    """
    Call the Messages API with the saved payload and write the response payload.
    Provider errors are written as an error document, not raised.
    Raises ValueError if ANTHROPIC_API_KEY is not set.
    """
    request = ReviewRequest.model_validate_json(Path(request_file).read_text(encoding="utf-8"))
    client = _get_client()
    logger.info("Calling Claude API model=%s max_tokens=%s", request.model, request.max_tokens)
    try:
        msg = client.messages.create(
            model=request.model,
            max_tokens=request.max_tokens,
            messages=[m.model_dump() for m in request.messages],
        )
        payload = msg.model_dump(mode="json")
        logger.info("Response received content_blocks=%s", len(payload.get("content") or []))
    except APIError as e:
        logger.warning("Claude API error type=%s msg=%s", type(e).__name__, e.message)
        payload = _error_payload(e)

    Path(response_file).write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    return payload

"""Tests for turning the provider response into review text."""

import json

import pytest

from app.services.review_extractor import extract_review, extract_review_text


def _write(tmp_path, payload):
    path = tmp_path / "review-response.json"
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
    return path


def test_extracts_first_text_block(tmp_path):
    response = _write(tmp_path, {"content": [{"type": "text", "text": "Looks good"}]})
    review_file = tmp_path / "review.txt"

    assert extract_review(response, review_file) == "Looks good"
    assert review_file.read_text(encoding="utf-8") == "Looks good"


def test_error_message_is_embedded(tmp_path):
    response = _write(tmp_path, {"type": "error", "error": {"type": "rate_limit_error", "message": "rate limited"}})

    review = extract_review(response, tmp_path / "review.txt")

    assert "rate limited" in review
    assert review.startswith("⚠️ **AI Review Error**")
    assert "Could not generate review: rate limited" in review


def test_error_without_message_is_unknown():
    review = extract_review_text({"error": {"type": "overloaded_error"}})
    assert "Could not generate review: Unknown error" in review


@pytest.mark.parametrize(
    "document",
    [
        {},
        {"content": []},
        {"content": "text"},
        {"content": [{"type": "tool_use"}]},
        {"content": [{"text": None}]},
        ["not", "an", "object"],
        None,
    ],
)
def test_malformed_response_gives_empty_review(document):
    assert extract_review_text(document) == ""


def test_invalid_json_writes_empty_review(tmp_path):
    response = _write(tmp_path, "<html>Bad Gateway</html>")
    review_file = tmp_path / "review.txt"

    assert extract_review(response, review_file) == ""
    assert review_file.read_text(encoding="utf-8") == ""


def test_invalid_utf8_in_text_is_replaced(tmp_path):
    response = _write(tmp_path, "")
    response.write_bytes(b'{"content": [{"type": "text", "text": "ok \xff"}]}')
    review_file = tmp_path / "review.txt"

    assert extract_review(response, review_file) == "ok �"
    assert review_file.read_text(encoding="utf-8") == "ok �"


def test_undecodable_payload_writes_empty_review(tmp_path):
    response = _write(tmp_path, "")
    response.write_bytes(b"\xff\xfe garbage")
    review_file = tmp_path / "review.txt"

    assert extract_review(response, review_file) == ""
    assert review_file.exists()

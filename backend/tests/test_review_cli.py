"""End-to-end tests for the account-review command."""

import json

import pytest

from app.review_cli import main


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_prepare_then_extract(workdir):
    (workdir / "pr-diff.txt").write_text("+ added line\n", encoding="utf-8")

    assert main(["prepare"]) == 0
    request = json.loads((workdir / "request.json").read_text(encoding="utf-8"))
    assert "+ added line" in request["messages"][0]["content"]

    (workdir / "review-response.json").write_text(
        json.dumps({"content": [{"type": "text", "text": "Looks good"}]}), encoding="utf-8"
    )
    assert main(["extract"]) == 0
    assert (workdir / "review.txt").read_text(encoding="utf-8") == "Looks good"


def test_custom_paths(workdir):
    (workdir / "changes.diff").write_text("+ x\n", encoding="utf-8")
    assert main(["prepare", "--diff", "changes.diff", "--output", "out.json", "--max-tokens", "50"]) == 0
    assert json.loads((workdir / "out.json").read_text(encoding="utf-8"))["max_tokens"] == 50


def test_prepare_without_diff_fails(workdir):
    assert main(["prepare"]) == 1
    assert not (workdir / "request.json").exists()


def test_request_without_api_key_fails(workdir, monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    (workdir / "pr-diff.txt").write_text("+ x\n", encoding="utf-8")
    assert main(["prepare"]) == 0
    assert main(["request"]) == 1
    assert not (workdir / "review-response.json").exists()


def test_extract_without_response_fails(workdir):
    assert main(["extract"]) == 1


def test_prepare_with_zero_max_tokens_fails(workdir):
    (workdir / "pr-diff.txt").write_text("+ x\n", encoding="utf-8")
    assert main(["prepare", "--max-tokens", "0"]) == 1
    assert not (workdir / "request.json").exists()


def test_extract_undecodable_response_writes_empty_review(workdir):
    (workdir / "review-response.json").write_bytes(b"\xff\xfe garbage")
    assert main(["extract"]) == 0
    assert (workdir / "review.txt").read_text(encoding="utf-8") == ""

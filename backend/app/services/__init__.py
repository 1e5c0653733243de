# Services: accounts (JSON store) and the PR review steps

from app.services.account_service import (
    AccountService,
    get_account_service,
)
from app.services.review_client import request_review
from app.services.review_extractor import extract_review, extract_review_text
from app.services.review_prompt import build_prompt, prepare_review

__all__ = [
    "AccountService",
    "get_account_service",
    "prepare_review",
    "build_prompt",
    "request_review",
    "extract_review",
    "extract_review_text",
]

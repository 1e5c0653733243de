# Pydantic request/response schemas (API contract and review payloads).

from app.schemas.common import ErrorDetail
from app.schemas.account import Account, AccountSearchResult
from app.schemas.review import ReviewMessage, ReviewRequest

__all__ = [
    "ErrorDetail",
    "Account",
    "AccountSearchResult",
    "ReviewMessage",
    "ReviewRequest",
]

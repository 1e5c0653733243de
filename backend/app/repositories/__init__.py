# Repositories: JSON-file persistence

from app.repositories.account_repository import (
    AccountRepository,
    get_account_repository,
)

__all__ = [
    "AccountRepository",
    "get_account_repository",
]

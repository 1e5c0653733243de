# Domain models: account records persisted in the JSON store

from app.models.account import (
    AccountBase,
    AccountInDB,
)

__all__ = [
    "AccountBase",
    "AccountInDB",
]

"""
Account repository: the whole store is one JSON array on disk.

Every mutation reads the full document, changes it in memory and writes the
full document back. There is no locking: two concurrent writers can lose an
update. Callers that need more than that must serialize access themselves.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path

from pydantic import TypeAdapter

from app.core.config import get_settings
from app.models.account import AccountInDB

logger = logging.getLogger(__name__)

_ACCOUNT_LIST = TypeAdapter(list[AccountInDB])


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AccountRepository:
    """
    CRUD over the JSON account store. Not-found is reported as None / False.
    A structurally invalid file raises pydantic.ValidationError on read.
    """

    def __init__(self, data_file: Path | str) -> None:
        self._data_file = Path(data_file)
        self._ensure_data_file_exists()

    @property
    def data_file(self) -> Path:
        return self._data_file

    def _ensure_data_file_exists(self) -> None:
        self._data_file.parent.mkdir(parents=True, exist_ok=True)
        if not self._data_file.exists():
            logger.info("Creating empty account store at %s", self._data_file)
            self._data_file.write_text("[]", encoding="utf-8")

    def _read_accounts(self) -> list[AccountInDB]:
        raw = self._data_file.read_text(encoding="utf-8").strip()
        # empty file or JSON null counts as an empty store
        if not raw or raw == "null":
            return []
        return _ACCOUNT_LIST.validate_json(raw)

    def _write_accounts(self, accounts: list[AccountInDB]) -> None:
        data = _ACCOUNT_LIST.dump_json(accounts, by_alias=True, indent=2)
        self._data_file.write_bytes(data)

    def get_all(self) -> list[AccountInDB]:
        return self._read_accounts()

    def get_by_id(self, account_id: int) -> AccountInDB | None:
        for account in self._read_accounts():
            if account.id == account_id:
                return account
        return None

    def get_by_name(self, name: str) -> list[AccountInDB]:
        """Exact, case-sensitive match on first name or last name."""
        return [
            a for a in self._read_accounts()
            if a.first_name == name or a.last_name == name
        ]

    def create(self, account: AccountInDB) -> AccountInDB:
        accounts = self._read_accounts()
        now = _utcnow()
        created = account.model_copy(update={
            "id": max((a.id for a in accounts), default=0) + 1,
            "created_at": now,
            "updated_at": now,
        })
        accounts.append(created)
        self._write_accounts(accounts)
        logger.info("Created account id=%s", created.id)
        return created

    def update(self, account: AccountInDB) -> AccountInDB | None:
        accounts = self._read_accounts()
        index = next((i for i, a in enumerate(accounts) if a.id == account.id), None)
        if index is None:
            return None
        updated = account.model_copy(update={
            "created_at": accounts[index].created_at,
            "updated_at": _utcnow(),
        })
        accounts[index] = updated
        self._write_accounts(accounts)
        logger.info("Updated account id=%s", updated.id)
        return updated

    def delete(self, account_id: int) -> bool:
        accounts = self._read_accounts()
        remaining = [a for a in accounts if a.id != account_id]
        if len(remaining) == len(accounts):
            return False
        self._write_accounts(remaining)
        logger.info("Deleted account id=%s", account_id)
        return True


def get_account_repository() -> AccountRepository:
    """Dependency: return an AccountRepository over the configured data file."""
    return AccountRepository(get_settings().accounts_data_file)

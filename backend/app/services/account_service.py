"""
Account service: pass-through business layer over AccountRepository.
"""

from fastapi import Depends

from app.models.account import AccountInDB
from app.repositories.account_repository import AccountRepository, get_account_repository
from app.schemas.account import AccountSearchResult


class AccountService:
    def __init__(self, repository: AccountRepository) -> None:
        self._repository = repository

    def get_all_accounts(self) -> list[AccountInDB]:
        return self._repository.get_all()

    def get_account_by_id(self, account_id: int) -> AccountInDB | None:
        return self._repository.get_by_id(account_id)

    def get_accounts_by_name(self, name: str) -> list[AccountSearchResult]:
        """Accounts whose first or last name equals name, narrowed to the search shape."""
        return [
            AccountSearchResult(
                id=a.id,
                first_name=a.first_name,
                last_name=a.last_name,
                email=a.email,
            )
            for a in self._repository.get_by_name(name)
        ]

    def create_account(self, account: AccountInDB) -> AccountInDB:
        return self._repository.create(account)

    def update_account(self, account: AccountInDB) -> AccountInDB | None:
        return self._repository.update(account)

    def delete_account(self, account_id: int) -> bool:
        return self._repository.delete(account_id)


def get_account_service(
    repository: AccountRepository = Depends(get_account_repository),
) -> AccountService:
    """Dependency: return an AccountService bound to the request's repository."""
    return AccountService(repository)

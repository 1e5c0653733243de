"""
Pydantic models for account records persisted in the JSON store.
Field names are camelCase on disk (firstName, createdAt, ...).
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AccountBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: str
    last_name: str
    email: str
    phone: str


class AccountInDB(AccountBase):
    """Stored record. id and timestamps are assigned by the repository."""
    model_config = ConfigDict(from_attributes=True)

    id: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

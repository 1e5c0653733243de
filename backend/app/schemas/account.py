"""
Account schemas (API contract). camelCase on the wire, snake_case accepted on input.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AccountSearchResult(BaseModel):
    """Single account in name-search results (no phone)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    first_name: str
    last_name: str
    email: str


class Account(BaseModel):
    """Request and response body for accounts. id is ignored on create."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int = Field(0, description="Account id; must match the path on update")
    first_name: str
    last_name: str
    email: str
    phone: str

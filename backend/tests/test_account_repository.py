"""Tests for the JSON-file account store."""

import json

import pytest
from pydantic import ValidationError

from app.models.account import AccountInDB
from app.repositories.account_repository import AccountRepository


def _account(first="Jane", last="Doe", **kwargs) -> AccountInDB:
    return AccountInDB(
        first_name=first,
        last_name=last,
        email=kwargs.get("email", f"{first.lower()}@example.com"),
        phone=kwargs.get("phone", "555-0100"),
        id=kwargs.get("id", 0),
    )


def test_creates_empty_store_file(data_file):
    AccountRepository(data_file)
    assert data_file.exists()
    assert json.loads(data_file.read_text()) == []


def test_empty_or_null_file_counts_as_empty(data_file):
    data_file.parent.mkdir(parents=True)
    data_file.write_text("")
    repo = AccountRepository(data_file)
    assert repo.get_all() == []
    data_file.write_text("null")
    assert repo.get_all() == []


def test_first_id_is_one(repository):
    assert repository.create(_account()).id == 1


def test_id_is_max_plus_one(repository):
    first = repository.create(_account("Ann"))
    second = repository.create(_account("Bob"))
    third = repository.create(_account("Cat"))
    assert (first.id, second.id, third.id) == (1, 2, 3)

    repository.delete(second.id)
    assert repository.create(_account("Dan")).id == 4


def test_deleting_max_record_frees_its_id(repository):
    repository.create(_account("Ann"))
    second = repository.create(_account("Bob"))

    assert repository.delete(second.id) is True
    assert repository.create(_account("Cat")).id == 2


def test_create_ignores_incoming_id(repository):
    assert repository.create(_account(id=42)).id == 1


def test_create_sets_timestamps(repository):
    created = repository.create(_account())
    assert created.created_at is not None
    assert created.created_at == created.updated_at


def test_create_then_get_by_id_round_trip(repository):
    created = repository.create(_account())
    assert repository.get_by_id(created.id) == created


def test_get_by_id_missing_returns_none(repository):
    repository.create(_account())
    assert repository.get_by_id(99) is None


def test_store_uses_camel_case(repository, data_file):
    repository.create(_account())
    stored = json.loads(data_file.read_text())
    assert set(stored[0]) == {"id", "firstName", "lastName", "email", "phone", "createdAt", "updatedAt"}


def test_update_preserves_created_at_and_refreshes_updated_at(repository):
    created = repository.create(_account())
    changed = _account(first="Janet", id=created.id)

    updated = repository.update(changed)

    assert updated is not None
    assert updated.first_name == "Janet"
    assert updated.created_at == created.created_at
    assert updated.updated_at >= created.updated_at
    assert repository.get_by_id(created.id) == updated


def test_update_cannot_overwrite_created_at(repository):
    created = repository.create(_account())
    changed = _account(id=created.id).model_copy(update={"created_at": None})
    assert repository.update(changed).created_at == created.created_at


def test_update_missing_returns_none(repository):
    repository.create(_account())
    before = repository.get_all()
    assert repository.update(_account(id=7)) is None
    assert repository.get_all() == before


def test_delete_removes_record(repository):
    created = repository.create(_account())
    assert repository.delete(created.id) is True
    assert repository.get_by_id(created.id) is None
    assert repository.get_all() == []


def test_delete_missing_leaves_store_unchanged(repository, data_file):
    repository.create(_account("Ann"))
    repository.create(_account("Bob"))
    before = repository.get_all()
    raw_before = data_file.read_text()

    assert repository.delete(99) is False
    assert repository.get_all() == before
    assert data_file.read_text() == raw_before


def test_get_by_name_matches_first_or_last_name(repository):
    jane = repository.create(_account("Jane", "Doe"))
    john = repository.create(_account("John", "Smith"))

    assert repository.get_by_name("Jane") == [jane]
    assert repository.get_by_name("Smith") == [john]
    assert repository.get_by_name("Nobody") == []


def test_get_by_name_is_exact_and_case_sensitive(repository):
    repository.create(_account("jane", "doe"))
    assert repository.get_by_name("Jane") == []
    assert repository.get_by_name("jan") == []
    assert len(repository.get_by_name("jane")) == 1


def test_reads_existing_file_written_elsewhere(data_file):
    data_file.parent.mkdir(parents=True)
    data_file.write_text(json.dumps([
        {
            "id": 5,
            "firstName": "Ann",
            "lastName": "Lee",
            "email": "ann@example.com",
            "phone": "1",
            "createdAt": "2024-01-01T00:00:00Z",
            "updatedAt": "2024-01-02T00:00:00Z",
        }
    ]))
    repo = AccountRepository(data_file)
    assert repo.get_by_id(5).first_name == "Ann"
    assert repo.create(_account()).id == 6


def test_corrupt_file_raises(data_file):
    data_file.parent.mkdir(parents=True)
    data_file.write_text("{not json")
    repo = AccountRepository(data_file)
    with pytest.raises(ValidationError):
        repo.get_all()

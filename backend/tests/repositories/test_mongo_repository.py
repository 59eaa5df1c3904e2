"""Mongo Repository - generic CRUD against one collection.

Tests:
    - insert generates _id and timestamps; round-trips through find_one
    - find_many honors the filter and the repository's default sort
    - update_one merges only the given fields and refreshes updated_at
    - Zero-match update/delete return 0 (no error at this layer)
    - Driver failures surface as DatabaseError with the driver message
"""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from bson import ObjectId
from pymongo.errors import AutoReconnect, OperationFailure

from expense_tracker.core.errors import DatabaseError
from expense_tracker.repositories.entities import (
    CategoryRepository, ExpenseRepository, UserRepository,
)


def user_doc(name="Alice", **overrides):
    doc = {
        "email": f"{name.lower()}@acme.com", "phone_number": "5551234",
        "name": name, "role": "STAFF", "is_active": True,
    }
    doc.update(overrides)
    return doc


async def test_insert_generates_id_and_timestamps(fake_db):
    repo = UserRepository(fake_db)

    user_id = await repo.insert(user_doc())

    assert isinstance(user_id, ObjectId)
    stored = fake_db["users"].documents[0]
    assert stored["_id"] == user_id
    assert stored["created_at"] == stored["updated_at"]
    assert stored["created_at"].tzinfo is not None


async def test_find_one_round_trip(fake_db):
    repo = UserRepository(fake_db)
    user_id = await repo.insert(user_doc())

    user = await repo.find_one({"_id": user_id})

    assert user.id == str(user_id)
    assert user.name == "Alice"
    assert user.role == "STAFF"


async def test_find_one_no_match_returns_none(fake_db):
    assert await UserRepository(fake_db).find_one({"_id": ObjectId()}) is None


async def test_find_many_applies_filter(fake_db):
    repo = UserRepository(fake_db)
    await repo.insert(user_doc("Alice"))
    await repo.insert(user_doc("Bob", is_active=False))

    active = await repo.find_many({"is_active": True})

    assert [u.name for u in active] == ["Alice"]
    assert len(await repo.find_many({})) == 2


async def test_expenses_default_sort_newest_first(fake_db):
    category = {"_id": ObjectId(), "name": "Food",
                "created_at": datetime.now(timezone.utc),
                "updated_at": datetime.now(timezone.utc)}
    user = {"_id": ObjectId(), **user_doc(),
            "created_at": datetime.now(timezone.utc),
            "updated_at": datetime.now(timezone.utc)}
    repo = ExpenseRepository(fake_db)
    for day in (3, 20, 11):
        await repo.insert({
            "project_id": ObjectId(),
            "date": datetime(2024, 1, day, tzinfo=timezone.utc),
            "title": f"day {day}", "description": "x", "location": "",
            "total": Decimal("1.00"), "status": "pending",
            "category": category, "inserted_by": user,
        })

    expenses = await repo.find_many({})

    assert [e.date.day for e in expenses] == [20, 11, 3]


async def test_update_one_merges_and_refreshes_updated_at(fake_db):
    repo = UserRepository(fake_db)
    user_id = await repo.insert(user_doc())
    before = fake_db["users"].documents[0].copy()

    count = await repo.update_one({"name": "Alicia"}, {"_id": user_id})

    after = fake_db["users"].documents[0]
    assert count == 1
    assert after["name"] == "Alicia"
    assert after["email"] == before["email"]
    assert after["created_at"] == before["created_at"]
    assert after["updated_at"] >= before["updated_at"]


async def test_update_and_delete_without_match_return_zero(fake_db):
    repo = CategoryRepository(fake_db)
    assert await repo.update_one({"name": "Travel"}, {"_id": ObjectId()}) == 0
    assert await repo.delete_one({"_id": ObjectId()}) == 0


async def test_delete_one_removes_document(fake_db):
    repo = CategoryRepository(fake_db)
    category_id = await repo.insert({"name": "Food"})

    assert await repo.delete_one({"_id": category_id}) == 1
    assert await repo.find_one({"_id": category_id}) is None


async def test_driver_error_on_insert_becomes_database_error(fake_db):
    fake_db["categories"].fail_with = AutoReconnect("connection reset by peer")

    with pytest.raises(DatabaseError) as exc_info:
        await CategoryRepository(fake_db).insert({"name": "Food"})

    assert exc_info.value.operation == "insert"
    assert "connection reset by peer" in exc_info.value.message
    assert exc_info.value.http_status == 500


async def test_driver_error_on_find_many_becomes_database_error(fake_db):
    fake_db["users"].fail_with = OperationFailure("bad query")

    with pytest.raises(DatabaseError, match="Database find failed"):
        await UserRepository(fake_db).find_many({})


async def test_driver_error_on_update_via_mocked_collection(fake_db):
    repo = UserRepository(fake_db)
    repo.collection = AsyncMock()
    repo.collection.update_one.side_effect = OperationFailure("write conflict")

    with pytest.raises(DatabaseError, match="write conflict"):
        await repo.update_one({"name": "x"}, {"_id": ObjectId()})

"""Expense Routes - expenses with snapshotted category and submitter.

Tests:
    - Create resolves project, category and user; snapshots are embedded
    - Missing or malformed references rejected before any write
    - Renaming a category never rewrites existing expense snapshots
    - List honors the half-open date range and sorts newest first
    - Delete is physical
"""

from tests.services.payloads import expense_body

EXPENSES = "/api/v1/expenses"


async def test_create_expense_embeds_snapshots(client, seed):
    res = await client.post(EXPENSES, json=expense_body(seed))

    assert res.status_code == 201
    assert res.json()["message"] == "expense created"
    expense = (await client.get(f"{EXPENSES}/{res.json()['data']}")).json()["data"]
    assert expense["project_id"] == seed["project_id"]
    assert expense["date"].startswith("2024-01-15")
    assert expense["total"] == "42.50"
    assert expense["status"] == "pending"
    assert expense["category"]["id"] == seed["category_id"]
    assert expense["category"]["name"] == "Food"
    assert expense["inserted_by"]["id"] == seed["user_id"]
    assert expense["inserted_by"]["name"] == "Alice Smith"


async def test_unknown_category_is_404_and_nothing_written(client, seed, fake_db):
    res = await client.post(
        EXPENSES, json=expense_body(seed, category_id="65a000000000000000000000"),
    )

    assert res.status_code == 404
    assert "Category" in res.json()["message"]
    assert fake_db["expenses"].documents == []


async def test_unknown_project_is_404(client, seed):
    res = await client.post(
        EXPENSES, json=expense_body(seed, project_id="65a000000000000000000000"),
    )
    assert res.status_code == 404


async def test_malformed_user_id_is_400(client, seed):
    res = await client.post(EXPENSES, json=expense_body(seed, inserted_by="nobody"))

    assert res.status_code == 400
    assert "inserted_by" in res.json()["message"]


async def test_project_id_is_required(client, seed):
    body = expense_body(seed)
    del body["project_id"]

    res = await client.post(EXPENSES, json=body)

    assert res.status_code == 400


async def test_bad_date_is_400(client, seed):
    res = await client.post(EXPENSES, json=expense_body(seed, date="15/01/2024"))
    assert res.status_code == 400


async def test_non_positive_total_is_400(client, seed):
    res = await client.post(EXPENSES, json=expense_body(seed, total="0"))
    assert res.status_code == 400


async def test_category_rename_keeps_expense_snapshot(client, seed):
    expense_id = (await client.post(EXPENSES, json=expense_body(seed))).json()["data"]

    await client.put(
        f"/api/v1/categories/{seed['category_id']}", json={"name": "Meals"},
    )

    expense = (await client.get(f"{EXPENSES}/{expense_id}")).json()["data"]
    assert expense["category"]["name"] == "Food"


async def test_list_expenses_in_range_newest_first(client, seed):
    for day in ("2024-01-03", "2024-01-20", "2024-02-01", "2024-01-11"):
        await client.post(EXPENSES, json=expense_body(seed, date=day, title=day))

    res = await client.get(EXPENSES, params={"start": "2024-01-01", "end": "2024-02-01"})

    assert res.status_code == 200
    assert [e["title"] for e in res.json()["data"]] == [
        "2024-01-20", "2024-01-11", "2024-01-03",
    ]
    assert len((await client.get(EXPENSES)).json()["data"]) == 4


async def test_list_expenses_start_without_end_is_400(client):
    res = await client.get(EXPENSES, params={"start": "2024-01-01"})

    assert res.status_code == 400
    assert res.json()["message"] == "Specify the end period"


async def test_update_expense_total_and_category(client, seed):
    expense_id = (await client.post(EXPENSES, json=expense_body(seed))).json()["data"]
    travel = (await client.post("/api/v1/categories", json={"name": "Travel"})).json()["data"]

    res = await client.put(
        f"{EXPENSES}/{expense_id}",
        json={"total": "99.90", "category_id": travel, "status": "confirmed"},
    )

    assert res.status_code == 200
    expense = (await client.get(f"{EXPENSES}/{expense_id}")).json()["data"]
    assert expense["total"] == "99.90"
    assert expense["status"] == "confirmed"
    assert expense["category"]["name"] == "Travel"
    assert expense["title"] == "Lunch"


async def test_update_expense_empty_body_is_400(client, seed):
    expense_id = (await client.post(EXPENSES, json=expense_body(seed))).json()["data"]
    res = await client.put(f"{EXPENSES}/{expense_id}", json={})
    assert res.status_code == 400


async def test_delete_expense_is_physical(client, seed, fake_db):
    expense_id = (await client.post(EXPENSES, json=expense_body(seed))).json()["data"]

    res = await client.delete(f"{EXPENSES}/{expense_id}")

    assert res.status_code == 202
    assert fake_db["expenses"].documents == []
    assert (await client.get(f"{EXPENSES}/{expense_id}")).status_code == 404

"""Project Details Pipeline - pure composition of the projects/expenses/members join.

Invariants:
    - Stage order is fixed: $match project -> $lookup expenses (sorted) -> $lookup members -> $project
    - Expenses inside the join are sorted by date desc, ties broken by _id desc
    - Date window (start <= date < end) and member active flag are applied in the
      $project shaping stage via $filter, so only matching rows leave the server
    - $filter preserves input order, so the shaped expense list stays sorted

Design Decisions:
    - Sort lives in the expenses $lookup sub-pipeline: a top-level $sort would order
      project documents, not the embedded expense array
    - Builder is pure (returns plain dicts); execution lives in repositories/project_details.py
"""

from bson import ObjectId

from expense_tracker.core.domain_types import DateWindow

PROJECTS = "projects"
EXPENSES = "expenses"
PROJECT_MEMBERS = "project_members"

PROJECT_FIELDS = ("_id", "title", "description", "is_active", "created_at", "updated_at")


def match_project_stage(project_id: ObjectId) -> dict:
    return {"$match": {"_id": project_id}}


def lookup_expenses_stage() -> dict:
    """Left-outer join of the project's expenses, newest first."""
    return {
        "$lookup": {
            "from": EXPENSES,
            "let": {"project_id": "$_id"},
            "pipeline": [
                {"$match": {"$expr": {"$eq": ["$project_id", "$$project_id"]}}},
                {"$sort": {"date": -1, "_id": -1}},
            ],
            "as": "expenses",
        },
    }


def lookup_members_stage() -> dict:
    """Left-outer join of the project's members."""
    return {
        "$lookup": {
            "from": PROJECT_MEMBERS,
            "localField": "_id",
            "foreignField": "project_id",
            "as": "members",
        },
    }


def shape_stage(window: DateWindow, active_only: bool) -> dict:
    """Keep project scalars; filter the joined arrays server-side."""
    projection: dict = {name: 1 for name in PROJECT_FIELDS}
    projection["expenses"] = {
        "$filter": {
            "input": "$expenses",
            "as": "expense",
            "cond": {
                "$and": [
                    {"$gte": ["$$expense.date", window.start]},
                    {"$lt": ["$$expense.date", window.end]},
                ],
            },
        },
    }
    projection["members"] = {
        "$filter": {
            "input": "$members",
            "as": "member",
            "cond": {"$eq": ["$$member.is_active", active_only]},
        },
    }
    return {"$project": projection}


def build_project_details_pipeline(
    project_id: ObjectId, window: DateWindow, active_only: bool,
) -> list[dict]:
    """Full aggregation pipeline for one project's details view."""
    return [
        match_project_stage(project_id),
        lookup_expenses_stage(),
        lookup_members_stage(),
        shape_stage(window, active_only),
    ]

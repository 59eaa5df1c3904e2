"""Project Details Aggregator - runs the details pipeline against the projects collection.

Invariants:
    - The whole join, sort and filter run server-side in one aggregate round trip
    - No matching project -> ResourceNotFoundError (never an empty zero-value view)
    - Pure read, no side effects
"""

import logging
from typing import Any

from bson import ObjectId
from pymongo.errors import PyMongoError

from expense_tracker.core.domain_types import DateWindow
from expense_tracker.core.errors import DatabaseError, ErrorContext, ResourceNotFoundError
from expense_tracker.core.project_details import PROJECTS, build_project_details_pipeline
from expense_tracker.models.project import ProjectDetails

logger = logging.getLogger(__name__)


class ProjectDetailsAggregator:
    """Assembles ProjectDetails from projects, expenses and project_members."""

    def __init__(self, database: Any):
        self.collection = database[PROJECTS]

    async def lookup(
        self, project_id: ObjectId, window: DateWindow, active_only: bool,
    ) -> ProjectDetails:
        pipeline = build_project_details_pipeline(project_id, window, active_only)
        try:
            cursor = await self.collection.aggregate(pipeline)
            documents = [doc async for doc in cursor]
        except PyMongoError as e:
            logger.error(
                f"Project details aggregation failed: {e}",
                extra={"collection": PROJECTS, "operation": "aggregate"},
            )
            raise DatabaseError(
                str(e), "aggregate",
                ErrorContext(resource=PROJECTS, operation="aggregate"),
            )
        if not documents:
            raise ResourceNotFoundError("Project", str(project_id))
        return ProjectDetails.model_validate(documents[0])

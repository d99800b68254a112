"""
List Audit Records Use Case

Returns audit history matching a filter, oldest first.
"""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.repositories.audit_record_repository import AuditRecordFilter
from src.app.services.unit_of_work import UnitOfWork

from .dtos import AuditRecordResponse

logger = logging.getLogger(__name__)


class ListAuditRecordsUseCase:
    """
    Use case for listing audit records.

    Business Rules:
    - Soft-deleted records are hidden unless include_deleted is set
    - Ordered by created_at ascending, ties broken by id
    - limit, when given, must be positive
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, filters: AuditRecordFilter
    ) -> Result[List[AuditRecordResponse]]:
        if filters.limit is not None and filters.limit < 1:
            return Return.err(Error("VALIDATION_ERROR", "limit must be at least 1"))

        async with self.uow:
            try:
                records = [
                    AuditRecordResponse.from_entity(record)
                    async for record in self.uow.audit_records.query(filters)
                ]
            except SQLAlchemyError:
                logger.exception("Failed to list audit records")
                return Return.err(Error("STORAGE_ERROR", "Audit storage is unavailable"))

            return Return.ok(records)

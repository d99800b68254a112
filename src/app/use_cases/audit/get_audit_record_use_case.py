"""
Get Audit Record Use Case

Fetches a single audit record, including soft-deleted ones.
"""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import AuditRecordResponse

logger = logging.getLogger(__name__)


class GetAuditRecordUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, record_id: UUID) -> Result[AuditRecordResponse]:
        async with self.uow:
            try:
                record = await self.uow.audit_records.get_by_id(record_id)
            except SQLAlchemyError:
                logger.exception("Failed to load audit record %s", record_id)
                return Return.err(Error("STORAGE_ERROR", "Audit storage is unavailable"))

            if record is None:
                return Return.err(
                    Error("AUDIT_RECORD_NOT_FOUND", "Audit record not found")
                )

            return Return.ok(AuditRecordResponse.from_entity(record))

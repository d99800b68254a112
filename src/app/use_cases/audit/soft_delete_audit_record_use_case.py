"""
Soft Delete Audit Record Use Case

Marks an audit record as logically removed. The row stays in storage.
"""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow

from .dtos import AuditRecordResponse

logger = logging.getLogger(__name__)


class SoftDeleteAuditRecordUseCase:
    """
    Use case for soft-deleting an audit record.

    Business Logic:
    1. Load the record (NOT_FOUND if missing)
    2. Set is_deleted, bump updated_at, record who did it
    3. Commit and return the updated snapshot

    Idempotent: deleting an already-deleted record succeeds and only
    refreshes updated_at / updated_by.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, record_id: UUID, actor_user_id: Optional[UUID] = None
    ) -> Result[AuditRecordResponse]:
        async with self.uow:
            try:
                record = await self.uow.audit_records.get_by_id(record_id)
                if record is None:
                    return Return.err(
                        Error("AUDIT_RECORD_NOT_FOUND", "Audit record not found")
                    )

                record.is_deleted = True
                now = utcnow()
                # created_at <= updated_at even if the clock stepped back
                if record.created_at is not None and now < record.created_at:
                    now = record.created_at
                record.updated_at = now
                if actor_user_id is not None:
                    record.updated_by = actor_user_id

                record = await self.uow.audit_records.update(record)
                await self.uow.commit()
            except SQLAlchemyError:
                logger.exception("Failed to soft delete audit record %s", record_id)
                return Return.err(Error("STORAGE_ERROR", "Audit storage is unavailable"))

            logger.info("Audit record %s soft deleted", record.id)
            return Return.ok(AuditRecordResponse.from_entity(record))

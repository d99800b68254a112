"""
Create Audit Record Use Case

Records one administrative action in the audit trail.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import AuditRecordResponse, CreateAuditRecordCommand
from .record_factory import build_audit_record, validate_audit_input

logger = logging.getLogger(__name__)


class CreateAuditRecordUseCase:
    """
    Use case for appending an audit record.

    Business Rules:
    - action is required and must contain non-whitespace text
    - target_type and target_id come as a pair or not at all
    - payload_json, when given, must parse as JSON
    - id and timestamps are generated here; created_at == updated_at
    - updated_by starts as the acting user
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, command: CreateAuditRecordCommand
    ) -> Result[AuditRecordResponse]:
        error = validate_audit_input(
            command.action,
            command.target_type,
            command.target_id,
            command.payload_json,
        )
        if error is not None:
            return Return.err(error)

        async with self.uow:
            record = build_audit_record(
                actor_user_id=command.actor_user_id,
                action=command.action,
                target_type=command.target_type,
                target_id=command.target_id,
                payload_json=command.payload_json,
            )
            try:
                record = await self.uow.audit_records.create(record)
                await self.uow.commit()
            except SQLAlchemyError:
                logger.exception("Failed to persist audit record for action %r", command.action)
                return Return.err(Error("STORAGE_ERROR", "Audit storage is unavailable"))

            logger.info("Audit record %s created (action=%s)", record.id, record.action)
            return Return.ok(AuditRecordResponse.from_entity(record))

"""
Admin audit logger

Called by business code right after an admin action, inside the same unit
of work as the action itself. The record is added but not committed; the
caller's commit makes the action and its audit entry durable together.
"""

import json
import logging
from typing import Any, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit.record_factory import build_audit_record, validate_audit_input
from src.domain.entities import AuditRecord, AuditTargetType

logger = logging.getLogger(__name__)


class AdminAction:
    """Action names written by the admin console"""

    BLOCK_USER = "BLOCK_USER"
    UNBLOCK_USER = "UNBLOCK_USER"
    CLOSE_JOB = "CLOSE_JOB"
    VERIFY_COMPANY = "VERIFY_COMPANY"
    REJECT_COMPANY = "REJECT_COMPANY"


async def record_admin_action(
    uow: UnitOfWork,
    actor_user_id: Optional[UUID],
    action: str,
    target_type: Optional[AuditTargetType] = None,
    target_id: Optional[UUID] = None,
    payload: Any = None,
) -> Result[AuditRecord]:
    """
    Add an audit record for an admin action to an open unit of work.

    Args:
        uow: Unit of work already entered by the caller
        actor_user_id: Admin performing the action
        action: Action name, e.g. AdminAction.BLOCK_USER
        target_type: Kind of resource acted on
        target_id: ID of the resource acted on
        payload: JSON-serializable detail (reason, before/after values)

    Returns:
        Result with the pending AuditRecord, or VALIDATION_ERROR /
        SERIALIZATION_ERROR / STORAGE_ERROR
    """
    payload_json = None
    if payload is not None:
        try:
            payload_json = json.dumps(payload, allow_nan=False)
        except (TypeError, ValueError) as exc:
            return Return.err(
                Error("SERIALIZATION_ERROR", f"Audit payload is not JSON-serializable: {exc}")
            )

    error = validate_audit_input(action, target_type, target_id, payload_json)
    if error is not None:
        logger.warning("Rejected audit entry for %r: %s", action, error.message)
        return Return.err(error)

    record = build_audit_record(
        actor_user_id=actor_user_id,
        action=action,
        target_type=target_type,
        target_id=target_id,
        payload_json=payload_json,
    )
    try:
        record = await uow.audit_records.create(record)
    except SQLAlchemyError:
        logger.exception("Failed to persist audit record for action %r", action)
        return Return.err(Error("STORAGE_ERROR", "Audit storage is unavailable"))

    return Return.ok(record)

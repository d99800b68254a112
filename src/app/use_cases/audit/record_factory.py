"""
Validation and construction of new audit records.

Shared by CreateAuditRecordUseCase and the admin audit logger so both
entry points apply the same rules.
"""

import json
from typing import Optional
from uuid import UUID

from libs.result import Error
from src.domain.base import utcnow
from src.domain.entities import AuditRecord, AuditTargetType


def _reject_constant(name: str):
    raise ValueError(f"{name} is not a JSON value")


def validate_audit_input(
    action: Optional[str],
    target_type: Optional[AuditTargetType],
    target_id: Optional[UUID],
    payload_json: Optional[str],
) -> Optional[Error]:
    """Return the first rule the input breaks, or None"""
    if action is None or not action.strip():
        return Error("VALIDATION_ERROR", "Action must not be empty")

    if (target_type is None) != (target_id is None):
        return Error(
            "VALIDATION_ERROR",
            "target_type and target_id must be provided together",
        )

    if payload_json is not None:
        try:
            json.loads(payload_json, parse_constant=_reject_constant)
        except (TypeError, ValueError) as exc:
            return Error("SERIALIZATION_ERROR", f"payload_json is not valid JSON: {exc}")

    return None


def build_audit_record(
    actor_user_id: Optional[UUID],
    action: str,
    target_type: Optional[AuditTargetType],
    target_id: Optional[UUID],
    payload_json: Optional[str],
) -> AuditRecord:
    now = utcnow()
    return AuditRecord(
        actor_user_id=actor_user_id,
        action=action,
        target_type=target_type,
        target_id=target_id,
        payload_json=payload_json,
        is_deleted=False,
        created_at=now,
        updated_at=now,
        updated_by=actor_user_id,
    )

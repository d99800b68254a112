"""
Audit Use Case DTOs (Data Transfer Objects)

Command and Response classes for the audit domain. Responses are detached
copies of the stored record; callers never hold the ORM entity.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.domain.entities import AuditRecord, AuditTargetType


class CreateAuditRecordCommand(BaseModel):
    """Input to CreateAuditRecordUseCase"""

    actor_user_id: Optional[UUID] = None
    action: str
    target_type: Optional[AuditTargetType] = None
    target_id: Optional[UUID] = None
    payload_json: Optional[str] = None


class AuditRecordResponse(BaseModel):
    """Snapshot of one audit record"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    actor_user_id: Optional[UUID]
    action: Optional[str]
    target_type: Optional[AuditTargetType]
    target_id: Optional[UUID]
    payload_json: Optional[str]
    is_deleted: bool
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
    updated_by: Optional[UUID]

    @classmethod
    def from_entity(cls, record: AuditRecord) -> "AuditRecordResponse":
        return cls(
            id=record.id,
            actor_user_id=record.actor_user_id,
            action=record.action,
            target_type=record.target_type,
            target_id=record.target_id,
            payload_json=record.payload_json,
            is_deleted=bool(record.is_deleted),
            created_at=record.created_at,
            updated_at=record.updated_at,
            updated_by=record.updated_by,
        )

"""
AuditRecord Entity

One administrative action taken against a target resource (AdminAudit table).
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import Boolean, Enum as SAEnum, Text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import UUIDChar, utcnow

from .enums import AuditTargetType


class AuditRecord(SQLModel, table=True):
    """
    AuditRecord entity - append-only log of admin actions.

    Business Rules:
    - Never physically deleted; is_deleted marks logical removal
    - Only is_deleted, updated_at and updated_by change after creation
    - target_type and target_id are set together or not at all
    - payload_json holds JSON text (snapshot or diff of the action)
    - updated_by is the user id of whoever last wrote the record
    """

    __tablename__ = "AdminAudit"

    id: UUID = Field(
        default_factory=uuid4,
        sa_column=Column("id", UUIDChar(), primary_key=True, nullable=False),
    )

    actor_user_id: Optional[UUID] = Field(
        default=None, sa_column=Column("actor_user_id", UUIDChar(), nullable=True)
    )
    action: Optional[str] = Field(default=None, sa_column=Column("action", Text))

    target_type: Optional[AuditTargetType] = Field(
        default=None,
        sa_column=Column(
            "target_type",
            SAEnum(AuditTargetType, native_enum=False, length=32),
            nullable=True,
        ),
    )
    target_id: Optional[UUID] = Field(
        default=None, sa_column=Column("target_id", UUIDChar(), nullable=True)
    )

    payload_json: Optional[str] = Field(
        default=None, sa_column=Column("payload_json", Text)
    )

    # Soft delete
    is_deleted: bool = Field(
        default=False,
        sa_column=Column("is_deleted", Boolean, default=False, nullable=True),
    )

    # Timestamps
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column("created_at", DateTime)
    )
    updated_at: datetime = Field(
        default_factory=utcnow, sa_column=Column("updated_at", DateTime)
    )
    updated_by: Optional[UUID] = Field(
        default=None, sa_column=Column("updated_by", UUIDChar(), nullable=True)
    )

    __table_args__ = (
        Index("idx_admin_audit_created_at", "created_at", "id"),
        Index("idx_admin_audit_target", "target_type", "target_id"),
        Index("idx_admin_audit_actor", "actor_user_id"),
    )

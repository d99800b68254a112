from abc import ABC, abstractmethod
from typing import AsyncIterable, Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import AuditRecord, AuditTargetType


class AuditRecordFilter(BaseModel):
    """Criteria for listing audit records; unset fields do not filter"""

    target_type: Optional[AuditTargetType] = None
    target_id: Optional[UUID] = None
    actor_user_id: Optional[UUID] = None
    include_deleted: bool = False
    limit: Optional[int] = None


class IAuditRecordRepository(ABC):
    """AuditRecord repository interface - application layer"""

    @abstractmethod
    async def create(self, audit_record: AuditRecord) -> AuditRecord:
        """Persist a new audit record"""
        pass

    @abstractmethod
    async def get_by_id(self, record_id: UUID) -> Optional[AuditRecord]:
        """Get audit record by ID, deleted or not"""
        pass

    @abstractmethod
    async def update(self, audit_record: AuditRecord) -> AuditRecord:
        """Write back a mutated audit record"""
        pass

    @abstractmethod
    def query(self, filters: AuditRecordFilter) -> AsyncIterable[AuditRecord]:
        """
        Build a lazy, restartable sequence of matching audit records.

        Nothing is read until the sequence is iterated, and every iteration
        reads the table again. Records come ordered by created_at ascending,
        ties broken by id.
        """
        pass

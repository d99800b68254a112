from typing import AsyncIterator, List, Optional
from uuid import UUID

from sqlalchemy import or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.audit_record_repository import (
    AuditRecordFilter,
    IAuditRecordRepository,
)
from src.domain.entities import AuditRecord


class AuditRecordQuery:
    """Async iterable over a select statement, re-executed on every iteration"""

    def __init__(self, session: AsyncSession, stmt):
        self.session = session
        self.stmt = stmt

    def __aiter__(self) -> AsyncIterator[AuditRecord]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[AuditRecord]:
        result = await self.session.exec(self.stmt)
        for record in result:
            yield record

    async def all(self) -> List[AuditRecord]:
        return [record async for record in self]


class AuditRecordRepository(IAuditRecordRepository):
    """AuditRecord repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, audit_record: AuditRecord) -> AuditRecord:
        """Persist a new audit record"""
        self.session.add(audit_record)
        await self.session.flush()
        await self.session.refresh(audit_record)
        return audit_record

    async def get_by_id(self, record_id: UUID) -> Optional[AuditRecord]:
        """Get audit record by ID, deleted or not"""
        stmt = select(AuditRecord).where(AuditRecord.id == record_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, audit_record: AuditRecord) -> AuditRecord:
        """Write back a mutated audit record"""
        self.session.add(audit_record)
        await self.session.flush()
        await self.session.refresh(audit_record)
        return audit_record

    def query(self, filters: AuditRecordFilter) -> AuditRecordQuery:
        stmt = select(AuditRecord)

        if filters.target_type is not None:
            stmt = stmt.where(AuditRecord.target_type == filters.target_type)
        if filters.target_id is not None:
            stmt = stmt.where(AuditRecord.target_id == filters.target_id)
        if filters.actor_user_id is not None:
            stmt = stmt.where(AuditRecord.actor_user_id == filters.actor_user_id)
        if not filters.include_deleted:
            # Rows written without the flag count as live
            stmt = stmt.where(
                or_(
                    AuditRecord.is_deleted.is_(False),
                    AuditRecord.is_deleted.is_(None),
                )
            )

        stmt = stmt.order_by(AuditRecord.created_at.asc(), AuditRecord.id.asc())
        if filters.limit is not None:
            stmt = stmt.limit(filters.limit)

        return AuditRecordQuery(self.session, stmt)

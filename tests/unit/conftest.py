import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


class FakeQuery:
    """Stands in for AuditRecordQuery: async iterable, restartable"""

    def __init__(self, records, error=None):
        self.records = records
        self.error = error

    async def _iterate(self):
        if self.error is not None:
            raise self.error
        for record in self.records:
            yield record

    def __aiter__(self):
        return self._iterate()


@pytest.fixture
def fake_query():
    return FakeQuery


@pytest.fixture
def make_record():
    from uuid import uuid4

    from src.domain.base import utcnow
    from src.domain.entities import AuditRecord, AuditTargetType

    def _make(**overrides):
        now = utcnow()
        fields = dict(
            id=uuid4(),
            actor_user_id=uuid4(),
            action="BLOCK_USER",
            target_type=AuditTargetType.user,
            target_id=uuid4(),
            payload_json='{"reason": "Admin blocked user"}',
            is_deleted=False,
            created_at=now,
            updated_at=now,
        )
        fields.update(overrides)
        return AuditRecord(**fields)

    return _make

"""
Unit tests for Soft Delete Audit Record Use Case
Tests business logic in isolation with mocked dependencies.
"""

import pytest
from datetime import timedelta
from unittest.mock import AsyncMock
from uuid import uuid4

from sqlalchemy.exc import OperationalError

from src.app.use_cases.audit import SoftDeleteAuditRecordUseCase
from src.domain.base import utcnow


@pytest.mark.asyncio
async def test_soft_delete_success(mock_uow, make_record):
    """Test record is flagged deleted and committed"""
    # Arrange
    created = utcnow() - timedelta(minutes=5)
    record = make_record(created_at=created, updated_at=created)
    deleter_id = uuid4()
    mock_uow.audit_records.get_by_id = AsyncMock(return_value=record)
    mock_uow.audit_records.update = AsyncMock(side_effect=lambda r: r)

    # Act
    result = await SoftDeleteAuditRecordUseCase(mock_uow).execute(
        record.id, actor_user_id=deleter_id
    )

    # Assert
    assert result.is_ok()
    deleted = result.value
    assert deleted.id == record.id
    assert deleted.is_deleted is True
    assert deleted.updated_at > created
    assert deleted.created_at == created
    assert deleted.updated_by == deleter_id

    mock_uow.audit_records.update.assert_called_once_with(record)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_soft_delete_is_idempotent(mock_uow, make_record):
    """Test deleting twice succeeds and stays deleted"""
    record = make_record()
    mock_uow.audit_records.get_by_id = AsyncMock(return_value=record)
    mock_uow.audit_records.update = AsyncMock(side_effect=lambda r: r)
    use_case = SoftDeleteAuditRecordUseCase(mock_uow)

    first = await use_case.execute(record.id)
    second = await use_case.execute(record.id)

    assert first.is_ok()
    assert second.is_ok()
    assert second.value.is_deleted is True
    assert second.value.updated_at >= first.value.updated_at
    assert second.value.action == first.value.action
    assert second.value.payload_json == first.value.payload_json


@pytest.mark.asyncio
async def test_soft_delete_keeps_updated_by_without_actor(mock_uow, make_record):
    original_actor = uuid4()
    record = make_record(updated_by=original_actor)
    mock_uow.audit_records.get_by_id = AsyncMock(return_value=record)
    mock_uow.audit_records.update = AsyncMock(side_effect=lambda r: r)

    result = await SoftDeleteAuditRecordUseCase(mock_uow).execute(record.id)

    assert result.is_ok()
    assert result.value.updated_by == original_actor


@pytest.mark.asyncio
async def test_soft_delete_never_moves_updated_at_before_created_at(mock_uow, make_record):
    """Test created_at <= updated_at holds when created_at is ahead of the clock"""
    future = utcnow() + timedelta(hours=1)
    record = make_record(created_at=future, updated_at=future)
    mock_uow.audit_records.get_by_id = AsyncMock(return_value=record)
    mock_uow.audit_records.update = AsyncMock(side_effect=lambda r: r)

    result = await SoftDeleteAuditRecordUseCase(mock_uow).execute(record.id)

    assert result.is_ok()
    assert result.value.updated_at >= result.value.created_at


@pytest.mark.asyncio
async def test_soft_delete_not_found(mock_uow):
    mock_uow.audit_records.get_by_id = AsyncMock(return_value=None)
    mock_uow.audit_records.update = AsyncMock()

    result = await SoftDeleteAuditRecordUseCase(mock_uow).execute(uuid4())

    assert result.is_err()
    assert result.error.code == "AUDIT_RECORD_NOT_FOUND"
    mock_uow.audit_records.update.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_soft_delete_storage_failure(mock_uow, make_record):
    record = make_record()
    mock_uow.audit_records.get_by_id = AsyncMock(return_value=record)
    mock_uow.audit_records.update = AsyncMock(
        side_effect=OperationalError("UPDATE", {}, Exception("database is locked"))
    )

    result = await SoftDeleteAuditRecordUseCase(mock_uow).execute(record.id)

    assert result.is_err()
    assert result.error.code == "STORAGE_ERROR"
    mock_uow.commit.assert_not_called()

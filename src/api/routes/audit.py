"""
Admin Audit API Routes

Create, read, list and soft-delete admin audit records.
Authentication is via Admin API Key.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from config import ApplicationConfig
from libs.result import Error
from src.api.error import ClientError, ServerError
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.repositories.audit_record_repository import AuditRecordFilter
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit import (
    AuditRecordResponse,
    CreateAuditRecordCommand,
    CreateAuditRecordUseCase,
    GetAuditRecordUseCase,
    ListAuditRecordsUseCase,
    SoftDeleteAuditRecordUseCase,
)
from src.depends import get_unit_of_work
from src.domain.entities import AuditTargetType

router = APIRouter(
    prefix="/admin/audit",
    tags=["Audit"],
    dependencies=[Depends(verify_admin_api_key)],
)


class CreateAuditRecordRequest(BaseModel):
    """POST /admin/audit request payload"""

    actor_user_id: Optional[UUID] = None
    action: str
    target_type: Optional[AuditTargetType] = None
    target_id: Optional[UUID] = None
    payload_json: Optional[str] = None


class AuditRecordsResponse(BaseModel):
    """GET /admin/audit response payload"""

    records: List[AuditRecordResponse]


def _raise_for_error(error: Error):
    if error.code in ("VALIDATION_ERROR", "SERIALIZATION_ERROR"):
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    if error.code == "AUDIT_RECORD_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=AuditRecordResponse,
)
async def create_audit_record(
    request: CreateAuditRecordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Audit Record

    Appends one admin action to the audit trail.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR (empty action, half a target pair)
        - 400 Bad Request: SERIALIZATION_ERROR (payload_json is not JSON)
        - 401 Unauthorized: Missing or invalid admin API key
        - 500 Internal Server Error: STORAGE_ERROR
    """
    command = CreateAuditRecordCommand(**request.model_dump())

    use_case = CreateAuditRecordUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=AuditRecordsResponse,
)
async def list_audit_records(
    uow: UnitOfWork = Depends(get_unit_of_work),
    target_type: Optional[AuditTargetType] = Query(None),
    target_id: Optional[UUID] = Query(None),
    actor_user_id: Optional[UUID] = Query(None),
    include_deleted: bool = Query(False, description="Include soft-deleted records"),
    limit: Optional[int] = Query(
        None,
        ge=1,
        le=ApplicationConfig.AUDIT_LIST_MAX_LIMIT,
        description="Maximum number of records to return",
    ),
):
    """
    List Audit Records

    Returns matching records ordered oldest first (created_at, then id).
    Soft-deleted records are hidden unless include_deleted=true.
    """
    filters = AuditRecordFilter(
        target_type=target_type,
        target_id=target_id,
        actor_user_id=actor_user_id,
        include_deleted=include_deleted,
        limit=limit,
    )

    use_case = ListAuditRecordsUseCase(uow)
    result = await use_case.execute(filters)

    if result.is_err():
        _raise_for_error(result.error)

    return AuditRecordsResponse(records=result.value)


@router.get(
    "/{record_id}",
    status_code=status.HTTP_200_OK,
    response_model=AuditRecordResponse,
)
async def get_audit_record(
    record_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Audit Record

    Soft-deleted records are still returned.

    Raises:
        - 404 Not Found: AUDIT_RECORD_NOT_FOUND
    """
    use_case = GetAuditRecordUseCase(uow)
    result = await use_case.execute(record_id)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.delete(
    "/{record_id}",
    status_code=status.HTTP_200_OK,
    response_model=AuditRecordResponse,
)
async def soft_delete_audit_record(
    record_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    actor_user_id: Optional[UUID] = Query(None, description="Admin performing the delete"),
):
    """
    Soft Delete Audit Record

    Marks the record deleted; it stays retrievable by id. Repeating the
    call succeeds.

    Raises:
        - 404 Not Found: AUDIT_RECORD_NOT_FOUND
    """
    use_case = SoftDeleteAuditRecordUseCase(uow)
    result = await use_case.execute(record_id, actor_user_id=actor_user_id)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value

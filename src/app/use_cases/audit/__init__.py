"""
Audit Use Cases

All audit-record business logic.
"""

from .create_audit_record_use_case import CreateAuditRecordUseCase
from .dtos import AuditRecordResponse, CreateAuditRecordCommand
from .get_audit_record_use_case import GetAuditRecordUseCase
from .list_audit_records_use_case import ListAuditRecordsUseCase
from .soft_delete_audit_record_use_case import SoftDeleteAuditRecordUseCase

__all__ = [
    "CreateAuditRecordUseCase",
    "GetAuditRecordUseCase",
    "SoftDeleteAuditRecordUseCase",
    "ListAuditRecordsUseCase",
    "CreateAuditRecordCommand",
    "AuditRecordResponse",
]

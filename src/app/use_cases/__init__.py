"""
Use Cases

Organized into domain folders:
- audit/: Admin audit records

Import from subdirectories for better organization.
"""

from .audit import (
    CreateAuditRecordUseCase,
    GetAuditRecordUseCase,
    SoftDeleteAuditRecordUseCase,
    ListAuditRecordsUseCase,
)

__all__ = [
    # Audit
    "CreateAuditRecordUseCase",
    "GetAuditRecordUseCase",
    "SoftDeleteAuditRecordUseCase",
    "ListAuditRecordsUseCase",
]

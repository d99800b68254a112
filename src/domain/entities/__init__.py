"""
Admin Audit Domain Entities

All domain entities organized by model.
"""

from .enums import AuditTargetType
from .audit_record import AuditRecord

__all__ = [
    # Enums
    "AuditTargetType",
    # Entities
    "AuditRecord",
]

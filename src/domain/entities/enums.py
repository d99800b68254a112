"""
Admin Audit Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class AuditTargetType(str, Enum):
    """Kind of resource an admin action was performed against"""

    user = "user"
    company = "company"
    job = "job"
    application = "application"

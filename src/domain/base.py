import uuid
from datetime import UTC, datetime
from typing import Optional

from sqlalchemy import CHAR
from sqlalchemy.types import TypeDecorator


def utcnow() -> datetime:
    """Naive UTC timestamp, the form DateTime columns round-trip"""
    return datetime.now(UTC).replace(tzinfo=None)


class UUIDChar(TypeDecorator):
    """UUID stored in its canonical 36-character string form"""

    impl = CHAR
    cache_ok = True

    def load_dialect_impl(self, dialect):
        return dialect.type_descriptor(CHAR(36))

    def process_bind_param(self, value, dialect) -> Optional[str]:
        if value is None:
            return None
        if not isinstance(value, uuid.UUID):
            value = uuid.UUID(str(value))
        return str(value)

    def process_result_value(self, value, dialect) -> Optional[uuid.UUID]:
        if value is None:
            return None
        return uuid.UUID(value)

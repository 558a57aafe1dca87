"""Committing unit-of-work changes with store errors mapped to API errors."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import ConflictError, ValidationError, integrity_error_kind

logger = logging.getLogger(__name__)


async def commit(
    db: AsyncSession,
    conflict_key: str = "common.conflict",
    invalid_reference_key: str = "common.invalid_reference",
) -> None:
    """
    Commit the session, translating constraint violations.

    Args:
        db: Session holding pending changes
        conflict_key: Message key used for unique violations
        invalid_reference_key: Message key used for foreign key violations

    Raises:
        ConflictError: On a unique violation
        ValidationError: On a foreign key violation
        IntegrityError: On any other constraint violation (after rollback)
    """
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        kind = integrity_error_kind(e)
        logger.warning(
            "Commit rejected by integrity constraint",
            extra={"kind": kind, "error": str(e.orig)}
        )
        if kind == "unique":
            raise ConflictError(message_key=conflict_key) from e
        if kind == "foreign_key":
            raise ValidationError(message_key=invalid_reference_key) from e
        raise

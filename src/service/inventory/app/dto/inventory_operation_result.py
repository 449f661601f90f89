from enum import StrEnum
from typing import List, Optional

import attrs

from src.platform.exception.exceptions import (
    CustomBaseError,
    NotFoundError,
    TypeMismatchError,
)


class InventoryErrorKind(StrEnum):
    NOT_FOUND = 'not_found'
    VALIDATION = 'validation'
    TYPE_MISMATCH = 'type_mismatch'
    INFRASTRUCTURE = 'infrastructure'

    @classmethod
    def from_error(cls, error: Exception) -> 'InventoryErrorKind':
        if isinstance(error, NotFoundError):
            return cls.NOT_FOUND
        if isinstance(error, TypeMismatchError):
            return cls.TYPE_MISMATCH
        if isinstance(error, CustomBaseError):
            return cls.VALIDATION
        return cls.INFRASTRUCTURE


@attrs.define(frozen=True)
class InventoryOperationResult:
    """
    Outcome of an inventory mutation.

    Mutations never raise; a failure carries a message with the violated
    numbers and an error kind the HTTP layer maps to a status code.
    """

    success: bool
    message: str
    affected_count: Optional[int] = None
    log_id: Optional[str] = None
    block_ids: List[str] = attrs.field(factory=list)
    previous_value: Optional[int] = None
    new_value: Optional[int] = None
    error: Optional[InventoryErrorKind] = None

    @classmethod
    def ok(
        cls,
        message: str,
        *,
        affected_count: Optional[int] = None,
        log_id: Optional[str] = None,
        block_ids: Optional[List[str]] = None,
        previous_value: Optional[int] = None,
        new_value: Optional[int] = None,
    ) -> 'InventoryOperationResult':
        return cls(
            success=True,
            message=message,
            affected_count=affected_count,
            log_id=log_id,
            block_ids=list(block_ids or []),
            previous_value=previous_value,
            new_value=new_value,
        )

    @classmethod
    def failure(cls, message: str, *, error: InventoryErrorKind) -> 'InventoryOperationResult':
        return cls(success=False, message=message, error=error)

"""
Authorization decisions returned by the facade.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union

from apps.authz.exceptions import (
    AuthorizationError, Forbidden, InvalidArgument, NotFound, Unauthenticated,
)
from apps.authz.scope import Predicate


class DenialReason(str, Enum):
    UNAUTHENTICATED = 'UNAUTHENTICATED'
    FORBIDDEN = 'FORBIDDEN'
    NOT_FOUND = 'NOT_FOUND'
    INVALID_ARGUMENT = 'INVALID_ARGUMENT'


_EXCEPTIONS = {
    DenialReason.UNAUTHENTICATED: Unauthenticated,
    DenialReason.FORBIDDEN: Forbidden,
    DenialReason.NOT_FOUND: NotFound,
    DenialReason.INVALID_ARGUMENT: InvalidArgument,
}


@dataclass(frozen=True)
class Allow:
    """
    Permission granted.

    final_row is the row storage must write (create/update), the row to
    remove (delete) or the row to return (single read). predicate must be
    re-applied by the storage write so that the row cannot move out of scope
    between the check and the write.
    """

    final_row: Optional[Dict[str, Any]] = field(default=None, hash=False)
    predicate: Optional[Predicate] = None

    allowed = True


@dataclass(frozen=True)
class Deny:
    reason: DenialReason
    message: str = ''

    allowed = False

    @classmethod
    def from_error(cls, error: AuthorizationError) -> 'Deny':
        return cls(DenialReason(error.code), error.message)

    def raise_for_denial(self):
        raise _EXCEPTIONS[self.reason](self.message or None)


Decision = Union[Allow, Deny]

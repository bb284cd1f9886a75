"""Typed results returned by ledger operations.

Every operation returns either ``Ok(value)`` or one of the ``LedgerError``
variants below. Domain-rule violations are returned, never raised, so callers
decide what to do with each case:

    result = ledger.get_warehouse_by_id(7)
    if isinstance(result, NotFound):
        ...
    warehouse = result.value
"""
from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar, Union

from pydantic import ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result carrying the operation's payload."""
    value: T

    ok: ClassVar[bool] = True


@dataclass(frozen=True)
class LedgerError:
    """Base of the closed set of ledger errors."""
    msg: str

    ok: ClassVar[bool] = False

    @property
    def kind(self) -> str:
        return type(self).__name__


class InvalidPayload(LedgerError):
    """Input is present but semantically invalid."""


class NotFound(LedgerError):
    """Referenced id does not exist."""


class Unauthorized(LedgerError):
    """Presented secret does not match the warehouse credential."""


class AlreadyInit(LedgerError):
    """A run-once operation was attempted a second time."""


Result = Union[Ok[T], InvalidPayload, NotFound, Unauthorized, AlreadyInit]


def invalid_payload(exc: ValidationError) -> InvalidPayload:
    """Turn a pydantic validation failure into an InvalidPayload error."""
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    return InvalidPayload(msg=problems)

"""Identity allocator - per-kind, zero-based, gap-free ids."""
from sqlalchemy.orm import Session

from inventory_ledger.models.counter import EntityKind, IdCounter

# Largest id a table column can hold (signed 64-bit)
MAX_STORABLE_ID = 2**63 - 1


def next_id(db: Session, kind: EntityKind) -> int:
    """
    Allocate the next id for ``kind`` inside the caller's transaction.

    The counter row is only advanced in the open session, so a request that
    is rolled back does not consume its id.
    """
    counter = db.get(IdCounter, kind.value)
    if counter is None:
        counter = IdCounter(kind=kind.value, next_value=0)
        db.add(counter)

    allocated = counter.next_value
    counter.next_value = allocated + 1
    db.flush()
    return allocated


def is_storable_id(entity_id: int) -> bool:
    """Whether ``entity_id`` could have been handed out by ``next_id``."""
    return 0 <= entity_id <= MAX_STORABLE_ID

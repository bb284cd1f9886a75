"""FastAPI dependencies and result unwrapping for the HTTP routes."""
from fastapi import HTTPException, Request, status

from inventory_ledger.errors import AlreadyInit, InvalidPayload, NotFound, Result, Unauthorized
from inventory_ledger.ledger import InventoryLedger

ERROR_STATUS = {
    InvalidPayload: status.HTTP_400_BAD_REQUEST,
    Unauthorized: status.HTTP_403_FORBIDDEN,
    NotFound: status.HTTP_404_NOT_FOUND,
    AlreadyInit: status.HTTP_409_CONFLICT,
}


def get_ledger(request: Request) -> InventoryLedger:
    """Return the ledger the application was created with."""
    return request.app.state.ledger


def unwrap(result: Result):
    """Return the payload of an Ok result, or raise the matching HTTP error."""
    if result.ok:
        return result.value
    raise HTTPException(status_code=ERROR_STATUS[type(result)], detail=result.msg)

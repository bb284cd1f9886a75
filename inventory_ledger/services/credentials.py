"""Credential store and authorization gate."""
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from inventory_ledger.errors import AlreadyInit, Ok, Result, Unauthorized
from inventory_ledger.models.credential import Credential
from inventory_ledger.services.identity import is_storable_id

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def get_secret_hash(secret: str) -> str:
    return pwd_context.hash(secret)


def register(db: Session, warehouse_id: int, secret: str) -> Result[Credential]:
    """Store the secret for a warehouse. Runs once per warehouse id."""
    if db.get(Credential, warehouse_id) is not None:
        return AlreadyInit(msg=f"credential for warehouse of id: {warehouse_id} already registered")
    
    credential = Credential(warehouse_id=warehouse_id, secret_hash=get_secret_hash(secret))
    db.add(credential)
    db.flush()
    return Ok(credential)


def authorize(db: Session, warehouse_id: int, presented_secret: str) -> Result[None]:
    """Check a presented secret against the warehouse credential.

    A missing credential is denied with the same message as a wrong secret.
    """
    credential = db.get(Credential, warehouse_id) if is_storable_id(warehouse_id) else None
    if credential is None or not pwd_context.verify(presented_secret, credential.secret_hash):
        return Unauthorized(msg=f"not authorized to modify warehouse of id: {warehouse_id}")
    return Ok(None)

"""Warehouse table operations."""
import logging
from typing import List

from sqlalchemy.orm import Session

from inventory_ledger.errors import NotFound, Ok, Result
from inventory_ledger.models.counter import EntityKind
from inventory_ledger.models.warehouse import Warehouse
from inventory_ledger.schemas.warehouse import WarehouseCreate, WarehouseEdit
from inventory_ledger.services import credentials
from inventory_ledger.services.identity import is_storable_id, next_id

logger = logging.getLogger(__name__)


def create_warehouse(db: Session, payload: WarehouseCreate) -> Result[Warehouse]:
    """Insert a warehouse and register its credential in one transaction."""
    warehouse = Warehouse(
        id=next_id(db, EntityKind.WAREHOUSE),
        name=payload.name,
        address=payload.address,
    )
    db.add(warehouse)
    db.flush()
    
    registered = credentials.register(db, warehouse.id, payload.secret)
    if not registered.ok:
        return registered
    
    logger.info("Registered warehouse %s %r in %r", warehouse.id, warehouse.name, payload.city)
    return Ok(warehouse)


def get_warehouse(db: Session, warehouse_id: int) -> Result[Warehouse]:
    warehouse = db.get(Warehouse, warehouse_id) if is_storable_id(warehouse_id) else None
    if warehouse is None:
        return NotFound(msg=f"warehouse of id: {warehouse_id} not found")
    return Ok(warehouse)


def find_warehouses_by_name(db: Session, name: str) -> List[Warehouse]:
    """Exact-match name lookup, in creation order."""
    return db.query(Warehouse).filter(Warehouse.name == name).order_by(Warehouse.id).all()


def list_warehouses(db: Session) -> List[Warehouse]:
    return db.query(Warehouse).order_by(Warehouse.id).all()


def update_warehouse(db: Session, warehouse_id: int, payload: WarehouseEdit) -> Result[Warehouse]:
    """Rename (and optionally re-address) a warehouse after authorization."""
    found = get_warehouse(db, warehouse_id)
    if not found.ok:
        return found
    
    authorized = credentials.authorize(db, warehouse_id, payload.secret)
    if not authorized.ok:
        return authorized
    
    warehouse = found.value
    update_data = payload.model_dump(exclude={"secret"}, exclude_none=True)
    for field, value in update_data.items():
        setattr(warehouse, field, value)
    db.flush()
    
    logger.info("Edited warehouse %s", warehouse_id)
    return Ok(warehouse)

"""Product table operations."""
import logging
from datetime import datetime
from typing import List

from sqlalchemy.orm import Session

from inventory_ledger.errors import InvalidPayload, NotFound, Ok, Result
from inventory_ledger.models.counter import EntityKind
from inventory_ledger.models.product import Product
from inventory_ledger.schemas.product import MAX_QUANTITY, ProductCreate, ProductEdit
from inventory_ledger.services import credentials
from inventory_ledger.services.identity import is_storable_id, next_id
from inventory_ledger.services.warehouses import get_warehouse

logger = logging.getLogger(__name__)


def create_product(db: Session, payload: ProductCreate, now: datetime) -> Result[Product]:
    """Add a product to an existing warehouse, snapshotting that warehouse."""
    found = get_warehouse(db, payload.warehouse_id)
    if not found.ok:
        return found
    warehouse = found.value
    
    product = Product(
        id=next_id(db, EntityKind.PRODUCT),
        name=payload.name,
        category=payload.category,
        quantity=payload.quantity,
        warehouse_id=warehouse.id,
        warehouse_name=warehouse.name,
        warehouse_address=warehouse.address,
        added_at=now,
        re_stocked_at=now,
    )
    db.add(product)
    db.flush()
    
    logger.info("Added product %s %r to warehouse %s", product.id, product.name, warehouse.id)
    return Ok(product)


def get_product(db: Session, product_id: int) -> Result[Product]:
    product = db.get(Product, product_id) if is_storable_id(product_id) else None
    if product is None:
        return NotFound(msg=f"product of id: {product_id} not found")
    return Ok(product)


def list_products(db: Session) -> List[Product]:
    return db.query(Product).order_by(Product.id).all()


def update_product(db: Session, product_id: int, payload: ProductEdit) -> Result[Product]:
    """Rename a product, authorized by the warehouse in its snapshot."""
    found = get_product(db, product_id)
    if not found.ok:
        return found
    product = found.value
    
    authorized = credentials.authorize(db, product.warehouse_id, payload.secret)
    if not authorized.ok:
        return authorized
    
    product.name = payload.name
    db.flush()
    
    logger.info("Edited product %s", product_id)
    return Ok(product)


def store_product(db: Session, product_id: int, amount: int, now: datetime) -> Result[Product]:
    """Increase stock. Open to any caller."""
    found = get_product(db, product_id)
    if not found.ok:
        return found
    product = found.value
    
    if product.quantity + amount > MAX_QUANTITY:
        return InvalidPayload(
            msg=f"Cannot store {amount} of product: {product.name}. Quantity would exceed {MAX_QUANTITY}."
        )
    
    product.quantity += amount
    product.re_stocked_at = now
    db.flush()
    
    logger.info("Stored %s of product %s, quantity now %s", amount, product_id, product.quantity)
    return Ok(product)


def take_product(db: Session, product_id: int, amount: int, now: datetime) -> Result[Product]:
    """Decrease stock, refusing to go below zero."""
    found = get_product(db, product_id)
    if not found.ok:
        return found
    product = found.value
    
    if amount > product.quantity:
        return InvalidPayload(
            msg=f"Not enough quantity of product: {product.name}. Only {product.quantity} available."
        )
    
    product.quantity -= amount
    product.re_stocked_at = now
    db.flush()
    
    logger.info("Took %s of product %s, quantity now %s", amount, product_id, product.quantity)
    return Ok(product)

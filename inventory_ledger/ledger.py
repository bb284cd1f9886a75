"""Inventory ledger façade.

``InventoryLedger`` owns the store (a SQLAlchemy session factory) and exposes
the ledger operations. Each call:

1. validates its input with the pydantic request schemas,
2. opens one session under the process-wide ledger lock,
3. runs the table operations, which return typed results,
4. commits on ``Ok`` and rolls back on any ``LedgerError``.

Results are converted to response schemas before the session closes, so
callers never hold ORM objects.
"""
import logging
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Callable, Iterator, List, Optional, Type

from pydantic import BaseModel, ValidationError
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from inventory_ledger.database import create_ledger_engine, create_session_factory, create_tables
from inventory_ledger.errors import Ok, Result, invalid_payload
from inventory_ledger.schemas.product import ProductCreate, ProductEdit, ProductResponse, StockChange
from inventory_ledger.schemas.warehouse import WarehouseCreate, WarehouseEdit, WarehouseResponse
from inventory_ledger.services import products, warehouses

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, the form the tables store."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class InventoryLedger:
    """Warehouses, products and their credentials behind one serialized API."""

    def __init__(
        self,
        session_factory: sessionmaker,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._session_factory = session_factory
        self._clock = clock or utcnow
        self._lock = threading.RLock()

    @classmethod
    def from_url(cls, database_url: str, echo: bool = False, **kwargs) -> "InventoryLedger":
        engine = create_ledger_engine(database_url, echo=echo)
        return cls(create_session_factory(engine), **kwargs)

    @property
    def engine(self) -> Engine:
        return self._session_factory.kw["bind"]

    def create_all(self):
        """Initialize an empty store (idempotent)."""
        create_tables(self.engine)

    def dispose(self):
        self.engine.dispose()

    @contextmanager
    def _session(self) -> Iterator[Session]:
        with self._lock:
            db = self._session_factory()
            try:
                yield db
            finally:
                db.close()

    def _finish(self, db: Session, operation: str, result: Result, schema: Type[BaseModel]) -> Result:
        if not result.ok:
            db.rollback()
            logger.warning("%s rejected: %s: %s", operation, result.kind, result.msg)
            return result
        db.commit()
        return Ok(schema.model_validate(result.value))

    # ------------------------------------------------------------------
    # Warehouses
    # ------------------------------------------------------------------

    def add_warehouse(self, name: str, address: str, city: str, secret: str) -> Result[WarehouseResponse]:
        try:
            payload = WarehouseCreate(name=name, address=address, city=city, secret=secret)
        except ValidationError as e:
            return invalid_payload(e)

        with self._session() as db:
            result = warehouses.create_warehouse(db, payload)
            return self._finish(db, "add_warehouse", result, WarehouseResponse)

    def edit_warehouse(
        self,
        warehouse_id: int,
        name: str,
        secret: str,
        address: Optional[str] = None,
    ) -> Result[WarehouseResponse]:
        try:
            payload = WarehouseEdit(name=name, address=address, secret=secret)
        except ValidationError as e:
            return invalid_payload(e)

        with self._session() as db:
            result = warehouses.update_warehouse(db, warehouse_id, payload)
            return self._finish(db, "edit_warehouse", result, WarehouseResponse)

    def get_warehouse_by_id(self, warehouse_id: int) -> Result[WarehouseResponse]:
        with self._session() as db:
            result = warehouses.get_warehouse(db, warehouse_id)
            if not result.ok:
                return result
            return Ok(WarehouseResponse.model_validate(result.value))

    def get_warehouse_by_name(self, name: str) -> Result[List[WarehouseResponse]]:
        with self._session() as db:
            found = warehouses.find_warehouses_by_name(db, name)
            return Ok([WarehouseResponse.model_validate(w) for w in found])

    def get_all_warehouses(self) -> Result[List[WarehouseResponse]]:
        with self._session() as db:
            return Ok([WarehouseResponse.model_validate(w) for w in warehouses.list_warehouses(db)])

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    def add_product(self, name: str, quantity: int, category: str, warehouse_id: int) -> Result[ProductResponse]:
        try:
            payload = ProductCreate(name=name, quantity=quantity, category=category, warehouse_id=warehouse_id)
        except ValidationError as e:
            return invalid_payload(e)

        with self._session() as db:
            result = products.create_product(db, payload, self._clock())
            return self._finish(db, "add_product", result, ProductResponse)

    def edit_product(self, product_id: int, secret: str, name: str) -> Result[ProductResponse]:
        try:
            payload = ProductEdit(name=name, secret=secret)
        except ValidationError as e:
            return invalid_payload(e)

        with self._session() as db:
            result = products.update_product(db, product_id, payload)
            return self._finish(db, "edit_product", result, ProductResponse)

    def get_product_by_id(self, product_id: int) -> Result[ProductResponse]:
        with self._session() as db:
            result = products.get_product(db, product_id)
            if not result.ok:
                return result
            return Ok(ProductResponse.model_validate(result.value))

    def get_all_products(self) -> Result[List[ProductResponse]]:
        with self._session() as db:
            return Ok([ProductResponse.model_validate(p) for p in products.list_products(db)])

    def add_product_to_warehouse(self, product_id: int, amount: int) -> Result[ProductResponse]:
        """Restock a product. No secret is required for stock-in."""
        try:
            change = StockChange(amount=amount)
        except ValidationError as e:
            return invalid_payload(e)

        with self._session() as db:
            result = products.store_product(db, product_id, change.amount, self._clock())
            return self._finish(db, "add_product_to_warehouse", result, ProductResponse)

    def remove_product_from_warehouse(self, product_id: int, amount: int) -> Result[ProductResponse]:
        try:
            change = StockChange(amount=amount)
        except ValidationError as e:
            return invalid_payload(e)

        with self._session() as db:
            result = products.take_product(db, product_id, change.amount, self._clock())
            return self._finish(db, "remove_product_from_warehouse", result, ProductResponse)

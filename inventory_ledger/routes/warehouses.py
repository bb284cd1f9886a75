"""Warehouse routes."""
from typing import List

from fastapi import APIRouter, Depends, Query, status

from inventory_ledger.dependencies import get_ledger, unwrap
from inventory_ledger.ledger import InventoryLedger
from inventory_ledger.schemas.warehouse import WarehouseCreate, WarehouseEdit, WarehouseResponse

router = APIRouter(prefix="/warehouses", tags=["Warehouses"])


@router.get("/", response_model=List[WarehouseResponse])
async def list_warehouses(ledger: InventoryLedger = Depends(get_ledger)):
    """List all warehouses in creation order."""
    return unwrap(ledger.get_all_warehouses())


@router.post("/", response_model=WarehouseResponse, status_code=status.HTTP_201_CREATED)
async def create_warehouse(
    warehouse_data: WarehouseCreate,
    ledger: InventoryLedger = Depends(get_ledger)
):
    """Register a new warehouse together with its secret."""
    return unwrap(ledger.add_warehouse(**warehouse_data.model_dump()))


@router.get("/search", response_model=List[WarehouseResponse])
async def search_warehouses(
    name: str = Query(..., description="Exact warehouse name"),
    ledger: InventoryLedger = Depends(get_ledger)
):
    """Find warehouses whose name matches exactly."""
    return unwrap(ledger.get_warehouse_by_name(name))


@router.get("/{warehouse_id}", response_model=WarehouseResponse)
async def get_warehouse(
    warehouse_id: int,
    ledger: InventoryLedger = Depends(get_ledger)
):
    """Get a specific warehouse."""
    return unwrap(ledger.get_warehouse_by_id(warehouse_id))


@router.put("/{warehouse_id}", response_model=WarehouseResponse)
async def update_warehouse(
    warehouse_id: int,
    warehouse_update: WarehouseEdit,
    ledger: InventoryLedger = Depends(get_ledger)
):
    """Edit a warehouse (requires its secret)."""
    return unwrap(ledger.edit_warehouse(
        warehouse_id,
        name=warehouse_update.name,
        secret=warehouse_update.secret,
        address=warehouse_update.address,
    ))

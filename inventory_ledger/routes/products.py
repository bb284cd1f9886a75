"""Product routes."""
from typing import List

from fastapi import APIRouter, Depends, Query, status

from inventory_ledger.dependencies import get_ledger, unwrap
from inventory_ledger.ledger import InventoryLedger
from inventory_ledger.schemas.product import ProductCreate, ProductEdit, ProductResponse

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("/", response_model=List[ProductResponse])
async def list_products(ledger: InventoryLedger = Depends(get_ledger)):
    """List all products in creation order."""
    return unwrap(ledger.get_all_products())


@router.post("/", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_data: ProductCreate,
    ledger: InventoryLedger = Depends(get_ledger)
):
    """Add a product to an existing warehouse."""
    return unwrap(ledger.add_product(**product_data.model_dump()))


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int,
    ledger: InventoryLedger = Depends(get_ledger)
):
    """Get a specific product."""
    return unwrap(ledger.get_product_by_id(product_id))


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    product_update: ProductEdit,
    ledger: InventoryLedger = Depends(get_ledger)
):
    """Rename a product (requires its warehouse's secret)."""
    return unwrap(ledger.edit_product(product_id, secret=product_update.secret, name=product_update.name))


@router.post("/{product_id}/restock", response_model=ProductResponse)
async def restock_product(
    product_id: int,
    amount: int = Query(..., description="Quantity to store/add"),
    ledger: InventoryLedger = Depends(get_ledger)
):
    """Store more of a product (increase quantity)."""
    return unwrap(ledger.add_product_to_warehouse(product_id, amount))


@router.post("/{product_id}/consume", response_model=ProductResponse)
async def consume_product(
    product_id: int,
    amount: int = Query(..., description="Quantity to take"),
    ledger: InventoryLedger = Depends(get_ledger)
):
    """Take a product out of its warehouse (reduce quantity)."""
    return unwrap(ledger.remove_product_from_warehouse(product_id, amount))

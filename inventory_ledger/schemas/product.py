"""Product schemas for request/response validation."""
from datetime import datetime
from pydantic import BaseModel, Field

from inventory_ledger.schemas.warehouse import WarehouseResponse

# Quantities are unsigned 32-bit values, ids unsigned 64-bit
MAX_QUANTITY = 2**32 - 1
MAX_ID = 2**64 - 1


class ProductBase(BaseModel):
    """Base product schema."""
    name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    quantity: int = Field(default=0, ge=0, le=MAX_QUANTITY)


class ProductCreate(ProductBase):
    """Schema for adding a product to a warehouse."""
    warehouse_id: int = Field(..., ge=0, le=MAX_ID)


class ProductEdit(BaseModel):
    """Schema for renaming a product."""
    name: str = Field(..., min_length=1)
    secret: str


class StockChange(BaseModel):
    """Amount of stock moved in or out of a warehouse."""
    amount: int = Field(..., ge=0, le=MAX_QUANTITY)


class ProductResponse(ProductBase):
    """Schema for product response, including the warehouse snapshot."""
    id: int
    warehouse: WarehouseResponse
    added_at: datetime
    re_stocked_at: datetime
    
    class Config:
        from_attributes = True

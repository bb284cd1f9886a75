"""Warehouse schemas for request/response validation."""
from typing import Optional
from pydantic import BaseModel, Field


class WarehouseBase(BaseModel):
    """Base warehouse schema."""
    name: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)


class WarehouseCreate(WarehouseBase):
    """Schema for registering a warehouse.

    ``city`` is accepted for the registration record but is not stored on
    the warehouse. ``secret`` authorizes later edits.
    """
    city: str = ""
    secret: str


class WarehouseEdit(BaseModel):
    """Schema for editing a warehouse."""
    name: str = Field(..., min_length=1)
    address: Optional[str] = Field(None, min_length=1)
    secret: str


class WarehouseResponse(WarehouseBase):
    """Schema for warehouse response."""
    id: int
    
    class Config:
        from_attributes = True

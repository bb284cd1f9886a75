"""Credential model."""
from sqlalchemy import Column, BigInteger, String, DateTime, ForeignKey
from sqlalchemy.sql import func

from inventory_ledger.database import Base


class Credential(Base):
    """Registration secret of a warehouse, stored as a hash."""
    __tablename__ = "credentials"
    
    warehouse_id = Column(BigInteger, ForeignKey("warehouses.id"), primary_key=True, autoincrement=False)
    secret_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

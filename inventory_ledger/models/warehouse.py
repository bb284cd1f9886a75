"""Warehouse model."""
from sqlalchemy import Column, BigInteger, Text

from inventory_ledger.database import Base


class Warehouse(Base):
    """Warehouse model - a named storage location."""
    __tablename__ = "warehouses"
    
    # Assigned by the identity allocator, never by the database
    id = Column(BigInteger, primary_key=True, autoincrement=False)
    name = Column(Text, nullable=False, index=True)
    address = Column(Text, nullable=False)

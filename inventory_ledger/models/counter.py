"""Identifier counter model."""
import enum

from sqlalchemy import Column, BigInteger, String

from inventory_ledger.database import Base


class EntityKind(str, enum.Enum):
    """Entity kinds that receive their own id sequence."""
    WAREHOUSE = "warehouse"
    PRODUCT = "product"


class IdCounter(Base):
    """Next free id for one entity kind."""
    __tablename__ = "id_counters"
    
    kind = Column(String(50), primary_key=True)
    next_value = Column(BigInteger, nullable=False, default=0)

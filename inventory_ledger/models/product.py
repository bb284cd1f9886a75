"""Product model."""
from sqlalchemy import Column, BigInteger, Text, DateTime, ForeignKey, CheckConstraint

from inventory_ledger.database import Base


class Product(Base):
    """
    Product model - a stocked item.
    
    The owning warehouse is stored as a snapshot taken when the product was
    added. Later warehouse edits do not change it.
    """
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_products_quantity_non_negative"),
    )
    
    id = Column(BigInteger, primary_key=True, autoincrement=False)
    name = Column(Text, nullable=False)
    category = Column(Text, nullable=False)
    quantity = Column(BigInteger, default=0, nullable=False)
    
    # Warehouse snapshot
    warehouse_id = Column(BigInteger, ForeignKey("warehouses.id"), nullable=False, index=True)
    warehouse_name = Column(Text, nullable=False)
    warehouse_address = Column(Text, nullable=False)
    
    # Timestamps
    added_at = Column(DateTime, nullable=False)
    re_stocked_at = Column(DateTime, nullable=False)
    
    @property
    def warehouse(self):
        return {
            "id": self.warehouse_id,
            "name": self.warehouse_name,
            "address": self.warehouse_address,
        }

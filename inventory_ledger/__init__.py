"""Inventory ledger: warehouses, products and the credentials guarding them."""

__version__ = "0.1.0"

"""Script to create the ledger tables and optionally register a first warehouse."""
import argparse
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from inventory_ledger.config import settings
from inventory_ledger.ledger import InventoryLedger


def init_db(argv=None):
    """Create tables; register a warehouse when --name is given."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--database-url", default=settings.DATABASE_URL)
    parser.add_argument("--name", help="Name of the first warehouse")
    parser.add_argument("--address", default="")
    parser.add_argument("--city", default="")
    parser.add_argument("--secret", default="")
    args = parser.parse_args(argv)
    
    ledger = InventoryLedger.from_url(args.database_url)
    try:
        ledger.create_all()
        print(f"Tables ready in {args.database_url}")
        
        if not args.name:
            return 0
        
        existing = ledger.get_warehouse_by_name(args.name).value
        if existing:
            print(f"Warehouse already exists: {existing[0].name} (id {existing[0].id})")
            return 0
        
        result = ledger.add_warehouse(args.name, args.address, args.city, args.secret)
        if not result.ok:
            print(f"Could not register warehouse: {result.kind}: {result.msg}")
            return 1
        print("Warehouse registered successfully!")
        print(f"Id: {result.value.id}")
        print("\nKeep the secret safe, it is required to edit this warehouse and its products!")
        return 0
    finally:
        ledger.dispose()


if __name__ == "__main__":
    sys.exit(init_db())

# Models package
from inventory_ledger.models.counter import IdCounter, EntityKind
from inventory_ledger.models.credential import Credential
from inventory_ledger.models.warehouse import Warehouse
from inventory_ledger.models.product import Product

import sys
from datetime import date
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def fixed_clock():
    return date(2024, 3, 15)


def seeded_ledger(store=None, products=None):
    from designqube.domain.models import Product
    from designqube.repositories.store import MemoryStore
    from designqube.services.ledger import InventoryLedger

    ledger = InventoryLedger(store if store is not None else MemoryStore(), clock=fixed_clock)
    ledger.initialize()
    if products is None:
        products = [
            Product(serial="T1", name="Marble White", type="Tile", brand="Kajaria", size="60x60",
                    num_boxes=4, num_pieces=16, price_per_box=200.0, stock=10),
            Product(serial="S1", name="Wash Basin", type="sanitary", brand="Cera",
                    num_boxes=1, num_pieces=1, price_per_box=1500.0, stock=2),
            Product(serial="O1", name="Tile Adhesive", type="Chemical", brand="Roff",
                    num_boxes=10, price_per_box=350.0, stock=6),
        ]
    ledger.import_products(products)
    return ledger

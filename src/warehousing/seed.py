"""Sample data set: five warehouses and twenty-one items.

Loaded through the regular commands, so every capacity and SKU rule applies.
Loading is skipped when any warehouse already exists.
"""

import structlog
from protean.utils.globals import current_domain

from warehousing.item.management import CreateInventoryItem
from warehousing.warehouse.management import CreateWarehouse
from warehousing.warehouse.warehouse import Warehouse

logger = structlog.get_logger(__name__)

WAREHOUSES = [
    ("Main Distribution Center", "New York, NY", 10000),
    ("West Coast Hub", "Los Angeles, CA", 8000),
    ("Midwest Warehouse", "Chicago, IL", 7500),
    ("Southern Distribution", "Atlanta, GA", 6000),
    ("Pacific Northwest", "Seattle, WA", 5500),
]

# (sku, name, description, category, quantity, storage location, warehouse name)
ITEMS = [
    ("LAPTOP-001", "Dell Latitude 5520", "15-inch business laptop", "Electronics", 150, "A1-R1-S3", "Main Distribution Center"),
    ("LAPTOP-002", "MacBook Pro 16", "Professional laptop", "Electronics", 85, "A1-R2-S1", "West Coast Hub"),
    ("LAPTOP-003", "HP EliteBook 840", "Lightweight laptop", "Electronics", 120, "A2-R1-S2", "Midwest Warehouse"),
    ("DESK-CHAIR-001", "ErgoMax Executive Chair", "Ergonomic office chair", "Furniture", 200, "B1-R3-S1", "Main Distribution Center"),
    ("DESK-001", "Standing Desk Pro", "Adjustable height desk", "Furniture", 75, "B2-R1-S2", "West Coast Hub"),
    ("DESK-002", "Corner Desk Unit", "L-shaped desk", "Furniture", 60, "B1-R2-S3", "Southern Distribution"),
    ("MONITOR-001", "Dell UltraSharp 27", "27-inch 4K monitor", "Electronics", 180, "A3-R1-S1", "Main Distribution Center"),
    ("MONITOR-002", "LG 34 Ultrawide", "34-inch curved monitor", "Electronics", 95, "A1-R3-S2", "Midwest Warehouse"),
    ("KEYBOARD-001", "Mechanical Keyboard RGB", "Gaming keyboard", "Electronics", 300, "A2-R2-S1", "West Coast Hub"),
    ("MOUSE-001", "Wireless Ergonomic Mouse", "Vertical mouse", "Electronics", 250, "A2-R2-S2", "West Coast Hub"),
    ("PRINTER-001", "HP LaserJet Pro", "Network printer", "Electronics", 45, "C1-R1-S1", "Main Distribution Center"),
    ("PRINTER-002", "Canon ImageClass", "Color laser printer", "Electronics", 30, "C1-R2-S1", "Southern Distribution"),
    ("PHONE-001", "VoIP Desk Phone", "Business phone", "Electronics", 400, "A3-R2-S1", "Main Distribution Center"),
    ("TABLET-001", "iPad Pro 12.9", "Professional tablet", "Electronics", 120, "A1-R1-S1", "West Coast Hub"),
    ("CABLE-001", "USB-C Cable 6ft", "Charging cable", "Accessories", 1000, "D1-R1-S1", "Pacific Northwest"),
    ("ADAPTER-001", "USB-C Hub", "Multi-port adapter", "Accessories", 500, "D1-R1-S2", "Pacific Northwest"),
    ("WHITEBOARD-001", "Mobile Whiteboard", "Rolling whiteboard", "Office Supplies", 35, "B3-R1-S1", "Midwest Warehouse"),
    ("FILING-001", "4-Drawer File Cabinet", "Locking file cabinet", "Furniture", 80, "B2-R3-S1", "Southern Distribution"),
    ("LAMP-001", "LED Desk Lamp", "Adjustable desk lamp", "Office Supplies", 150, "D2-R1-S1", "Main Distribution Center"),
    ("WEBCAM-001", "HD Webcam 1080p", "Conference camera", "Electronics", 200, "A3-R3-S1", "Midwest Warehouse"),
    ("HEADSET-001", "Noise-Canceling Headset", "Wireless headset", "Electronics", 175, "A2-R3-S1", "West Coast Hub"),
]


def load_sample_data() -> bool:
    """Load the sample data set into an empty store. Returns whether it did."""
    if current_domain.repository_for(Warehouse).all_warehouses():
        logger.info("Warehouses already present, skipping sample data")
        return False

    warehouse_ids = {}
    for name, location, max_capacity in WAREHOUSES:
        warehouse_ids[name] = current_domain.process(
            CreateWarehouse(name=name, location=location, max_capacity=max_capacity),
            asynchronous=False,
        )

    for sku, name, description, category, quantity, storage_location, warehouse in ITEMS:
        current_domain.process(
            CreateInventoryItem(
                sku=sku,
                name=name,
                description=description,
                category=category,
                quantity=quantity,
                storage_location=storage_location,
                warehouse_id=warehouse_ids[warehouse],
            ),
            asynchronous=False,
        )

    logger.info("Sample data loaded", warehouses=len(WAREHOUSES), items=len(ITEMS))
    return True

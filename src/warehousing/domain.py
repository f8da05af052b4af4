"""Warehousing bounded context — warehouses, inventory items and transfers.

Warehouses hold inventory items up to a fixed capacity. Capacity usage is
never stored; it is measured from the live item rows whenever it is needed.
Both aggregates are standard CQRS aggregates (not event sourced).
"""

from protean.domain import Domain

from warehousing.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
warehousing = Domain(name="warehousing")

"""Application settings read from the environment.

Protean's own configuration (databases, brokers, event store) lives in
``domain.toml`` next to this module. The values here are the few knobs the
warehousing rules themselves depend on. They are read on every call so a
changed environment takes effect without re-importing the domain.
"""

import os
from enum import Enum


class SkuScope(Enum):
    """Where a SKU has to be unique."""

    GLOBAL = "global"
    WAREHOUSE = "warehouse"


def sku_scope() -> SkuScope:
    """Uniqueness scope for SKUs, from ``SKU_UNIQUENESS`` (default: global)."""
    raw = os.getenv("SKU_UNIQUENESS", SkuScope.GLOBAL.value).strip().lower()
    try:
        return SkuScope(raw)
    except ValueError:
        raise ValueError(f"SKU_UNIQUENESS must be one of: {', '.join(s.value for s in SkuScope)} (got {raw!r})") from None


def near_capacity_threshold() -> float:
    """Utilization percentage above which a warehouse counts as nearly full."""
    return float(os.getenv("NEAR_CAPACITY_THRESHOLD", "80"))


def seed_sample_data() -> bool:
    """Whether the API loads the sample data set on startup."""
    return os.getenv("SEED_SAMPLE_DATA", "false").lower() in ("1", "true", "yes")

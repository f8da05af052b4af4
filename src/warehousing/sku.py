"""SKU codes for stock split off by partial transfers."""

import re
from collections.abc import Callable

TRANSFER_MARKER = "-T"

_DERIVED_SUFFIX = re.compile(rf"(?:{re.escape(TRANSFER_MARKER)}\d+)+$")


def root_sku(sku: str) -> str:
    """``sku`` with any trailing transfer markers removed."""
    return _DERIVED_SUFFIX.sub("", sku) or sku


def derive_sku(base: str, is_taken: Callable[[str], bool]) -> str:
    """Return ``<root>-T<n>`` for the smallest ``n`` not already taken.

    ``root`` is ``base`` without trailing transfer markers, so splitting a
    derived SKU again yields a sibling (``CHAIR-T2``) rather than a longer
    code. ``is_taken`` answers whether a candidate code is in use wherever
    the SKU has to be unique.
    """
    root = root_sku(base)
    counter = 1
    while is_taken(f"{root}{TRANSFER_MARKER}{counter}"):
        counter += 1
    return f"{root}{TRANSFER_MARKER}{counter}"

"""Helpers for reading complete result sets through Protean DAOs."""


def exhaust(queryset) -> list:
    """Return every row matched by ``queryset``.

    Protean querysets are paged (100 rows by default). Capacity sums must see
    every row, so re-run the query with a limit that covers the reported total.
    """
    results = queryset.all()
    if results.total > len(results.items):
        results = queryset.limit(results.total).all()
    return list(results.items)

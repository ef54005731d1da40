from typing import List, Optional, Sequence

from utils.catalog import CatalogEntry

DEFAULT_LIMIT = 25


def normalize(text: Optional[str]) -> str:
    return (text or "").lower()


def search(entries: Sequence[CatalogEntry], query: Optional[str], limit: int = DEFAULT_LIMIT) -> List[CatalogEntry]:
    """
    Substring search over title and performer, in catalog order.
    An empty query returns the head of the catalog.
    """
    if limit <= 0:
        return []

    q = normalize(query)
    if not q:
        return list(entries[:limit])

    results = []
    for entry in entries:
        if q in entry.haystack:
            results.append(entry)
            if len(results) >= limit:
                break
    return results

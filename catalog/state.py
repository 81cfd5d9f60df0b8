"""Application state: the search term and sort order that drive the pipeline."""

from dataclasses import dataclass, replace

from catalog.models import DEFAULT_SORT_ORDER


@dataclass(frozen=True)
class CatalogState:
    search_term: str = ""
    # Raw select value; unknown orders are tolerated by the engine.
    sort_order: str = DEFAULT_SORT_ORDER.value

    def with_search(self, term: str) -> "CatalogState":
        return replace(self, search_term=term)

    def with_sort(self, order: str) -> "CatalogState":
        return replace(self, sort_order=order)

"""
Filter/sort engine.

    process(entries, state) → list[Entry]

Filter: keep entries whose name, description or any tag contains the search
term, case-insensitively. An empty term keeps everything.

Sort: dispatch on state.sort_order. Names are compared with an accent-aware
collation key, years and popularity numerically. Python's sort is stable in
both directions, so entries with equal keys keep their source order. An
unknown order leaves the filtered list as it is.

The input sequence is never modified; every call builds a new list.
"""

import logging
import unicodedata
from collections.abc import Callable, Iterable
from typing import Any

from catalog.models import Entry, SortOrder
from catalog.state import CatalogState

log = logging.getLogger(__name__)


def _strip_accents(text: str) -> str:
    nfkd = unicodedata.normalize("NFKD", text)
    return "".join(c for c in nfkd if not unicodedata.combining(c))


def collation_key(text: str) -> tuple[str, str, str]:
    """
    Sort key that approximates locale-aware string comparison.

    Primary: base letters, case-folded ("Ágil" ~ "agil").
    Secondary: accents ("agil" before "ágil").
    Tertiary: case, lowercase first ("a" before "A").

    Text is NFC-normalized first, so composed and decomposed spellings of
    the same name get the same key.
    """
    text = unicodedata.normalize("NFC", text)
    folded = text.casefold()
    return (_strip_accents(folded), folded, text.swapcase())


def matches(entry: Entry, term: str) -> bool:
    """True if term (already lowercased) occurs in the name, description or a tag."""
    return (
        term in entry.name.lower()
        or term in entry.description.lower()
        or any(term in tag.lower() for tag in entry.tags)
    )


def filter_entries(entries: Iterable[Entry], search_term: str) -> list[Entry]:
    items = list(entries)
    if not search_term:
        return items
    term = search_term.lower()
    return [e for e in items if matches(e, term)]


# order → (key, descending)
_SORTS: dict[SortOrder, tuple[Callable[[Entry], Any], bool]] = {
    SortOrder.ALFA_ASC:  (lambda e: collation_key(e.name), False),
    SortOrder.ALFA_DESC: (lambda e: collation_key(e.name), True),
    SortOrder.ANO_DESC:  (lambda e: e.creation_year, True),
    SortOrder.ANO_ASC:   (lambda e: e.creation_year, False),
    SortOrder.POP_DESC:  (lambda e: e.popularity, True),
    SortOrder.POP_ASC:   (lambda e: e.popularity, False),
}


def sort_entries(entries: Iterable[Entry], sort_order: str) -> list[Entry]:
    items = list(entries)
    order = SortOrder.parse(sort_order)
    if order is None:
        log.warning("Unknown sort order %r; keeping source order.", sort_order)
        return items
    key, descending = _SORTS[order]
    return sorted(items, key=key, reverse=descending)


def process(entries: Iterable[Entry], state: CatalogState) -> list[Entry]:
    """Filter then sort a fresh copy of entries according to state."""
    return sort_entries(filter_entries(entries, state.search_term), state.sort_order)

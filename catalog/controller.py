"""
Interaction handlers.

CatalogController owns the application state for one user session. Every
event turns the current state into a new one and immediately re-runs the
pipeline (process → render); subscribers are then called with the new view.

    submit_search(value)  search button, search icon, Enter in the field
    search_by_tag(tag)    tag chip click; also asks for a scroll to the top
    change_sort(value)    sort select change
    title_clicked()       page title click; scroll to the top only
"""

import logging
import random
from collections.abc import Callable, Iterable

from catalog.engine import process
from catalog.models import Entry
from catalog.render import CatalogView, render
from catalog.state import CatalogState

log = logging.getLogger(__name__)

Listener = Callable[[CatalogView], None]


class CatalogController:
    def __init__(self, entries: Iterable[Entry], rng: random.Random | None = None):
        self.entries: tuple[Entry, ...] = tuple(entries)
        self.state = CatalogState()
        self.search_field = ""
        self.view: CatalogView | None = None
        self._rng = rng or random.Random()
        self._scroll_requested = False
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def refresh(self) -> CatalogView:
        """Run the pipeline on the current state and notify subscribers."""
        ordered = process(self.entries, self.state)
        self.view = render(ordered, self.state.search_term, rng=self._rng)
        log.debug(
            "Rendered %d of %d entries  term=%r  order=%r",
            len(ordered), len(self.entries), self.state.search_term, self.state.sort_order,
        )
        for listener in self._listeners:
            listener(self.view)
        return self.view

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def submit_search(self, field_value: str) -> CatalogView:
        # Taken verbatim; no trimming.
        self.search_field = field_value
        self.state = self.state.with_search(field_value)
        return self.refresh()

    def search_by_tag(self, tag: str) -> CatalogView:
        self.search_field = tag
        self.state = self.state.with_search(tag)
        view = self.refresh()
        self._scroll_requested = True
        return view

    def change_sort(self, value: str) -> CatalogView:
        self.state = self.state.with_sort(value)
        return self.refresh()

    def title_clicked(self) -> None:
        self._scroll_requested = True

    def consume_scroll_request(self) -> bool:
        requested, self._scroll_requested = self._scroll_requested, False
        return requested

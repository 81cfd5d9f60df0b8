"""
Light/dark theme toggle.

The dark theme is marked by marker == "dark" and stored under the "theme"
preference key; light is the absence of both. Two icons swap visibility:
the sun shows in light mode, the moon in dark mode.
"""

import logging

from catalog.preferences import PreferenceStore

log = logging.getLogger(__name__)

THEME_KEY = "theme"
DARK      = "dark"
LIGHT     = "light"


class ThemeController:
    def __init__(self, store: PreferenceStore):
        self.store = store
        self.marker: str | None = None
        self.sun_visible = True
        self.moon_visible = False

    @property
    def theme(self) -> str:
        return DARK if self.marker == DARK else LIGHT

    def apply(self, theme: str) -> None:
        if theme == DARK:
            self.marker = DARK
            self.sun_visible, self.moon_visible = False, True
            self.store.set(THEME_KEY, DARK)
        else:
            self.marker = None
            self.sun_visible, self.moon_visible = True, False
            self.store.remove(THEME_KEY)
        log.debug("Theme set to %s", self.theme)

    def restore(self) -> None:
        """Apply the stored preference, if any. Called once at startup."""
        stored = self.store.get(THEME_KEY)
        if stored:
            self.apply(stored)

    def toggle(self) -> str:
        self.apply(LIGHT if self.marker == DARK else DARK)
        return self.theme

"""
FastAPI application for the DevTec catalog.

Run as a script:
    python app/app.py

Or as a module:
    uvicorn app.app:app --reload

The entry collection is loaded once at startup from CATALOG_DATA_SOURCE
(a JSON file or URL). If loading fails the service still starts, with an
empty catalog.

Endpoints:
    POST /query
        body:    {"q": "...", "order": "alfa_asc"}   (both optional)
        returns: {"banner": str|null, "empty_message": str|null,
                  "count": int, "cards": [...]}
    GET  /theme            current theme and icon visibility
    POST /theme/toggle     flip light/dark and persist the choice
    GET  /health

Logs each query and wall-clock response time to stdout and logs/app.log
(rotating, 5 MB max, 3 backups).
"""

import asyncio
import logging
import logging.handlers
import sys
import time
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from pydantic import BaseModel

# Ensure project root is on sys.path when running as a script (python app/app.py)
sys.path.insert(0, str(Path(__file__).parent.parent))

from catalog import config
from catalog.engine import process
from catalog.loader import load
from catalog.models import DEFAULT_SORT_ORDER, Entry
from catalog.preferences import PreferenceStore
from catalog.render import Card, render
from catalog.state import CatalogState
from catalog.theme import ThemeController

LOG_FILE = config.LOG_DIR / "app.log"


def _setup_logging() -> None:
    config.LOG_DIR.mkdir(parents=True, exist_ok=True)
    fmt = logging.Formatter("%(asctime)s  %(levelname)s  %(message)s")

    stream = logging.StreamHandler(sys.stdout)
    stream.setFormatter(fmt)

    # Rotate at 5 MB, keep 3 backups
    rotating = logging.handlers.RotatingFileHandler(
        LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
    )
    rotating.setFormatter(fmt)

    root = logging.getLogger()
    root.setLevel(logging.INFO)
    root.addHandler(stream)
    root.addHandler(rotating)


_setup_logging()
log = logging.getLogger("api")

# Read at startup so tests (and the CLI) can point these elsewhere.
DATA_SOURCE: str = config.DATA_SOURCE
PREFS_FILE: Path = config.PREFS_FILE


# ---------------------------------------------------------------------------
# App + lifespan
# ---------------------------------------------------------------------------

_entries: list[Entry] = []
_theme: ThemeController | None = None


@asynccontextmanager
async def lifespan(_: FastAPI):
    global _entries, _theme

    log.info("Loading entries from %s…", DATA_SOURCE)
    _entries = load(DATA_SOURCE)
    log.info("  %d entries loaded.", len(_entries))

    _theme = ThemeController(PreferenceStore(PREFS_FILE))
    _theme.restore()
    log.info("  Theme: %s", _theme.theme)

    yield  # server runs here


app = FastAPI(title="DevTec Catalog", lifespan=lifespan)


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

class QueryRequest(BaseModel):
    q: str = ""
    order: str = DEFAULT_SORT_ORDER.value


class QueryResponse(BaseModel):
    banner: str | None = None
    empty_message: str | None = None
    count: int
    cards: list[Card]


class ThemeResponse(BaseModel):
    theme: str
    sun_visible: bool
    moon_visible: bool


class HealthResponse(BaseModel):
    status: str
    entries: int


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.post("/query", response_model=QueryResponse)
def query(req: QueryRequest) -> QueryResponse:
    t0 = time.perf_counter()

    state = CatalogState(search_term=req.q, sort_order=req.order)
    ordered = process(_entries, state)
    view = render(ordered, state.search_term)

    elapsed = time.perf_counter() - t0
    log.info("query=%r  order=%r  hits=%d  %.3fs", req.q, req.order, view.count, elapsed)

    return QueryResponse(
        banner=view.banner,
        empty_message=view.empty_message,
        count=view.count,
        cards=view.cards,
    )


def _theme_response() -> ThemeResponse:
    assert _theme is not None, "Theme not initialised"
    return ThemeResponse(
        theme=_theme.theme,
        sun_visible=_theme.sun_visible,
        moon_visible=_theme.moon_visible,
    )


@app.get("/theme", response_model=ThemeResponse)
def get_theme() -> ThemeResponse:
    return _theme_response()


@app.post("/theme/toggle", response_model=ThemeResponse)
def toggle_theme() -> ThemeResponse:
    assert _theme is not None, "Theme not initialised"
    theme = _theme.toggle()
    log.info("Theme toggled → %s", theme)
    return _theme_response()


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", entries=len(_entries))


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def _launch_server() -> None:
    server_config = uvicorn.Config(app, host=config.HOST, port=config.PORT, reload=False)
    server = uvicorn.Server(server_config)

    try:
        asyncio.get_running_loop()
    except RuntimeError:
        uvicorn.run(app, host=config.HOST, port=config.PORT, reload=False)
        return

    log.warning(
        "Detected an existing asyncio event loop; serving with create_task() instead of asyncio.run()."
    )
    asyncio.create_task(server.serve())


if __name__ == "__main__":
    log.info("=== DevTec Catalog starting up ===")
    log.info("=== Launching server on http://%s:%d ===", config.HOST, config.PORT)
    _launch_server()

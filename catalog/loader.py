"""
Entry loader.

Reads the catalog's entry collection once, from either a local JSON file or
an http(s) URL, and parses it into Entry models.

Any failure (network error, bad status, missing file, malformed JSON,
records that do not parse) is logged and yields an empty list. There is no
retry and no partial result.

Public API:
    load(source, timeout) → list[Entry]
"""

import json
import logging
from pathlib import Path

import requests
from pydantic import TypeAdapter, ValidationError

from catalog.config import DATA_SOURCE, FETCH_TIMEOUT
from catalog.models import Entry

log = logging.getLogger(__name__)

_ENTRIES = TypeAdapter(list[Entry])


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _fetch(source: str, timeout: float) -> str:
    """Return the raw payload text for a URL or a filesystem path."""
    if _is_url(source):
        resp = requests.get(source, timeout=timeout)
        resp.raise_for_status()
        return resp.text
    return Path(source).read_text(encoding="utf-8")


def load(source: str | Path = DATA_SOURCE, timeout: float = FETCH_TIMEOUT) -> list[Entry]:
    source = str(source)
    try:
        raw = _fetch(source, timeout)
        entries = _ENTRIES.validate_python(json.loads(raw))
    except (requests.RequestException, OSError, ValueError, ValidationError) as exc:
        log.error("Failed to load entries from %s: %s", source, exc)
        return []

    log.info("Loaded %d entries from %s", len(entries), source)
    return entries

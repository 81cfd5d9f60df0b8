"""
Runtime configuration.

Values come from the environment (a local .env file is loaded first):

    CATALOG_DATA_SOURCE    path or http(s) URL of the entries JSON
    CATALOG_PREFS_FILE     JSON file holding the theme preference
    CATALOG_LOG_DIR        directory for the rotating app.log
    CATALOG_HOST / CATALOG_PORT   where the API listens
    CATALOG_FETCH_TIMEOUT  seconds to wait when the data source is a URL
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

ROOT_DIR = Path(__file__).parent.parent
DATA_DIR = ROOT_DIR / "data"

DATA_SOURCE   = os.getenv("CATALOG_DATA_SOURCE", str(DATA_DIR / "data.json"))
PREFS_FILE    = Path(os.getenv("CATALOG_PREFS_FILE", str(DATA_DIR / "preferences.json")))
LOG_DIR       = Path(os.getenv("CATALOG_LOG_DIR", str(ROOT_DIR / "logs")))
HOST          = os.getenv("CATALOG_HOST", "0.0.0.0")
PORT          = int(os.getenv("CATALOG_PORT", "8000"))
FETCH_TIMEOUT = float(os.getenv("CATALOG_FETCH_TIMEOUT", "10"))

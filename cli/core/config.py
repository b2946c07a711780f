# cli/core/config.py
from pathlib import Path
import os

# URL of the CarMarket API
BASE_URL = os.environ.get("CARMARKET_URL", "http://localhost:3000")

# Seconds to wait for the API before giving up
TIMEOUT = float(os.environ.get("CARMARKET_TIMEOUT", "10"))

# Local data directory (session token)
APP_DIR = Path(os.environ.get("CARMARKET_HOME", str(Path.home() / ".carmarket")))

SESSION_FILE = APP_DIR / "session.json"

from pathlib import Path
import os
import sys

# Ensure project root and backend paths are importable for tests
ROOT = Path(__file__).resolve().parents[2]
BACKEND = ROOT / "backend"
APP = BACKEND / "app"

for p in (str(ROOT), str(BACKEND), str(APP)):
    if p not in sys.path:
        sys.path.insert(0, p)

"""
Test configuration

Settings are read once at import time, so pin the env-driven values before
anything imports backend.app.core.config.
"""
os.environ.setdefault("DRIVE_THUMBNAIL_SIZE", "w1200")
os.environ.setdefault("DRIVE_MAX_BATCH", "500")
os.environ.setdefault("APP_LOG_LEVEL", "WARNING")

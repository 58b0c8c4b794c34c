"""
Helper script to run the FastAPI app with a predictable sys.path.
Usage:
  python run_api.py            (APP_PORT / APP_HOST / APP_RELOAD override defaults)
"""
import os
import sys

from uvicorn import run

ROOT = os.path.dirname(os.path.abspath(__file__))
BACKEND_APP_DIR = os.path.join(ROOT, "backend", "app")

if BACKEND_APP_DIR not in sys.path:
  sys.path.insert(0, BACKEND_APP_DIR)

# Ensure reloader subprocess also sees our backend/app on PYTHONPATH
os.environ["PYTHONPATH"] = os.pathsep.join(
  [BACKEND_APP_DIR] + [p for p in os.environ.get("PYTHONPATH", "").split(os.pathsep) if p]
)

if __name__ == "__main__":
  log_level = os.environ.get("APP_LOG_LEVEL", "info").lower()
  reload = os.environ.get("APP_RELOAD", "1") in {"1", "true", "TRUE", "True"}
  run(
    "backend.app.main:app",
    host=os.environ.get("APP_HOST", "0.0.0.0"),
    port=int(os.environ.get("APP_PORT", "8000")),
    reload=reload,
    reload_dirs=[BACKEND_APP_DIR] if reload else None,
    log_level=log_level,
    access_log=True,
  )

"""
main.py — Convenience entry point for the Event Management backend.

The FastAPI application is defined in api/main.py.
This file re-exports `app` so uvicorn can be invoked from backend/ as:

    uvicorn main:app --reload --port 8000

The canonical import path (api.main:app) is the one used by gunicorn.conf.py.
"""

from api.main import app  # noqa: F401  (re-export)

"""FastAPI REST API for carcass layouts.

Resolves posted designs statelessly and keeps interactive designer
sessions in memory.

Usage:
    uvicorn carcass.web:app --reload
"""

from carcass.web.app import app, create_app

__all__ = ["app", "create_app"]

"""FastAPI REST API for cut planning.

This module provides a REST API for computing single-sheet cut plans and
validating cut job configurations.

Usage:
    uvicorn sheetcut.web:app --reload
"""

from sheetcut.web.app import app, create_app

__all__ = ["app", "create_app"]

"""Routers module - FastAPI route handlers"""

from . import config, diff, view

__all__ = ["config", "diff", "view"]

"""In-memory demo backend implementing the dashboard's API contract."""

from .app import create_app
from .store import DemoStore

__all__ = ["DemoStore", "create_app"]

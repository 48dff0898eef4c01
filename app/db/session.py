"""
Application record store.

Holds the process-wide :class:`DataStore` used by the API.  The store is
loaded from ``settings.DATA_DIR`` on first use (or at startup through
:func:`init_store`).
"""

from typing import Optional

from app.core.config import settings
from app.db.loader import load_store
from app.db.store import DataStore

_store: Optional[DataStore] = None


def init_store(data_dir: Optional[str] = None) -> DataStore:
    """Load (or reload) the application store from *data_dir*."""
    global _store
    loaded = load_store(data_dir or settings.DATA_DIR)
    if _store is None:
        _store = loaded
    else:
        _store.replace_with(loaded)
    return _store


def get_store() -> DataStore:
    """
    Dependency for FastAPI endpoints to get the record store.

    Example:
        @app.get("/items")
        def get_items(store: DataStore = Depends(get_store)):
            return store.profiles
    """
    if _store is None:
        return init_store()
    return _store

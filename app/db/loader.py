"""
JSON record loader.

Reads ``profiles.json``, ``trainingSessions.json`` and
``appointments.json`` (arrays of camelCase objects) from a data
directory and validates them into a :class:`DataStore`.
"""

import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from app.db.store import DataStore
from app.models.appointment import Appointment
from app.models.profile import PlayerProfile
from app.models.training_session import TrainingSession

logger = logging.getLogger(__name__)

PROFILES_FILE = "profiles.json"
SESSIONS_FILE = "trainingSessions.json"
APPOINTMENTS_FILE = "appointments.json"


class DataLoadError(RuntimeError):
    """Raised when a data file is missing or does not validate."""


def _read_records(path: Path, adapter: TypeAdapter) -> list:
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise DataLoadError(f"Cannot read data file '{path}': {e}") from e

    try:
        return adapter.validate_json(raw)
    except ValidationError as e:
        raise DataLoadError(f"Invalid records in '{path}': {e}") from e


def load_store(data_dir: str | Path) -> DataStore:
    """Load all record files from *data_dir* into a new store.

    Raises:
        DataLoadError: if any file is missing, unreadable or invalid.
    """
    base = Path(data_dir)
    try:
        store = DataStore(profiles=_read_records(base / PROFILES_FILE, TypeAdapter(list[PlayerProfile])),
                          sessions=_read_records(base / SESSIONS_FILE, TypeAdapter(list[TrainingSession])),
                          appointments=_read_records(base / APPOINTMENTS_FILE, TypeAdapter(list[Appointment])), )
    except DataLoadError:
        logger.exception("Failed to load data files from %s", base)
        raise

    counts = store.counts()
    logger.info("Loaded %d profiles, %d sessions, %d appointments from %s", counts["profiles"], counts["sessions"],
                counts["appointments"], base)
    return store

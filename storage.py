"""Best-effort persistence of the SettingsRecord between sessions."""

import logging
import os
import pickle

from PySide6.QtCore import QStandardPaths

from models import SettingsRecord

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "settings.pickle"


def default_settings_path() -> str:
    base = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppDataLocation)
    if not base:
        base = os.path.join(os.path.expanduser("~"), ".sticker-quote")
    return os.path.join(base, SETTINGS_FILENAME)


class SettingsStore:
    """Loads and saves a whole SettingsRecord as a pickle file."""

    def __init__(self, path: str | None = None):
        self.path = path or default_settings_path()

    def load(self) -> SettingsRecord | None:
        """Return the saved record, or None if there is nothing usable.

        None means "use the defaults"; a missing file is not an error.
        """
        if not os.path.exists(self.path):
            return None
        try:
            with open(self.path, "rb") as f:
                record = pickle.load(f)  # noqa: S301
            if not isinstance(record, SettingsRecord):
                raise TypeError("Not a settings record")
        except Exception as e:
            logger.warning("Ignoring unreadable settings %s: %s", self.path, e)
            return None
        return record

    def save(self, record: SettingsRecord) -> None:
        """Write *record*. Raises OSError if the file can't be written."""
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        tmp_path = self.path + ".tmp"
        with open(tmp_path, "wb") as f:
            pickle.dump(record, f)
        os.replace(tmp_path, self.path)
        logger.debug("Saved settings to %s", self.path)

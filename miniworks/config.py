"""
User settings for the MiniWorks tools.

Stored as JSON at ~/.config/miniworks/config.json. Environment
variables MINIWORKS_DEVICE_ID and MINIWORKS_CHECKSUM_MODE override the
file for a single run.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from miniworks.formats.constants import DEFAULT_DEVICE_ID
from miniworks.utils.checksum import ChecksumMode
from miniworks.utils.validation import validate_device_id

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "miniworks" / "config.json"

_DEFAULTS = {
    "device_id": DEFAULT_DEVICE_ID,
    "checksum_mode": ChecksumMode.MASK7.value,
    "midi_port": None,
}

_ENV_OVERRIDES = {
    "device_id": "MINIWORKS_DEVICE_ID",
    "checksum_mode": "MINIWORKS_CHECKSUM_MODE",
}


class AppConfig:
    """
    Persistent tool settings.

    Missing or unreadable files leave the defaults in place.
    """

    def __init__(self, path: Optional[Path] = None, use_env: bool = True) -> None:
        self._path = Path(path) if path else DEFAULT_CONFIG_PATH
        self.device_id: int = _DEFAULTS["device_id"]
        self.checksum_mode: str = _DEFAULTS["checksum_mode"]
        self.midi_port: Optional[str] = _DEFAULTS["midi_port"]
        self._load()
        if use_env:
            self._apply_env()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def mode(self) -> ChecksumMode:
        """Checksum mode as an enum."""
        return ChecksumMode.parse(self.checksum_mode)

    def _load(self) -> None:
        if not self._path.exists():
            return
        try:
            data = json.loads(self._path.read_text())
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable config %s: %s", self._path, e)
            return
        if not isinstance(data, dict):
            logger.warning("Ignoring config %s: expected a JSON object", self._path)
            return
        for key in _DEFAULTS:
            if key in data:
                setattr(self, key, data[key])

    def _apply_env(self) -> None:
        for key, var in _ENV_OVERRIDES.items():
            value = os.environ.get(var)
            if value is None or value == "":
                continue
            if key == "device_id":
                try:
                    self.device_id = validate_device_id(int(value))
                except ValueError as e:
                    logger.warning("Ignoring %s=%r: %s", var, value, e)
            else:
                try:
                    self.checksum_mode = ChecksumMode.parse(value).value
                except ValueError as e:
                    logger.warning("Ignoring %s=%r: %s", var, value, e)

    def save(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        data = {key: getattr(self, key) for key in _DEFAULTS}
        self._path.write_text(json.dumps(data, indent=2))

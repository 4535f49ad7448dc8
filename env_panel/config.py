"""Configuration persistence for the Environment Panel."""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get platform-appropriate config directory."""
    if os.name == 'nt':
        base = Path(os.environ.get('APPDATA', Path.home() / 'AppData' / 'Roaming'))
    elif sys.platform == 'darwin':
        base = Path.home() / 'Library' / 'Application Support'
    else:
        base = Path(os.environ.get('XDG_CONFIG_HOME', Path.home() / '.config'))
    config_dir = base / 'CoreSystems' / 'EnvPanel'
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


class Config:
    """Panel settings. Collected environment data is never stored here."""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = Path(config_dir) if config_dir else get_config_dir()
        self.config_file = self.config_dir / 'config.json'
        self.data: dict[str, Any] = self._load()

    def _load(self) -> dict:
        data = self._defaults()
        if self.config_file.exists():
            try:
                stored = json.loads(self.config_file.read_text(encoding='utf-8'))
            except (json.JSONDecodeError, OSError):
                return data
            if isinstance(stored, dict):
                data.update(stored)
        return data

    def _defaults(self) -> dict:
        return {
            'locale': None,
            'page_url': None,
            'cookies_enabled': True,
            'connectivity_poll_ms': 2000,
            'window_geometry': '900x720',
        }

    def save(self):
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            self.config_file.write_text(
                json.dumps(self.data, indent=2, ensure_ascii=False),
                encoding='utf-8'
            )
        except OSError as e:
            logger.warning("Failed to save config: %s", e)

    def get(self, key: str, default: Any = None) -> Any:
        value = self.data.get(key)
        return default if value is None else value

    def set(self, key: str, value: Any):
        self.data[key] = value
        self.save()

    @property
    def storage_dir(self) -> Path:
        """Directory backing the local key/value store the panel probes."""
        return self.config_dir / 'storage'

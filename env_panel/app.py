"""Main application — Environment Panel by CORE SYSTEMS."""

from __future__ import annotations

import logging
import sys
import tkinter as tk
from typing import Optional

from . import APP_NAME, __version__
from .config import Config
from .host import build_sources
from .scheduler import UpdateScheduler
from .snapshot import SnapshotOrchestrator
from .ui import EnvPanel, apply_theme, branded_header

logger = logging.getLogger(__name__)


class EnvPanelApp(tk.Tk):
    """Main window. Owns every trigger source and hands it to the scheduler."""

    def __init__(self, config: Optional[Config] = None):
        super().__init__()

        self.title(f"{APP_NAME} v{__version__}")
        self.config_mgr = config or Config()
        self.geometry(self.config_mgr.get('window_geometry', '900x720'))
        self.minsize(760, 560)
        apply_theme(self)

        branded_header(self, "Environment Panel").pack(fill='x')
        self.panel = EnvPanel(self, on_refresh=self._request_refresh)
        self.panel.pack(fill='both', expand=True, padx=12, pady=(0, 12))

        self.sources = build_sources(self.config_mgr, root=self)
        self.scheduler = UpdateScheduler(SnapshotOrchestrator(self.sources), self.panel, self)

        self._online: Optional[bool] = None
        self._poll_id = None
        self._viewport = (0, 0)

        self.bind('<Configure>', self._on_configure)
        key = 'Command' if sys.platform == 'darwin' else 'Control'
        self.bind(f'<{key}-r>', lambda e: self._request_refresh())
        self.bind('<F5>', lambda e: self._request_refresh())
        self.protocol('WM_DELETE_WINDOW', self._on_close)

        self.after_idle(self._on_load)

    # ── Triggers ──
    def _on_load(self):
        self.scheduler.on_load()
        self._online = self.sources.identity.on_line
        self._poll_connectivity()

    def _poll_connectivity(self):
        online = self.sources.identity.on_line
        if online != self._online:
            self._online = online
            self.scheduler.on_connectivity_change()
        self._poll_id = self.after(self.config_mgr.get('connectivity_poll_ms', 2000),
                                   self._poll_connectivity)

    def _on_configure(self, event):
        if event.widget is not self:
            return
        size = (event.width, event.height)
        if size != self._viewport:
            self._viewport = size
            self.scheduler.on_resize()

    def _request_refresh(self):
        if not self.scheduler.request_refresh():
            logger.debug("refresh already pending")

    def _on_close(self):
        self.scheduler.stop()
        if self._poll_id is not None:
            self.after_cancel(self._poll_id)
        self.config_mgr.set('window_geometry', self.geometry())
        self.destroy()

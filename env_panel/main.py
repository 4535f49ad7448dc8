#!/usr/bin/env python3
"""Environment Panel — host environment diagnostics by CORE SYSTEMS."""

import logging
import os
import sys

# Ensure the app directory is the working directory (for PyInstaller bundles)
if getattr(sys, 'frozen', False):
    os.chdir(os.path.dirname(sys.executable))


def main():
    logging.basicConfig(
        level=os.environ.get("ENV_PANEL_LOG", "WARNING").upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    from .app import EnvPanelApp

    app = EnvPanelApp()
    app.mainloop()


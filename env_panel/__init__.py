"""Environment Info Panel by CORE SYSTEMS."""

__version__ = "1.0.0"
APP_NAME = "CORE Environment Panel"

"""
Environment Panel entry point.

Usage:
    python -m env_panel
"""

from .main import main

if __name__ == "__main__":
    main()

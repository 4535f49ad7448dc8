"""tkinter presentation for the Environment Panel."""

from .panel import EnvPanel, FIELD_GROUPS
from .theme import apply_theme, branded_header, COLORS, FONTS

__all__ = ['EnvPanel', 'FIELD_GROUPS', 'apply_theme', 'branded_header', 'COLORS', 'FONTS']

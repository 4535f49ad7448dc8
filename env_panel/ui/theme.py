"""Dark theme and CORE SYSTEMS branding for tkinter."""

from __future__ import annotations

import sys
import tkinter as tk
from tkinter import ttk


# CORE SYSTEMS color palette
COLORS = {
    'bg': '#0d1117',
    'surface': '#161b22',
    'surface_hover': '#21262d',
    'accent': '#00ff88',
    'accent_dim': '#00cc6a',
    'accent_bg': '#003322',
    'text': '#c9d1d9',
    'text_secondary': '#8b949e',
    'text_dim': '#606080',
    'success': '#00ff88',
    'danger': '#ff6b6b',
    'border': '#21262d',
}

FONTS = {
    'title': ('Segoe UI', 16, 'bold'),
    'heading': ('Segoe UI', 12, 'bold'),
    'body': ('Segoe UI', 10),
    'small': ('Segoe UI', 9),
    'mono': ('Consolas', 10),
}

# macOS font overrides
if sys.platform == 'darwin':
    FONTS = {
        'title': ('SF Pro Display', 16, 'bold'),
        'heading': ('SF Pro Display', 13, 'bold'),
        'body': ('SF Pro Text', 11),
        'small': ('SF Pro Text', 10),
        'mono': ('SF Mono', 11),
    }


def apply_theme(root: tk.Tk):
    """Apply CORE SYSTEMS dark theme to the root window."""
    root.configure(bg=COLORS['bg'])
    root.option_add('*Font', FONTS['body'])

    style = ttk.Style()

    # Try clam theme as base (best for customization)
    try:
        style.theme_use('clam')
    except tk.TclError:
        pass

    style.configure('.', background=COLORS['bg'], foreground=COLORS['text'],
                     font=FONTS['body'], borderwidth=0)

    # Frames
    style.configure('TFrame', background=COLORS['bg'])
    style.configure('Card.TFrame', background=COLORS['surface'])

    # Labels
    style.configure('TLabel', background=COLORS['bg'], foreground=COLORS['text'])
    style.configure('Title.TLabel', font=FONTS['title'], foreground=COLORS['accent'])
    style.configure('Secondary.TLabel', foreground=COLORS['text_secondary'],
                     font=FONTS['small'])
    style.configure('CardTitle.TLabel', background=COLORS['surface'],
                     foreground=COLORS['accent'], font=FONTS['heading'])
    style.configure('Key.TLabel', background=COLORS['surface'],
                     foreground=COLORS['text_secondary'], font=FONTS['small'])
    style.configure('Value.TLabel', background=COLORS['surface'],
                     foreground=COLORS['text'], font=FONTS['mono'])
    style.configure('Success.Value.TLabel', foreground=COLORS['success'])
    style.configure('Danger.Value.TLabel', foreground=COLORS['danger'])

    # Buttons
    style.configure('Accent.TButton',
                     background=COLORS['accent_bg'],
                     foreground=COLORS['accent'],
                     font=FONTS['heading'],
                     padding=(12, 6))
    style.map('Accent.TButton',
              background=[('active', COLORS['accent_dim']),
                          ('disabled', COLORS['surface_hover'])],
              foreground=[('active', COLORS['bg']),
                          ('disabled', COLORS['text_dim'])])

    return style


def branded_header(parent, title: str) -> ttk.Frame:
    """Create CORE SYSTEMS branded header."""
    frame = ttk.Frame(parent)
    ttk.Label(frame, text=f"⬡ {title.upper()}", style='Title.TLabel').pack(
        side='left', padx=16, pady=12)
    ttk.Label(frame, text="CORE SYSTEMS", style='Secondary.TLabel').pack(
        side='right', padx=16, pady=12)
    return frame

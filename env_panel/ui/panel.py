"""Card grid showing every field, acting as the engine's presentation sink."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

from ..sink import PresentationSink
from ..sources import Emphasis

LOADING = "Loading..."

# (card title, [(field name, label), ...]) in display order
FIELD_GROUPS = [
    ("Browser", [
        ("user_agent", "User Agent"),
        ("platform", "Platform"),
        ("language", "Language"),
        ("cookies_enabled", "Cookies Enabled"),
        ("online_status", "Status"),
    ]),
    ("Location", [
        ("hostname", "Hostname"),
        ("protocol", "Protocol"),
        ("port", "Port"),
        ("pathname", "Path"),
        ("origin", "Origin"),
        ("full_url", "Full URL"),
    ]),
    ("Display", [
        ("screen_resolution", "Screen Resolution"),
        ("available_size", "Available Size"),
        ("color_depth", "Color Depth"),
        ("pixel_ratio", "Pixel Ratio"),
        ("viewport_size", "Viewport Size"),
    ]),
    ("Date & Time", [
        ("current_time", "Current Time"),
        ("timezone", "Time Zone"),
        ("utc_offset", "UTC Offset"),
        ("locale", "Locale"),
    ]),
    ("Performance", [
        ("memory_usage", "Memory Usage"),
        ("connection_type", "Connection"),
        ("hardware_concurrency", "CPU Cores"),
        ("max_touch_points", "Touch Points"),
    ]),
    ("Storage", [
        ("local_storage", "Local Storage"),
        ("session_storage", "Session Storage"),
        ("indexed_db", "IndexedDB"),
        ("web_sql", "WebSQL"),
    ]),
]

EMPHASIS_STYLES = {
    Emphasis.SUCCESS: 'Success.Value.TLabel',
    Emphasis.DANGER: 'Danger.Value.TLabel',
}


class EnvPanel(ttk.Frame, PresentationSink):
    """Two-column grid of cards with one value label per field."""

    def __init__(self, parent, on_refresh=None):
        super().__init__(parent)
        self.on_refresh = on_refresh
        self.values: dict[str, ttk.Label] = {}
        self._build_ui()

    def _build_ui(self):
        grid = ttk.Frame(self)
        grid.pack(fill='both', expand=True)
        grid.columnconfigure(0, weight=1, uniform='col')
        grid.columnconfigure(1, weight=1, uniform='col')

        for i, (title, fields) in enumerate(FIELD_GROUPS):
            row, col = divmod(i, 2)
            grid.rowconfigure(row, weight=1)
            self._make_card(grid, title, fields, row, col)

        footer = ttk.Frame(self)
        footer.pack(fill='x', pady=(8, 0))
        ttk.Label(footer, text="Last updated:", style='Secondary.TLabel').pack(side='left')
        self.values['last_updated'] = ttk.Label(footer, text=LOADING, style='Secondary.TLabel')
        self.values['last_updated'].pack(side='left', padx=(4, 0))

        self.refresh_btn = ttk.Button(footer, text="Refresh", style='Accent.TButton',
                                      command=self._refresh_clicked)
        self.refresh_btn.pack(side='right')

    def _make_card(self, parent, title, fields, row, col):
        card = ttk.Frame(parent, style='Card.TFrame', padding=(12, 8))
        card.grid(row=row, column=col, padx=4, pady=4, sticky='nsew')
        card.columnconfigure(1, weight=1)
        ttk.Label(card, text=title, style='CardTitle.TLabel').grid(
            row=0, column=0, columnspan=2, sticky='w', pady=(0, 6))
        for r, (name, label) in enumerate(fields, start=1):
            ttk.Label(card, text=label, style='Key.TLabel').grid(
                row=r, column=0, sticky='nw', padx=(0, 12), pady=1)
            value = ttk.Label(card, text=LOADING, style='Value.TLabel',
                              wraplength=300, justify='left')
            value.grid(row=r, column=1, sticky='w', pady=1)
            self.values[name] = value

    def _refresh_clicked(self):
        if self.on_refresh is not None:
            self.on_refresh()

    # ── PresentationSink ──
    def set_text(self, name: str, text: str):
        label = self.values.get(name)
        if label is not None:
            label.configure(text=text)

    def set_emphasis(self, name: str, emphasis: Emphasis):
        label = self.values.get(name)
        if label is not None:
            label.configure(style=EMPHASIS_STYLES.get(emphasis, 'Value.TLabel'))

    def set_busy(self, busy: bool):
        if busy:
            self.refresh_btn.configure(text="Refreshing...", state='disabled')
        else:
            self.refresh_btn.configure(text="Refresh", state='normal')
        self.refresh_btn.update_idletasks()

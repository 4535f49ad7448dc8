"""Tests for the tkinter panel sink. Skipped when no display is available."""

import pytest

tk = pytest.importorskip("tkinter")

from conftest import make_sources
from env_panel.scheduler import UpdateScheduler
from env_panel.snapshot import SnapshotOrchestrator
from env_panel.sources import Emphasis
from env_panel.ui import FIELD_GROUPS, EnvPanel, apply_theme


@pytest.fixture
def root():
    try:
        root = tk.Tk()
    except tk.TclError:
        pytest.skip("no display")
    root.withdraw()
    apply_theme(root)
    yield root
    root.destroy()


class TestEnvPanel:

    def test_one_label_per_field(self, root):
        panel = EnvPanel(root)
        names = [name for _, fields in FIELD_GROUPS for name, _ in fields]
        assert set(panel.values) == set(names) | {"last_updated"}

    def test_snapshot_written_into_labels(self, root):
        panel = EnvPanel(root)
        snapshot = SnapshotOrchestrator(make_sources()).refresh(panel)
        for name, value in snapshot.as_dict().items():
            assert panel.values[name].cget("text") == value
        assert str(panel.values["online_status"].cget("style")) == "Success.Value.TLabel"

    def test_emphasis_styles(self, root):
        panel = EnvPanel(root)
        panel.set_emphasis("online_status", Emphasis.DANGER)
        assert str(panel.values["online_status"].cget("style")) == "Danger.Value.TLabel"

    def test_unknown_slot_ignored(self, root):
        EnvPanel(root).set_text("no_such_field", "x")

    def test_busy_button(self, root):
        panel = EnvPanel(root)
        panel.set_busy(True)
        assert panel.refresh_btn.cget("text") == "Refreshing..."
        assert panel.refresh_btn.instate(["disabled"])
        panel.set_busy(False)
        assert panel.refresh_btn.cget("text") == "Refresh"
        assert not panel.refresh_btn.instate(["disabled"])

    def test_button_requests_refresh(self, root):
        panel = EnvPanel(root)
        scheduler = UpdateScheduler(SnapshotOrchestrator(make_sources()), panel, root)
        panel.on_refresh = scheduler.request_refresh
        panel.refresh_btn.invoke()
        assert scheduler.refresh_pending
        scheduler.stop()

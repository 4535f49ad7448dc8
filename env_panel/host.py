"""Environment sources for the local machine.

Every attribute is read live, so values follow the host between refreshes.
"""

from __future__ import annotations

import importlib.util
import logging
import platform
from collections.abc import MutableMapping
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Iterator, Optional
from urllib.parse import urlsplit

import psutil
from babel import default_locale
from babel.localtime import LOCALTZ

from . import __version__
from .config import Config
from .sources import EnvironmentSources

logger = logging.getLogger(__name__)

CSS_DPI = 96.0
USER_AGENT_PRODUCT = "CORE-EnvPanel"


def _is_virtual(iface: str) -> bool:
    return iface.startswith("lo") or iface.startswith("veth") or "Loopback" in iface


def _up_interfaces() -> dict:
    return {
        name: st for name, st in psutil.net_if_stats().items()
        if st.isup and not _is_virtual(name)
    }


# ── Identity ───────────────────────────────────────────────────────────
class HostIdentity:
    def __init__(self, config: Config):
        self.config = config

    @property
    def user_agent(self) -> str:
        return (f"{USER_AGENT_PRODUCT}/{__version__} Python/{platform.python_version()} "
                f"({platform.system()} {platform.release()}; {platform.machine()})")

    @property
    def platform(self) -> str:
        return f"{platform.system()} {platform.machine()}".strip()

    @property
    def language(self) -> Optional[str]:
        tag = self.config.get('locale') or default_locale('LC_TIME')
        return tag.split(".")[0].replace("_", "-") if tag else None

    @property
    def cookie_enabled(self) -> bool:
        return bool(self.config.get('cookies_enabled', True))

    @property
    def on_line(self) -> bool:
        return bool(_up_interfaces())

    @property
    def hardware_concurrency(self) -> Optional[int]:
        return psutil.cpu_count(logical=True)

    max_touch_points = None


# ── Location ───────────────────────────────────────────────────────────
class UrlLocation:
    """Browser-style location parts of a URL."""

    def __init__(self, url: str):
        self.href = url
        self._parts = urlsplit(url)

    @property
    def protocol(self) -> Optional[str]:
        return f"{self._parts.scheme}:" if self._parts.scheme else None

    @property
    def hostname(self) -> Optional[str]:
        return self._parts.hostname

    @property
    def port(self) -> Optional[int]:
        return self._parts.port

    @property
    def pathname(self) -> str:
        return self._parts.path

    @property
    def origin(self) -> Optional[str]:
        if not self._parts.scheme or not self._parts.netloc or self._parts.scheme == "file":
            return None
        return f"{self._parts.scheme}://{self._parts.netloc.rpartition('@')[2]}"


# ── Display ────────────────────────────────────────────────────────────
class TkScreen:
    def __init__(self, root):
        self.root = root

    @property
    def width(self) -> int:
        return self.root.winfo_screenwidth()

    @property
    def height(self) -> int:
        return self.root.winfo_screenheight()

    @property
    def avail_width(self) -> int:
        return self.root.wm_maxsize()[0]

    @property
    def avail_height(self) -> int:
        return self.root.wm_maxsize()[1]

    @property
    def color_depth(self) -> int:
        return self.root.winfo_screendepth()


class TkViewport:
    def __init__(self, root):
        self.root = root

    @property
    def inner_width(self) -> int:
        return self.root.winfo_width()

    @property
    def inner_height(self) -> int:
        return self.root.winfo_height()

    @property
    def device_pixel_ratio(self) -> float:
        return round(self.root.winfo_fpixels('1i') / CSS_DPI, 2)


# ── Performance ────────────────────────────────────────────────────────
@dataclass(frozen=True)
class ProcessMemory:
    used_heap_size: int
    total_heap_size: int
    heap_size_limit: int


class HostPerformance:
    def __init__(self, process: Optional[psutil.Process] = None):
        self.process = process or psutil.Process()

    @property
    def memory(self) -> ProcessMemory:
        info = self.process.memory_info()
        return ProcessMemory(
            used_heap_size=info.rss,
            total_heap_size=info.vms,
            heap_size_limit=psutil.virtual_memory().total,
        )


class HostConnection:
    """Fastest active network interface: its name and link speed."""

    def _fastest(self):
        up = _up_interfaces()
        if not up:
            return None, None
        return max(up.items(), key=lambda item: item[1].speed or 0)

    @property
    def effective_type(self) -> Optional[str]:
        return self._fastest()[0]

    @property
    def downlink(self) -> Optional[int]:
        stats = self._fastest()[1]
        return stats.speed if stats else None


# ── Storage ────────────────────────────────────────────────────────────
class DirectoryStore(MutableMapping):
    """Persistent string store keeping one file per key."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _file(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key.startswith(".."):
            raise KeyError(key)
        return self.path / key

    def __getitem__(self, key: str) -> str:
        try:
            return self._file(key).read_text(encoding="utf-8")
        except FileNotFoundError:
            raise KeyError(key) from None

    def __setitem__(self, key: str, value: str):
        self.path.mkdir(parents=True, exist_ok=True)
        self._file(key).write_text(value, encoding="utf-8")

    def __delitem__(self, key: str):
        try:
            self._file(key).unlink()
        except FileNotFoundError:
            raise KeyError(key) from None

    def __iter__(self) -> Iterator[str]:
        if not self.path.is_dir():
            return iter(())
        return iter(sorted(p.name for p in self.path.iterdir() if p.is_file()))

    def __len__(self) -> int:
        return sum(1 for _ in self)


def _importable(module: str) -> bool:
    return importlib.util.find_spec(module) is not None


class HostStorage:
    def __init__(self, local_dir: Path):
        self.local = DirectoryStore(local_dir)
        self.session: dict[str, str] = {}
        self.indexed = _importable("dbm")
        self.legacy_sql = _importable("sqlite3")


# ── Clock ──────────────────────────────────────────────────────────────
class HostClock:
    def __init__(self):
        self.timezone = LOCALTZ

    def now(self) -> datetime:
        return datetime.now(self.timezone)

    @property
    def locale(self) -> Optional[str]:
        return default_locale('LC_TIME')


def build_sources(config: Config, root: Any = None) -> EnvironmentSources:
    """Sources for this machine; screen and viewport need a Tk root."""
    url = config.get('page_url') or Path.cwd().as_uri()
    logger.debug("building host sources (url=%s, display=%s)", url, root is not None)
    return EnvironmentSources(
        identity=HostIdentity(config),
        location=UrlLocation(url),
        screen=TkScreen(root) if root is not None else None,
        viewport=TkViewport(root) if root is not None else None,
        performance=HostPerformance(),
        connection=HostConnection(),
        storage=HostStorage(config.storage_dir),
        clock=HostClock(),
    )

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from zerogravity.logger import logger  # noqa: E402
from zerogravity.navigation import NavigationController, ScreenName  # noqa: E402
from zerogravity.progress import ProgressLog  # noqa: E402


@pytest.fixture(autouse=True)
def quiet_logger():
    """Keep the colored debug output out of test runs."""
    previous = logger.enabled
    logger.enabled = False
    yield
    logger.enabled = previous


class FakeScreen:
    """Records mount/unmount calls; optionally runs a hook on mount."""

    def __init__(self, name, events, on_mount=None) -> None:
        self.name = name
        self.events = events
        self.on_mount = on_mount

    def mount(self) -> None:
        self.events.append(("mount", self.name))
        if self.on_mount is not None:
            self.on_mount()

    def unmount(self) -> None:
        self.events.append(("unmount", self.name))


@pytest.fixture
def events():
    return []


@pytest.fixture
def controller(tmp_path, events):
    nav = NavigationController(ProgressLog(tmp_path / "progress.txt"), cursor="star")
    for name in ScreenName:
        nav.register(name, FakeScreen(name, events))
    return nav

import pytest

from iconocolor.engine.manager import FolderColorManager
from iconocolor.engine.models import ColorPalette, IconocolorSettings
from iconocolor.engine.tree.memory import InMemoryFolderTree


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def tree():
    return InMemoryFolderTree([
        "Archive",
        "Projects/Alpha",
        "Projects/Beta/Notes",
        "Projects/Gamma",
        "Zeta",
    ])


@pytest.fixture
def settings():
    return IconocolorSettings(
        color_palettes=[ColorPalette(name="Primary", colors=["#FF0000", "#00FF00", "#0000FF"])],
    )


@pytest.fixture
def make_manager():
    """Build a manager over an in-memory tree from folder paths and settings fields."""
    def _make(paths, **fields):
        return FolderColorManager(IconocolorSettings(**fields), InMemoryFolderTree(paths))
    return _make


@pytest.fixture
def manager(settings, tree):
    return FolderColorManager(settings, tree)

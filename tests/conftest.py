"""
Shared fixtures for Sportsday tests
"""
import pytest

from sportsday.config import Config, set_config
from sportsday.core.bus import EventBus
from sportsday.core.page import Page


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts from the built-in defaults."""
    config = Config()
    set_config(config)
    yield config
    set_config(None)


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def page(bus):
    page = Page(path="/scoreboard", bus=bus)
    yield page
    page.unmount_all()

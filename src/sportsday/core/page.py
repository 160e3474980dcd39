"""
Sportsday Page Model

Minimal stand-ins for the page elements controllers act on, plus the page
location and the set of mounted controllers.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .bus import EventBus, bus as default_bus

logger = logging.getLogger(__name__)


@dataclass
class Element:
    """A page element with an id, data attributes, inline style and content."""
    id: str = ""
    attributes: Dict[str, str] = field(default_factory=dict)
    style: Dict[str, str] = field(default_factory=dict)
    inner_html: str = ""

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)


@dataclass
class SelectControl(Element):
    """Score dropdown. Tagged with the form it shows via data-form-id."""
    value: str = ""

    @property
    def form_id(self) -> Optional[str]:
        return self.get_attribute("data-form-id")


@dataclass
class Field(Element):
    """
    Score input inside a score entry form.

    field_id names the form (house/tutor group) the score belongs to.
    """
    value: str = ""
    field_id: Optional[str] = None


@dataclass
class Button(Element):
    """Submit button; its background colour is the submission status cue."""

    @property
    def background_color(self) -> Optional[str]:
        return self.style.get("background-color")

    @background_color.setter
    def background_color(self, color: str) -> None:
        self.style["background-color"] = color


class Location:
    """Current page location. Only the query string is ever changed."""

    def __init__(self, path: str = "/", search: str = ""):
        self.path = path
        self.search = search
        self.history: List[str] = []

    @property
    def href(self) -> str:
        return f"{self.path}{self.search}"

    def navigate(self, search: str) -> None:
        """Replace the query string, remembering the previous location."""
        self.history.append(self.href)
        self.search = search if search.startswith("?") or not search else f"?{search}"
        logger.info(f"Navigated to {self.href}")


class Page:
    """
    A rendered page: one bus, one location and whatever controllers are
    mounted on it.
    """

    def __init__(self, path: str = "/", search: str = "", bus: Optional[EventBus] = None):
        self.bus = bus if bus is not None else default_bus
        self.location = Location(path, search)
        self._controllers = []

    @property
    def controllers(self) -> list:
        return list(self._controllers)

    def mount(self, controller):
        """Connect a controller and keep track of it. Mounting twice is a no-op."""
        if controller in self._controllers:
            return controller
        controller.connect()
        self._controllers.append(controller)
        return controller

    def unmount(self, controller) -> None:
        if controller in self._controllers:
            self._controllers.remove(controller)
            controller.disconnect()

    def unmount_all(self) -> None:
        """Disconnect every controller, newest first."""
        for controller in reversed(self._controllers):
            controller.disconnect()
        self._controllers.clear()

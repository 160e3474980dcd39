"""
Filter Controller

Turns a filter choice (key/value) into new query params and asks the page
to navigate there. Navigation itself is left to whoever handles
doSafeScoreRedirect.
"""

import logging
from typing import Callable, List, Optional, Tuple, Union
from urllib.parse import parse_qsl, quote_plus, urlencode

from ..config import get_config
from ..core.bus import EventBus
from ..core.events import SafeScoreRedirect
from ..core.page import Location
from .base import Controller

logger = logging.getLogger(__name__)


def _form_quote(string, safe="", encoding=None, errors=None) -> str:
    """
    Form-encode like the browser's URLSearchParams.

    quote_plus() keeps "~" and escapes "*"; the browser does the opposite.
    """
    return quote_plus(string, safe="*", encoding=encoding, errors=errors).replace("~", "%7E")


def _set_param(pairs: List[Tuple[str, str]], key: str, value: str) -> List[Tuple[str, str]]:
    """Replace the first occurrence of key in place and drop the rest; append if absent."""
    result = []
    replaced = False
    for k, v in pairs:
        if k != key:
            result.append((k, v))
        elif not replaced:
            result.append((key, value))
            replaced = True
    if not replaced:
        result.append((key, value))
    return result


def filter_params(search: str, key: str, value: str, all_sentinel: str = "all") -> str:
    """
    Compute the query string for a filter choice.

    Args:
        search: Current query string, with or without the leading "?"
        key: Filter parameter name, e.g. "house"
        value: Chosen value; all_sentinel removes the filter

    Returns:
        New query string including the leading "?"

    Examples:
        >>> filter_params("?house=all&year=2024", "house", "red")
        '?house=red&year=2024'
        >>> filter_params("?house=red&year=2024", "house", "all")
        '?year=2024'
    """
    pairs = parse_qsl(search.lstrip("?"), keep_blank_values=True)
    if value != all_sentinel:
        pairs = _set_param(pairs, key, value)
    else:
        pairs = [(k, v) for k, v in pairs if k != key]
    return f"?{urlencode(pairs, quote_via=_form_quote)}"


class FilterController(Controller):
    """Filter control bound to one key/value pair."""

    def __init__(
        self,
        key: str,
        value: str,
        location: Union[Location, Callable[[], str]],
        bus: Optional[EventBus] = None
    ):
        super().__init__(bus)
        self.key = key
        self.value = value
        self.location = location
        self.all_sentinel = get_config().filter.all_sentinel

    def _current_search(self) -> str:
        if callable(self.location):
            return self.location()
        return self.location.search

    def apply(self, key: Optional[str] = None, value: Optional[str] = None) -> str:
        """
        Publish a redirect to the filtered params.

        Defaults to the controller's own key/value.

        Returns:
            The params that were requested
        """
        key = self.key if key is None else key
        value = self.value if value is None else value
        params = filter_params(self._current_search(), key, value, self.all_sentinel)
        logger.info(f"Dispatching safe score redirect to {params}")
        self.bus.emit(SafeScoreRedirect(params=params))
        return params

"""
Tests for the status banner and the safe redirect handler
"""
from sportsday.components.filter import FilterController
from sportsday.components.redirect import SafeRedirect
from sportsday.components.status_show import StatusShow
from sportsday.core.events import UpdateStatus
from sportsday.core.page import Element


def test_status_replaces_content(page):
    banner = page.mount(StatusShow(Element(inner_html="<p>old</p>"), bus=page.bus))
    page.bus.emit(UpdateStatus(status="<b>Saved</b>"))
    assert banner.element.inner_html == "<b>Saved</b>"


def test_last_status_wins(page):
    banner = page.mount(StatusShow(Element(), bus=page.bus))
    page.bus.emit(UpdateStatus(status="one"))
    page.bus.emit(UpdateStatus(status="two"))
    assert banner.element.inner_html == "two"


def test_status_is_inserted_verbatim(page):
    banner = page.mount(StatusShow(Element(), bus=page.bus))
    fragment = "<script>x()</script><p class='a'>&amp;</p>"
    page.bus.emit(UpdateStatus(status=fragment))
    assert banner.element.inner_html == fragment


def test_unmounted_banner_stops_listening(page):
    banner = page.mount(StatusShow(Element(inner_html="kept"), bus=page.bus))
    page.unmount(banner)
    page.bus.emit(UpdateStatus(status="new"))
    assert banner.element.inner_html == "kept"


def test_filter_and_redirect_navigate_page(page):
    """Filter choice flows through the bus to the page location"""
    page.location.search = "?house=all&year=2024"
    page.mount(SafeRedirect(page.location, bus=page.bus))
    house = page.mount(FilterController("house", "red", page.location, bus=page.bus))
    everyone = page.mount(FilterController("house", "all", page.location, bus=page.bus))

    house.apply()
    assert page.location.search == "?house=red&year=2024"
    assert page.location.href == "/scoreboard?house=red&year=2024"

    everyone.apply()
    assert page.location.search == "?year=2024"
    assert page.location.history == [
        "/scoreboard?house=all&year=2024",
        "/scoreboard?house=red&year=2024",
    ]


def test_redirect_to_current_params_is_skipped(page):
    page.location.search = "?year=2024"
    page.mount(SafeRedirect(page.location, bus=page.bus))
    page.mount(FilterController("house", "all", page.location, bus=page.bus)).apply()
    assert page.location.history == []


def test_unmount_all_drops_subscriptions(page):
    page.mount(StatusShow(Element(), bus=page.bus))
    page.mount(SafeRedirect(page.location, bus=page.bus))
    page.unmount_all()
    assert page.controllers == []
    assert page.bus.listener_count("updateStatus") == 0
    assert page.bus.listener_count("doSafeScoreRedirect") == 0


def test_mounting_twice_is_a_noop(page):
    banner = StatusShow(Element(), bus=page.bus)
    page.mount(banner)
    page.mount(banner)
    assert page.controllers == [banner]
    assert page.bus.listener_count("updateStatus") == 1

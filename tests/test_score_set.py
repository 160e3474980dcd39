"""
Tests for the score entry form and its pending/completed status
"""
import pytest

from sportsday.components.score_set import (
    ScoreSetForm,
    SubmissionStatus,
    build_envelope,
    field_id_from_element_id,
)
from sportsday.core.events import ScoreUpdate, ScoreUpdateSubmitted
from sportsday.core.page import Button, Element, Field


def make_form(bus, event_id="100m", status="completed", button=True, fields=None):
    if fields is None:
        fields = [Field(id="row-a-b-evt1", value="5"), Field(id="row-a-b-evt2", value="2")]
    form = ScoreSetForm(
        Element(id=event_id),
        fields,
        button=Button() if button else None,
        status=status,
        bus=bus
    )
    form.connect()
    return form


def test_envelope_from_structural_ids():
    """Scenario: ids row-a-b-evt1=5 and row-a-b-evt2=2"""
    fields = [Field(id="row-a-b-evt1", value="5"), Field(id="row-a-b-evt2", value="2")]
    assert build_envelope(fields) == {"evt1": "5", "evt2": "2"}


def test_explicit_field_id_wins_over_element_id():
    fields = [Field(id="row-a-b-evt1", value="5", field_id="red")]
    assert build_envelope(fields) == {"red": "5"}


def test_colon_separated_ids():
    assert field_id_from_element_id("row:a:b:evt1") == "evt1"


def test_short_id_gives_none_key():
    assert build_envelope([Field(id="row-a", value="1")]) == {None: "1"}


def test_duplicate_field_ids_last_wins():
    fields = [Field(id="x-x-x-red", value="1"), Field(id="y-y-y-red", value="4")]
    assert build_envelope(fields) == {"red": "4"}


def test_submit_publishes_score_update(bus):
    received = []
    bus.subscribe("scoreUpdate", received.append)
    form = make_form(bus)

    update = form.submit()

    assert update == ScoreUpdate(event_id="100m", scores={"evt1": "5", "evt2": "2"})
    assert received[0].detail == update


def test_submit_marks_pending(bus):
    form = make_form(bus)
    form.submit()
    assert form.status is SubmissionStatus.PENDING
    assert form.button.background_color == "yellow"


def test_completion_marks_completed(bus):
    """Scenario: pending form receives the acknowledgement"""
    form = make_form(bus, status="pending")
    bus.emit(ScoreUpdateSubmitted())
    assert form.status is SubmissionStatus.COMPLETED
    assert form.button.background_color == "green"


def test_second_completion_is_noop(bus):
    form = make_form(bus, status="pending")
    bus.emit(ScoreUpdateSubmitted())
    form.button.background_color = "blue"
    bus.emit(ScoreUpdateSubmitted())
    assert form.status is SubmissionStatus.COMPLETED
    assert form.button.background_color == "blue"


def test_completion_never_moves_completed_backward(bus):
    form = make_form(bus, status="completed")
    form.on_completion_signal()
    assert form.status is SubmissionStatus.COMPLETED
    assert form.button.background_color is None


def test_submit_from_completed_returns_to_pending(bus):
    form = make_form(bus)
    form.submit()
    bus.emit(ScoreUpdateSubmitted())
    form.submit()
    assert form.status is SubmissionStatus.PENDING


def test_without_button_submit_keeps_status(bus):
    """No status control means no status change"""
    received = []
    bus.subscribe("scoreUpdate", received.append)
    form = make_form(bus, button=False)
    form.submit()
    assert len(received) == 1
    assert form.status is SubmissionStatus.COMPLETED


def test_without_button_pending_form_still_completes(bus):
    form = make_form(bus, status="pending", button=False)
    bus.emit(ScoreUpdateSubmitted())
    assert form.status is SubmissionStatus.COMPLETED


def test_unkeyed_completion_reaches_every_pending_form(bus):
    """Any acknowledgement completes all pending forms, whichever it names"""
    a = make_form(bus, event_id="100m")
    b = make_form(bus, event_id="relay")
    a.submit()
    b.submit()
    bus.emit(ScoreUpdateSubmitted(event_id="100m"))
    assert a.status is SubmissionStatus.COMPLETED
    assert b.status is SubmissionStatus.COMPLETED


def test_keyed_completion_only_reaches_named_form(bus, default_config):
    default_config.submission.keyed_completion = True
    a = make_form(bus, event_id="100m")
    b = make_form(bus, event_id="relay")
    a.submit()
    b.submit()

    bus.emit(ScoreUpdateSubmitted(event_id="100m"))
    assert a.status is SubmissionStatus.COMPLETED
    assert b.status is SubmissionStatus.PENDING

    # an acknowledgement that names no form still reaches everyone
    bus.emit(ScoreUpdateSubmitted())
    assert b.status is SubmissionStatus.COMPLETED


def test_remount_resets_to_rendered_status(bus):
    form = make_form(bus, status="pending")
    bus.emit(ScoreUpdateSubmitted())
    form.disconnect()
    form.connect()
    assert form.status is SubmissionStatus.PENDING


def test_disconnected_form_ignores_completion(bus):
    form = make_form(bus, status="pending")
    form.disconnect()
    bus.emit(ScoreUpdateSubmitted())
    assert form.status is SubmissionStatus.PENDING
    assert bus.listener_count("scoreUpdateSubmitted") == 0


def test_configured_colors(bus, default_config):
    default_config.status.pending_color = "orange"
    default_config.status.confirmed_color = "teal"
    form = make_form(bus)
    form.submit()
    assert form.button.background_color == "orange"
    bus.emit(ScoreUpdateSubmitted())
    assert form.button.background_color == "teal"


def test_unknown_initial_status_is_rejected(bus):
    with pytest.raises(ValueError):
        ScoreSetForm(Element(id="x"), [], status="failed", bus=bus)


def test_connect_twice_subscribes_once(bus):
    form = make_form(bus, status="pending")
    form.connect()
    assert bus.listener_count("scoreUpdateSubmitted") == 1
    form.disconnect()
    assert bus.listener_count("scoreUpdateSubmitted") == 0

"""
Sportsday Web Application

Flask app with a Socket.IO channel that carries score submissions from the
scoreboard pages to the backend and the acknowledgements back again.
"""

import logging
from typing import Callable, Optional

from flask import Flask, jsonify, request
from flask_socketio import SocketIO, emit, join_room, leave_room

from .. import __version__
from ..components.filter import filter_params
from ..config import get_config, set_config, load_config
from ..core.events import (
    EventPayloadError,
    SCORE_UPDATE,
    SCORE_UPDATE_SUBMITTED,
    UPDATE_STATUS,
    ScoreUpdate,
    ScoreUpdateSubmitted,
    UpdateStatus,
)
from ..core.transport import SubmissionError

logger = logging.getLogger(__name__)

socketio = SocketIO(cors_allowed_origins="*")

SUBMISSION_ERROR = "submissionError"


def _log_submission(update: ScoreUpdate) -> None:
    logger.info(f"Accepted scores for {update.event_id}: {update.scores}")


# Backend that persists submissions (set by main app)
_submission_handler: Callable[[ScoreUpdate], None] = _log_submission


def set_submission_handler(handler: Optional[Callable[[ScoreUpdate], None]]):
    """Set the backend called for every submission. None restores the default."""
    global _submission_handler
    _submission_handler = handler if handler is not None else _log_submission


def accept_submission(data) -> ScoreUpdateSubmitted:
    """
    Validate a submission and hand it to the backend.

    Raises:
        EventPayloadError: If the payload is malformed
        SubmissionError: If the backend refused it
    """
    update = ScoreUpdate.from_dict(data)
    _submission_handler(update)
    return ScoreUpdateSubmitted(event_id=update.event_id)


def broadcast_status(fragment: str, channel: Optional[str] = None) -> None:
    """Push a status fragment to every page, or to one channel."""
    socketio.emit(UPDATE_STATUS, UpdateStatus(status=fragment).to_dict(), to=channel)


# ============ Socket Events ============

def _channel_of(data) -> Optional[str]:
    """Channel name from a join/leave payload, or None if there is none."""
    if not isinstance(data, dict):
        return None
    channel = data.get("channel")
    return channel if isinstance(channel, str) and channel else None


@socketio.on("join")
def on_join(data):
    """Subscribe the client to a channel, e.g. one event's scoreboard."""
    channel = _channel_of(data)
    if channel is None:
        emit(SUBMISSION_ERROR, {"error": "No channel provided"})
        return
    join_room(channel)
    logger.debug(f"Client {request.sid} joined {channel}")


@socketio.on("leave")
def on_leave(data):
    channel = _channel_of(data)
    if channel is None:
        emit(SUBMISSION_ERROR, {"error": "No channel provided"})
        return
    leave_room(channel)


@socketio.on(SCORE_UPDATE)
def on_score_update(data):
    """Submission sent over the socket; the acknowledgement goes back to the sender."""
    event_id = data.get("event_id") if isinstance(data, dict) else None
    try:
        ack = accept_submission(data)
    except EventPayloadError as e:
        logger.warning(f"Malformed submission: {e}")
        emit(SUBMISSION_ERROR, {"event_id": event_id, "error": str(e)})
        return
    except SubmissionError as e:
        logger.error(f"Submission for {event_id} failed: {e}")
        emit(SUBMISSION_ERROR, {"event_id": event_id, "error": str(e)})
        return

    emit(SCORE_UPDATE_SUBMITTED, ack.to_dict())
    template = get_config().status.completed_template
    if template:
        emit(UPDATE_STATUS, UpdateStatus(status=template.format(event_id=ack.event_id)).to_dict())


def create_app(config_path=None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_path: Optional path to config file

    Returns:
        Configured Flask application
    """
    if config_path is not None:
        set_config(load_config(config_path))

    app = Flask(__name__)

    config = get_config()
    app.config["SECRET_KEY"] = config.web.secret_key
    app.config["DEBUG"] = config.web.debug

    socketio.init_app(app)

    # ============ Routes ============

    @app.route("/api/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok", "version": __version__})

    @app.route("/api/scores", methods=["POST"])
    def submit_scores():
        """Submit one event's scores over HTTP."""
        data = request.get_json(silent=True)
        if not data:
            return jsonify({"error": "No data provided"}), 400

        try:
            ack = accept_submission(data)
        except EventPayloadError as e:
            return jsonify({"error": str(e)}), 400
        except SubmissionError as e:
            logger.error(f"Submission failed: {e}")
            return jsonify({"error": str(e)}), 502

        socketio.emit(SCORE_UPDATE_SUBMITTED, ack.to_dict(), to=_channel_of(data))
        return jsonify({"status": "ok", **ack.to_dict()})

    @app.route("/api/status", methods=["POST"])
    def update_status():
        """Broadcast a status fragment to the status banners."""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Body must be a JSON object"}), 400

        fragment = data.get("status")
        if not isinstance(fragment, str):
            return jsonify({"error": "'status' must be a string"}), 400

        broadcast_status(fragment, _channel_of(data))
        return jsonify({"status": "ok"})

    @app.route("/api/filter", methods=["GET"])
    def filter_redirect():
        """Compute the redirect params for a filter choice."""
        key = request.args.get("key")
        value = request.args.get("value")
        if not key or value is None:
            return jsonify({"error": "'key' and 'value' are required"}), 400

        params = filter_params(
            request.args.get("params", ""),
            key,
            value,
            get_config().filter.all_sentinel
        )
        return jsonify({"params": params})

    return app

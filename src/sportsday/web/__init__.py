"""Sportsday Web Interface"""

from .app import create_app, socketio, set_submission_handler

__all__ = ["create_app", "socketio", "set_submission_handler"]

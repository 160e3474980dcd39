"""
Sportsday - Live Sports Day Scoreboard

Page-side control layer for a live sports-day scoreboard: independently
mounted controllers that read and write scores, track submission state and
keep dependent displays consistent through a shared event bus.
"""

__version__ = "1.0.0"
__author__ = "Sportsday Contributors"

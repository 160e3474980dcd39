"""
Sportsday Configuration Management

Loads settings from config/default.json with environment variable overrides.
"""

import os
import json
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class WebConfig:
    host: str = "0.0.0.0"
    port: int = 8080
    debug: bool = False
    secret_key: str = "sportsday-secret-key"


@dataclass
class DisplayConfig:
    default_score: str = "0"  # "Nothing" option of the score dropdowns


@dataclass
class FilterConfig:
    all_sentinel: str = "all"


@dataclass
class StatusConfig:
    pending_color: str = "yellow"
    confirmed_color: str = "green"
    completed_template: str = ""  # e.g. "<p>Saved scores for {event_id}</p>"


@dataclass
class SubmissionConfig:
    keyed_completion: bool = False


@dataclass
class Config:
    web: WebConfig = field(default_factory=WebConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    filter: FilterConfig = field(default_factory=FilterConfig)
    status: StatusConfig = field(default_factory=StatusConfig)
    submission: SubmissionConfig = field(default_factory=SubmissionConfig)
    debug: bool = False


def _env_flag(name: str) -> bool:
    return os.environ[name].lower() in ("true", "1", "yes")


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from JSON file with environment variable overrides.

    Priority (highest to lowest):
    1. Environment variables (SPORTSDAY_*)
    2. Config file values
    3. Default values

    Raises:
        ValueError: If the config file exists but is not valid JSON.
    """
    config = Config()

    if config_path is None:
        base_dir = Path(__file__).parent.parent
        config_path = base_dir / "config" / "default.json"
    else:
        config_path = Path(config_path)

    if config_path.exists():
        with open(config_path, "r") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid config file {config_path}: {e}") from e

        if "web" in data:
            config.web.host = data["web"].get("host", config.web.host)
            config.web.port = data["web"].get("port", config.web.port)
            config.web.debug = data["web"].get("debug", config.web.debug)
            config.web.secret_key = data["web"].get("secret_key", config.web.secret_key)

        if "display" in data:
            config.display.default_score = str(
                data["display"].get("default_score", config.display.default_score)
            )

        if "filter" in data:
            config.filter.all_sentinel = data["filter"].get("all_sentinel", config.filter.all_sentinel)

        if "status" in data:
            config.status.pending_color = data["status"].get("pending_color", config.status.pending_color)
            config.status.confirmed_color = data["status"].get("confirmed_color", config.status.confirmed_color)
            config.status.completed_template = data["status"].get(
                "completed_template", config.status.completed_template
            )

        if "submission" in data:
            config.submission.keyed_completion = data["submission"].get(
                "keyed_completion", config.submission.keyed_completion
            )

        config.debug = data.get("debug", config.debug)

    # Environment variable overrides
    if os.environ.get("SPORTSDAY_WEB_HOST"):
        config.web.host = os.environ["SPORTSDAY_WEB_HOST"]
    if os.environ.get("SPORTSDAY_WEB_PORT"):
        config.web.port = int(os.environ["SPORTSDAY_WEB_PORT"])
    if os.environ.get("SPORTSDAY_DEBUG"):
        config.debug = _env_flag("SPORTSDAY_DEBUG")
    if os.environ.get("SPORTSDAY_KEYED_COMPLETION"):
        config.submission.keyed_completion = _env_flag("SPORTSDAY_KEYED_COMPLETION")
    if os.environ.get("SPORTSDAY_PENDING_COLOR"):
        config.status.pending_color = os.environ["SPORTSDAY_PENDING_COLOR"]
    if os.environ.get("SPORTSDAY_CONFIRMED_COLOR"):
        config.status.confirmed_color = os.environ["SPORTSDAY_CONFIRMED_COLOR"]

    return config


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global config instance, loading it if necessary."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: Optional[Config]) -> None:
    """Set the global config instance (None forces a reload on next access)."""
    global _config
    _config = config

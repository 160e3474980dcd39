#!/usr/bin/env python3
"""
Sportsday - Live Sports Day Scoreboard

Main entry point: serves the score submission channel and API.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add sportsday package to path
sys.path.insert(0, str(Path(__file__).parent))

from sportsday import __version__
from sportsday.config import load_config, set_config
from sportsday.web.app import create_app, socketio


def setup_logging(debug: bool = False):
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Sportsday - Live Sports Day Scoreboard"
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to config file",
        default=None
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--host",
        help="Web server host (default: 0.0.0.0)",
        default=None
    )
    parser.add_argument(
        "--port", "-p",
        type=int,
        help="Web server port (default: 8080)",
        default=None
    )
    parser.add_argument(
        "--keyed-completion",
        action="store_true",
        help="Only complete the form an acknowledgement names"
    )

    args = parser.parse_args()

    config = load_config(args.config)

    # Apply command line overrides
    if args.debug:
        config.debug = True
    if args.host:
        config.web.host = args.host
    if args.port:
        config.web.port = args.port
    if args.keyed_completion:
        config.submission.keyed_completion = True

    set_config(config)

    setup_logging(config.debug)
    logger = logging.getLogger("sportsday")

    logger.info("=" * 50)
    logger.info(f"Sportsday Scoreboard v{__version__}")
    logger.info("=" * 50)

    app = create_app()

    logger.info(f"Starting web server on http://{config.web.host}:{config.web.port}")
    logger.info("Press Ctrl+C to stop")

    try:
        socketio.run(
            app,
            host=config.web.host,
            port=config.web.port,
            debug=False,
            use_reloader=False,
            allow_unsafe_werkzeug=True
        )
    except KeyboardInterrupt:
        logger.info("Shutting down...")

    logger.info("Sportsday stopped")


if __name__ == "__main__":
    main()

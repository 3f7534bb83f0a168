#!/usr/bin/env python3
"""
Artwork Browser - Main entry point
"""
import sys

from simple_logger import Slogger
from artwork_browser.config import load_config
from artwork_browser.errors import ConfigError
from artwork_browser.ui.app import ArtworkBrowserApp


def main():

    Slogger.log("Starting Artwork Browser application...")

    try:
        config = load_config()
    except ConfigError as e:
        Slogger.exception(e, "Invalid configuration")
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    app = ArtworkBrowserApp(config)
    app.run()
    return 0

if __name__ == "__main__":
    sys.exit(main())

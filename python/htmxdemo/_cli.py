"""CLI entry point that runs the development server."""

import sys

from htmxdemo.app import create_app
from htmxdemo.config import Settings
from htmxdemo.errors import HtmxDemoError


def main():
    """Load settings from the environment and serve the demo."""
    try:
        settings = Settings.from_env()
        app = create_app(settings)
    except HtmxDemoError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    main()

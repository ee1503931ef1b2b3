"""Application entry point."""

from __future__ import annotations

import logging
import sys

from hotseat.ui.settings import AppSettings


def main() -> None:
    """Launch the Hotseat application."""
    from hotseat.ui.bootstrap import run_application

    settings = AppSettings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run_application(settings=settings))


if __name__ == "__main__":
    main()

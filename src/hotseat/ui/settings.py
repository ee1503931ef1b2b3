"""User-configurable settings and how they are applied to the window."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_LOGGER = logging.getLogger(__name__)

LOG_LEVEL_ENV = "HOTSEAT_LOG_LEVEL"


def is_log_level(name: str) -> bool:
    """Is *name* a level the :mod:`logging` module knows?"""
    return isinstance(logging.getLevelName(name), int)


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True

    # Diagnostics
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppSettings:
        """Defaults, with ``HOTSEAT_LOG_LEVEL`` overriding the log level.

        Unknown level names are ignored and the default is kept.
        """
        env = os.environ if environ is None else environ
        settings = cls()
        level = env.get(LOG_LEVEL_ENV, "").strip().upper()
        if not level:
            return settings
        if is_log_level(level):
            settings.log_level = level
        else:
            _LOGGER.warning(
                "Ignoring %s=%r: unknown log level, using %s",
                LOG_LEVEL_ENV,
                level,
                settings.log_level,
            )
        return settings


def apply_settings(host: Any, settings: AppSettings) -> None:
    """Push *settings* into the board scene of *host* (a ``MainWindow``)."""
    from hotseat.ui.styles.theme import theme_by_name

    scene = host.board_view.board_scene
    scene.set_theme(theme_by_name(settings.board_theme))
    scene.set_show_coordinates(settings.show_coordinates)
    scene.set_show_legal_moves(settings.show_legal_moves)

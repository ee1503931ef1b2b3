"""Board colour presets and the application stylesheet."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

# Overlays are shared by every preset; only the square colours differ.
_SELECTED = (255, 255, 0, 100)
_MOVE = (0, 0, 0, 40)
_CAPTURE = (220, 60, 20, 90)
_CHECK = (255, 0, 0, 120)


@dataclass(frozen=True)
class BoardTheme:
    """Square colours plus translucent overlays for one board look.

    Coordinates are drawn in the colour of the opposite square shade.
    """

    light_square: QColor
    dark_square: QColor
    highlight_selected: QColor
    highlight_move: QColor
    highlight_capture: QColor
    highlight_check: QColor
    coord_light: QColor  # on dark squares
    coord_dark: QColor  # on light squares

    @classmethod
    def from_squares(
        cls, light: tuple[int, int, int], dark: tuple[int, int, int]
    ) -> BoardTheme:
        return cls(
            light_square=QColor(*light),
            dark_square=QColor(*dark),
            highlight_selected=QColor(*_SELECTED),
            highlight_move=QColor(*_MOVE),
            highlight_capture=QColor(*_CAPTURE),
            highlight_check=QColor(*_CHECK),
            coord_light=QColor(*dark),
            coord_dark=QColor(*light),
        )

    @classmethod
    def default(cls) -> BoardTheme:
        return cls.from_squares((240, 217, 181), (181, 136, 99))

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls.from_squares((222, 227, 230), (140, 162, 173))

    @classmethod
    def green(cls) -> BoardTheme:
        return cls.from_squares((236, 238, 220), (112, 149, 120))


THEMES: dict[str, BoardTheme] = {
    "Classic": BoardTheme.default(),
    "Blue": BoardTheme.blue(),
    "Green": BoardTheme.green(),
}


def theme_by_name(name: str) -> BoardTheme:
    """Look up a preset, falling back to the classic theme."""
    return THEMES.get(name, BoardTheme.default())


# Stylesheet for the window chrome around the board.
APP_STYLE = """
QMainWindow { background: #262421; }
QLabel { color: #dcdcdc; }
QPushButton {
    background: #3a3733;
    color: #dcdcdc;
    border: 1px solid #5a5650;
    border-radius: 3px;
    padding: 8px 12px;
}
QPushButton:hover { background: #4b4843; }
QPushButton:pressed { background: #6b8f3e; }
"""

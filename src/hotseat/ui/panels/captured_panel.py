"""CapturedPanel — rows of captured piece glyphs, one per color."""

from __future__ import annotations

from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from hotseat.core.enums import Color
from hotseat.core.piece import Piece


class CapturedPanel(QWidget):
    """Shows the pieces each side has lost, in capture order."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        glyph_font = QFont("DejaVu Sans", 20)
        self._titles: dict[Color, QLabel] = {}
        self._rows: dict[Color, QLabel] = {}
        for color in (Color.WHITE, Color.BLACK):
            title = QLabel(f"Captured {color} pieces")
            row = QLabel()
            row.setFont(glyph_font)
            row.setWordWrap(True)
            layout.addWidget(title)
            layout.addWidget(row)
            self._titles[color] = title
            self._rows[color] = row
        layout.addStretch(1)

    def set_captured(self, captured: dict[Color, list[Piece]]) -> None:
        """*captured* is keyed by the color of the captured pieces."""
        for color, row in self._rows.items():
            row.setText("".join(p.symbol for p in captured.get(color, [])))

    def text(self, color: Color) -> str:
        return self._rows[color].text()

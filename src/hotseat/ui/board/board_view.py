"""BoardView — keeps the board scene scaled to the widget."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QPainter, QResizeEvent
from PyQt6.QtWidgets import QGraphicsView, QSizePolicy, QWidget

from hotseat.ui.board.board_scene import BoardScene


class BoardView(QGraphicsView):
    """Non-scrolling view over a :class:`BoardScene`.

    Re-emits the scene's ``square_clicked(int, int)`` so the window only needs
    to talk to the view.
    """

    square_clicked = pyqtSignal(int, int)

    def __init__(self, parent: QWidget | None = None) -> None:
        board_scene = BoardScene()
        super().__init__(board_scene, parent)
        self._board_scene = board_scene
        board_scene.square_clicked.connect(self.square_clicked)

        for policy_setter in (
            self.setHorizontalScrollBarPolicy,
            self.setVerticalScrollBarPolicy,
        ):
            policy_setter(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setRenderHint(QPainter.RenderHint.TextAntialiasing)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        side = BoardScene.TILE * 4
        self.setMinimumSize(side, side)

    @property
    def board_scene(self) -> BoardScene:
        return self._board_scene

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self.fitInView(self._board_scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)

"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from hotseat.core.rules import Evaluation
from hotseat.game.controller import GameController
from hotseat.game.state import GameState, MoveOutcome
from hotseat.ui.board.board_view import BoardView
from hotseat.ui.panels.captured_panel import CapturedPanel
from hotseat.ui.settings import AppSettings, apply_settings


class MainWindow(QMainWindow):
    """Main application window: board, status line, captures, reset."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        controller: GameController | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Hotseat")
        self.setMinimumSize(720, 520)
        self.resize(900, 660)

        self._controller = controller or GameController()
        self._settings = settings or AppSettings()

        self._setup_ui()
        self._connect_signals()
        apply_settings(self, self._settings)
        self._refresh()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def captured_panel(self) -> CapturedPanel:
        return self._captured_panel

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        # Board (left)
        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=3)

        # Right panel
        right = QVBoxLayout()
        right.setSpacing(6)

        self._status_label = QLabel()
        self._status_label.setFont(QFont("Helvetica", 14, QFont.Weight.Bold))
        right.addWidget(self._status_label)

        self._captured_panel = CapturedPanel()
        right.addWidget(self._captured_panel, stretch=1)

        self._btn_reset = QPushButton("Reset Game")
        self._btn_reset.setMinimumHeight(36)
        right.addWidget(self._btn_reset)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(240)
        root.addWidget(right_widget)

    def _connect_signals(self) -> None:
        self._board_view.square_clicked.connect(self._on_square_clicked)
        self._btn_reset.clicked.connect(self._on_reset_clicked)

        events = self._controller.events
        events.on_move.append(self._on_move)
        events.on_selection_changed.append(self._on_state_changed)
        events.on_reset.append(self._on_state_changed)
        events.on_game_over.append(self._on_game_over)

    # ── Handlers ─────────────────────────────────────────────────────────

    def _on_square_clicked(self, row: int, col: int) -> None:
        self._controller.click((row, col))

    def _on_reset_clicked(self) -> None:
        self._controller.reset()

    def _on_move(self, _outcome: MoveOutcome, _state: GameState) -> None:
        self._refresh()

    def _on_state_changed(self, _state: GameState) -> None:
        self._refresh()

    def _on_game_over(self, evaluation: Evaluation) -> None:
        self._status_label.setText(evaluation.message)

    def _refresh(self) -> None:
        state = self._controller.state
        self._board_view.board_scene.set_game(self._controller.board, state)
        self._captured_panel.set_captured(state.captured)
        self._status_label.setText(state.status_message)

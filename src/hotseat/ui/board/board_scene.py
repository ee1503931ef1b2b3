"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from hotseat.core.enums import Color, GameStatus
from hotseat.core.types import ALL_SQUARES, BOARD_SIZE, FILES, Square
from hotseat.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from hotseat.core.board import Board
    from hotseat.core.piece import Piece
    from hotseat.game.state import GameState


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece glyphs.

    The scene holds no game logic: it redraws from whatever board and state
    it is handed and reports clicks as ``(row, col)``.

    Signals:
        square_clicked(int, int): Emitted when the user clicks a square.
    """

    square_clicked = pyqtSignal(int, int)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._board: Board | None = None
        self._state: GameState | None = None
        self._show_coordinates = True
        self._show_legal_moves = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_game(self, board: Board, state: GameState) -> None:
        """Redraw pieces and highlights from *board* and *state*."""
        self._board = board
        self._state = state
        self._sync_pieces()
        self._sync_highlights()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_highlights()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move highlights."""
        self._show_legal_moves = visible
        self._sync_highlights()

    def piece_glyph(self, sq: Square) -> str | None:
        """Glyph currently drawn on *sq*, if any."""
        item = self._piece_items.get(sq)
        return item.text() if item is not None else None

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Helvetica", max(9, t // 8))

        for row, col in ALL_SQUARES:
            is_light = (row + col) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(col * t, row * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[(row, col)] = rect

            coord_color = self._theme.coord_dark if is_light else self._theme.coord_light

            # Rank numbers (left edge)
            if col == 0:
                self._add_coord(str(BOARD_SIZE - row), font, coord_color, 2, row * t + 1)

            # File letters (bottom edge)
            if row == BOARD_SIZE - 1:
                self._add_coord(
                    FILES[col], font, coord_color, col * t + t - 12, row * t + t - 16
                )

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord(
        self, label: str, font: QFont, color: QColor, x: float, y: float
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._board is None:
            return

        for sq, piece in self._board.occupied():
            item = self._make_piece_item(piece)
            self._place_centered(item, sq)
            self.addItem(item)
            self._piece_items[sq] = item

    def _make_piece_item(self, piece: Piece) -> QGraphicsSimpleTextItem:
        item = QGraphicsSimpleTextItem(piece.symbol)
        item.setFont(QFont("DejaVu Sans", int(self.TILE * 0.6)))
        fill = QColor(255, 255, 255) if piece.color == Color.WHITE else QColor(0, 0, 0)
        item.setBrush(QBrush(fill))
        item.setPen(QPen(QColor(40, 40, 40), 1))
        item.setZValue(1)
        return item

    def _place_centered(self, item: QGraphicsSimpleTextItem, sq: Square) -> None:
        t = self.TILE
        row, col = sq
        bounds = item.boundingRect()
        item.setPos(
            col * t + (t - bounds.width()) / 2,
            row * t + (t - bounds.height()) / 2,
        )

    # ── Selection / highlights ───────────────────────────────────────────

    def _sync_highlights(self) -> None:
        self._clear_items(self._highlight_items)
        if self._board is None or self._state is None:
            return

        state = self._state
        if state.evaluation.status in (GameStatus.CHECK, GameStatus.CHECKMATE):
            king_sq = self._board.find_king(state.side_to_move)
            if king_sq is not None:
                self._add_highlight(king_sq, self._theme.highlight_check, 0.6)

        if state.selected is None:
            return

        self._add_highlight(state.selected, self._theme.highlight_selected, 0.7)
        if not self._show_legal_moves:
            return
        for sq in state.legal_targets:
            color = (
                self._theme.highlight_move
                if self._board.is_empty(sq)
                else self._theme.highlight_capture
            )
            self._add_highlight(sq, color, 0.8)

    def _add_highlight(self, sq: Square, color: QColor, z: float) -> None:
        rect = self._make_highlight(sq, color)
        rect.setZValue(z)
        self._highlight_items.append(rect)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is not None:
            self.square_clicked.emit(*sq)
        super().mousePressEvent(event)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        return (row, col)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        row, col = sq
        rect = QGraphicsRectItem(col * t, row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect

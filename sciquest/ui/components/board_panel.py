"""Component for the board-game variant: a draggable word-search grid."""

from __future__ import annotations

from PySide6.QtCore import QPointF, QRectF, QSize, Qt
from PySide6.QtGui import QColor, QFont, QMouseEvent, QPainter, QPaintEvent, QPen
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QSizePolicy, QVBoxLayout, QWidget

from sciquest.constants.ui_constants import GRID_CELL_MIN_SIZE, SUBMIT_BUTTON
from sciquest.core.session_controller import SessionController
from sciquest.styling.color_palette import ColorPalette, Theme
from sciquest.styling.styles import Styles
from sciquest.ui.components.question_panel import SessionHeader


class LetterGridWidget(QWidget):
    """Paints the controller's current grid and turns pointer drags into cell events."""

    def __init__(self, controller: SessionController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self.theme = Theme.DARK
        self.setMouseTracking(False)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)

    def _grid_size(self) -> int:
        board = self.controller.board
        return board.grid.size if board is not None else 0

    def minimumSizeHint(self) -> QSize:
        size = max(self._grid_size(), 1) * GRID_CELL_MIN_SIZE
        return QSize(size, size)

    def _cell_extent(self) -> float:
        size = self._grid_size()
        if size == 0:
            return 0.0
        return min(self.width(), self.height()) / size

    def _origin(self) -> QPointF:
        extent = self._cell_extent() * self._grid_size()
        return QPointF((self.width() - extent) / 2, (self.height() - extent) / 2)

    def cell_at(self, point: QPointF) -> int | None:
        """Map a widget position to a flat cell index, or None outside the grid."""
        size = self._grid_size()
        extent = self._cell_extent()
        if size == 0 or extent <= 0:
            return None
        origin = self._origin()
        col = int((point.x() - origin.x()) // extent)
        row = int((point.y() - origin.y()) // extent)
        if not (0 <= row < size and 0 <= col < size):
            return None
        return row * size + col

    # --- Pointer events ---

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.LeftButton:
            return
        index = self.cell_at(event.position())
        if index is None:
            return
        self.controller.on_cell_down(index)
        self._selection_changed()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        board = self.controller.board
        if board is None or not board.tracker.is_dragging:
            return
        index = self.cell_at(event.position())
        if index is not None and self.controller.on_cell_enter(index):
            self._selection_changed()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.LeftButton:
            self._end_drag()

    def leaveEvent(self, event) -> None:
        self._end_drag()
        super().leaveEvent(event)

    def _end_drag(self) -> None:
        board = self.controller.board
        if board is None or not board.tracker.is_dragging:
            return
        self.controller.on_drag_end()
        self._selection_changed()

    def _selection_changed(self) -> None:
        self.update()
        panel = self.parent()
        if isinstance(panel, BoardPanel):
            panel.refresh_selection()

    # --- Painting ---

    def paintEvent(self, event: QPaintEvent) -> None:
        board = self.controller.board
        if board is None:
            return
        size = board.grid.size
        extent = self._cell_extent()
        origin = self._origin()
        selected = set(board.tracker.selection)

        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        font = QFont(self.font())
        font.setPointSizeF(max(extent * 0.4, 6.0))
        font.setBold(True)
        painter.setFont(font)

        idle = QColor(ColorPalette.CELL_IDLE.get(self.theme))
        active = QColor(ColorPalette.CELL_SELECTED.get(self.theme))
        border = QPen(QColor(ColorPalette.BORDER_PRIMARY.get(self.theme)))
        text_idle = QColor(ColorPalette.TEXT_PRIMARY.get(self.theme))
        text_active = QColor(ColorPalette.BACKGROUND_PRIMARY.get(self.theme))

        for index, letter in enumerate(board.grid.flat()):
            row, col = divmod(index, size)
            rect = QRectF(origin.x() + col * extent, origin.y() + row * extent, extent, extent).adjusted(1, 1, -1, -1)
            is_selected = index in selected
            painter.setPen(border)
            painter.setBrush(active if is_selected else idle)
            painter.drawRoundedRect(rect, 4, 4)
            painter.setPen(text_active if is_selected else text_idle)
            painter.drawText(rect, Qt.AlignCenter, letter)
        painter.end()


class BoardPanel(QWidget):
    """Prompt, letter grid and the word currently picked out of it."""

    def __init__(self, controller: SessionController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.header = SessionHeader(self)
        layout.addWidget(self.header)

        self.prompt_label = QLabel("", self)
        self.prompt_label.setWordWrap(True)
        self.prompt_label.setAlignment(Qt.AlignCenter)
        self.prompt_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.prompt_label)

        self.grid_widget = LetterGridWidget(self.controller, self)
        layout.addWidget(self.grid_widget, stretch=1)

        self.candidate_label = QLabel("", self)
        self.candidate_label.setAlignment(Qt.AlignCenter)
        self.candidate_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.candidate_label)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.submit_button = QPushButton(SUBMIT_BUTTON, self)
        self.submit_button.clicked.connect(self._handle_submit)
        button_row.addWidget(self.submit_button)
        layout.addLayout(button_row)

    def refresh(self) -> None:
        question = self.controller.current_question
        if question is None:
            return
        self.header.refresh(self.controller)
        self.prompt_label.setText(question.prompt)
        self.grid_widget.updateGeometry()
        self.grid_widget.update()
        self.refresh_selection()

    def refresh_selection(self) -> None:
        board = self.controller.board
        if board is not None and board.tracker.is_dragging:
            word = board.tracker.selected_word()
        else:
            word = self.controller.draft
        self.candidate_label.setText(word)
        self.submit_button.setEnabled(self.controller.can_submit)

    def update_timer(self, remaining: int) -> None:
        self.header.update_timer(remaining)

    def _handle_submit(self) -> None:
        if not self.submit_button.isEnabled():
            return
        self.controller.submit_answer(self.controller.draft)

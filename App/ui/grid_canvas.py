"""Custom widget drawing the pattern grid and turning mouse drags into strokes."""

from typing import Iterable, Optional, Sequence, Tuple

from PyQt6 import QtWidgets
from PyQt6.QtCore import QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QColor, QImage, QPainter, QPen, QPixmap

from image_processing.utils import apply_placement, fit_rect
from models import GridSize, Placement
from ui.styles import GRID, SIZES


class GridCanvas(QtWidgets.QWidget):
    """Draws a grid of palette ids, optionally with a reference image on top.

    AIDEV-NOTE: The canvas never edits the grid. It reports cells under the
    mouse through signals and the main window feeds them to PatternSession.
    """

    stroke_started = pyqtSignal(int, int)  # row, col
    stroke_moved = pyqtSignal(int, int)  # row, col
    stroke_finished = pyqtSignal()
    cell_hovered = pyqtSignal(int, int)  # row, col

    def __init__(self, cell_size: int = 10, editable: bool = True, parent=None):
        super().__init__(parent)
        self.cell_size = cell_size
        self.editable = editable
        self.setMouseTracking(True)
        self.setMinimumSize(300, 300)

        self.grid: Sequence[Sequence[int]] = ((0,),)
        self.palette: Sequence[str] = ("#FFFFFF",)

        # Reference image overlay (edit view)
        self.reference: Optional[QPixmap] = None
        self.reference_opacity = 0.4
        self.placement = Placement()

        # Row highlighting (read view), storage index of the current row
        self.highlight_row: Optional[int] = None
        self.worked_rows: "frozenset[int]" = frozenset()  # storage indices

        self._image: Optional[QImage] = None
        self._dragging = False

    # === Data ===

    def set_pattern(self, grid: Sequence[Sequence[int]], palette: Sequence[str]):
        """Show a new grid/palette snapshot."""
        self.grid = grid
        self.palette = palette
        self._image = None
        self.updateGeometry()
        self.update()

    def set_reference(self, pixmap: Optional[QPixmap], opacity: float = 0.4):
        self.reference = pixmap
        self.reference_opacity = opacity
        self.update()

    def set_reference_opacity(self, opacity: float):
        self.reference_opacity = opacity
        self.update()

    def set_placement(self, placement: Placement):
        self.placement = placement
        self.update()

    def set_highlight_row(self, grid_row_index: Optional[int], worked_rows: "Iterable[int]" = ()):
        self.highlight_row = grid_row_index
        self.worked_rows = frozenset(worked_rows)
        self.update()

    @property
    def size_cells(self) -> GridSize:
        return GridSize(row=len(self.grid), col=len(self.grid[0]))

    def sizeHint(self):
        size = self.size_cells
        hint = super().sizeHint()
        hint.setWidth(size.col * self.cell_size + 2 * SIZES.GRID_PADDING)
        hint.setHeight(size.row * self.cell_size + 2 * SIZES.GRID_PADDING)
        return hint

    # === Geometry ===

    def _cell_pixels(self) -> float:
        """Side length of one cell on screen, fitted to the widget."""
        size = self.size_cells
        available_width = self.width() - 2 * SIZES.GRID_PADDING
        available_height = self.height() - 2 * SIZES.GRID_PADDING
        return max(1.0, min(available_width / size.col, available_height / size.row))

    def _grid_rect(self) -> QRectF:
        size = self.size_cells
        cell = self._cell_pixels()
        width = size.col * cell
        height = size.row * cell
        return QRectF((self.width() - width) / 2, (self.height() - height) / 2, width, height)

    def cell_at(self, x: float, y: float) -> Optional[Tuple[int, int]]:
        """Grid cell (row, col) under a widget position, or None outside."""
        rect = self._grid_rect()
        if not rect.contains(x, y):
            return None
        cell = self._cell_pixels()
        size = self.size_cells
        row = min(int((y - rect.top()) / cell), size.row - 1)
        col = min(int((x - rect.left()) / cell), size.col - 1)
        return row, col

    # === Rendering ===

    def _grid_image(self) -> QImage:
        """One pixel per cell; scaled up without smoothing when drawn."""
        if self._image is None:
            size = self.size_cells
            colors = [QColor(color).rgb() for color in self.palette]
            image = QImage(size.col, size.row, QImage.Format.Format_RGB32)
            for r, row in enumerate(self.grid):
                for c, cell in enumerate(row):
                    image.setPixel(c, r, colors[cell] if cell < len(colors) else 0)
            self._image = image
        return self._image

    def paintEvent(self, event):
        """Render grid, reference overlay, highlight and grid lines."""
        painter = QPainter(self)
        painter.fillRect(self.rect(), GRID.BACKGROUND)

        rect = self._grid_rect()
        painter.drawImage(rect, self._grid_image())

        if self.reference is not None:
            self._draw_reference(painter, rect)

        if self.highlight_row is not None:
            self._draw_row_highlight(painter, rect)

        self._draw_grid_lines(painter, rect)
        painter.end()

    def _draw_reference(self, painter: QPainter, rect: QRectF):
        # AIDEV-NOTE: Same fit/placement maths as the converter, so the
        # overlay shows exactly where the conversion will sample
        size = self.size_cells
        placed = apply_placement(
            fit_rect(self.reference.width(), self.reference.height(), size),
            self.placement,
        )
        cell = self._cell_pixels()
        target = QRectF(
            rect.left() + placed.x * cell,
            rect.top() + placed.y * cell,
            placed.width * cell,
            placed.height * cell,
        )
        painter.save()
        painter.setClipRect(rect)
        painter.setOpacity(self.reference_opacity)
        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
        painter.drawPixmap(target, self.reference, QRectF(self.reference.rect()))
        painter.restore()

    def _draw_row_highlight(self, painter: QPainter, rect: QRectF):
        cell = self._cell_pixels()
        row_top = rect.top() + self.highlight_row * cell

        for index in self.worked_rows:
            painter.fillRect(
                QRectF(rect.left(), rect.top() + index * cell, rect.width(), cell),
                GRID.WORKED_ROW_SHADE,
            )

        painter.setPen(QPen(GRID.CURRENT_ROW, 3))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawRect(QRectF(rect.left(), row_top, rect.width(), cell))

    def _draw_grid_lines(self, painter: QPainter, rect: QRectF):
        cell = self._cell_pixels()
        if cell < 4:
            return  # lines would hide the cells
        size = self.size_cells
        minor = QPen(GRID.GRID_LINE, 1)
        major = QPen(GRID.GRID_LINE_MAJOR, 1)

        for c in range(size.col + 1):
            painter.setPen(major if c % SIZES.MAJOR_LINE_EVERY == 0 else minor)
            x = rect.left() + c * cell
            painter.drawLine(int(x), int(rect.top()), int(x), int(rect.bottom()))

        for r in range(size.row + 1):
            # Major lines count from the bottom row, the way rows are read
            painter.setPen(major if (size.row - r) % SIZES.MAJOR_LINE_EVERY == 0 else minor)
            y = rect.top() + r * cell
            painter.drawLine(int(rect.left()), int(y), int(rect.right()), int(y))

    # === Mouse ===

    def mousePressEvent(self, event):
        if not self.editable or event.button() != Qt.MouseButton.LeftButton:
            return
        cell = self.cell_at(event.position().x(), event.position().y())
        if cell is None:
            return
        self._dragging = True
        self.stroke_started.emit(*cell)

    def mouseMoveEvent(self, event):
        cell = self.cell_at(event.position().x(), event.position().y())
        if cell is None:
            return
        self.cell_hovered.emit(*cell)
        if self._dragging:
            self.stroke_moved.emit(*cell)

    def mouseReleaseEvent(self, event):
        if self._dragging and event.button() == Qt.MouseButton.LeftButton:
            self._dragging = False
            self.stroke_finished.emit()

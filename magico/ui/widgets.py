"""Mixer screen widgets: color picker cards, gradient ratio slider, preview card, notice."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, QRectF, Signal
from PySide6.QtGui import QColor, QLinearGradient, QPainter, QPainterPath
from PySide6.QtWidgets import (
    QColorDialog,
    QFrame,
    QGraphicsDropShadowEffect,
    QLabel,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from magico.core.mixer import BLACK, Color, clamp_ratio, ratio_percent
from magico.ui.colors import ThemeColors

SLIDER_STEPS = 1000


def to_qcolor(color: Color) -> QColor:
    """Convert a mixer color to QColor, clamping out-of-gamut channels."""
    r, g, b = (max(0.0, min(1.0, c)) for c in color.as_tuple())
    return QColor.fromRgbF(r, g, b)


def from_qcolor(qcolor: QColor) -> Color:
    r, g, b, _ = qcolor.getRgbF()
    return Color(r, g, b)


def _apply_shadow(widget: QWidget, blur: int = 18, alpha: int = 40) -> None:
    shadow = QGraphicsDropShadowEffect(widget)
    shadow.setBlurRadius(blur)
    shadow.setOffset(0, 4)
    shadow.setColor(QColor(0, 0, 0, alpha))
    widget.setGraphicsEffect(shadow)


class ColorPickerCard(QFrame):
    """Titled swatch; clicking it opens a color dialog."""

    color_changed = Signal(object)

    def __init__(self, title: str, color: Color, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._title = title
        self._color = color

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        title_label = QLabel(title, self)
        title_label.setStyleSheet(f"font-weight: 700; color: {ThemeColors.TEXT_PRIMARY};")
        layout.addWidget(title_label)

        self._swatch = QPushButton(self)
        self._swatch.setCursor(Qt.CursorShape.PointingHandCursor)
        self._swatch.setFixedHeight(100)
        self._swatch.setToolTip(f"Choose {title.lower()}")
        self._swatch.clicked.connect(self._choose_color)
        layout.addWidget(self._swatch)

        self._apply_swatch_style()

    def color(self) -> Color:
        return self._color

    def set_color(self, color: Color) -> None:
        """Update the swatch without emitting ``color_changed``."""
        self._color = color
        self._apply_swatch_style()

    def _apply_swatch_style(self) -> None:
        self._swatch.setStyleSheet(
            f"""
            QPushButton {{
                background: {to_qcolor(self._color).name()};
                border: 1px solid {ThemeColors.CARD_BORDER};
                border-radius: 12px;
            }}
            """
        )

    def _choose_color(self) -> None:
        chosen = QColorDialog.getColor(to_qcolor(self._color), self, self._title)
        if not chosen.isValid():
            return
        color = from_qcolor(chosen)
        self.set_color(color)
        self.color_changed.emit(color)


class _GradientTrack(QWidget):
    """Rounded gradient bar from the first to the second color with the ratio label."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._start = Color(1.0, 0.0, 0.0)
        self._end = Color(0.0, 0.0, 1.0)
        self._ratio = 0.5
        self.setFixedHeight(20)

    def set_colors(self, start: Color, end: Color) -> None:
        self._start = start
        self._end = end
        self.update()

    def set_ratio(self, ratio: float) -> None:
        self._ratio = clamp_ratio(ratio)
        self.update()

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)

        rect = QRectF(self.rect())
        gradient = QLinearGradient(rect.left(), 0, rect.right(), 0)
        gradient.setColorAt(0.0, to_qcolor(self._start))
        gradient.setColorAt(1.0, to_qcolor(self._end))
        path = QPainterPath()
        path.addRoundedRect(rect, 10, 10)
        painter.fillPath(path, gradient)

        # Label sits at the right edge of the filled portion.
        label_rect = QRectF(rect.left(), rect.top(), rect.width() * self._ratio, rect.height())
        label_rect.adjust(8, 0, -8, 0)
        font = painter.font()
        font.setPointSize(max(7, font.pointSize() - 2))
        painter.setFont(font)
        painter.setPen(QColor(ThemeColors.TEXT_ON_ACCENT))
        painter.drawText(label_rect, Qt.AlignRight | Qt.AlignVCenter, ratio_percent(self._ratio))


class RatioSlider(QWidget):
    """Mix ratio header, gradient track and the slider driving it."""

    ratio_changed = Signal(float)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        header = QLabel("Mix Ratio", self)
        header.setAlignment(Qt.AlignCenter)
        header.setStyleSheet(f"font-weight: 700; color: {ThemeColors.TEXT_PRIMARY};")
        layout.addWidget(header)

        self._track = _GradientTrack(self)
        layout.addWidget(self._track)

        self._slider = QSlider(Qt.Orientation.Horizontal, self)
        self._slider.setRange(0, SLIDER_STEPS)
        self._slider.valueChanged.connect(self._on_value_changed)
        layout.addWidget(self._slider)

    def set_colors(self, start: Color, end: Color) -> None:
        self._track.set_colors(start, end)

    def set_ratio(self, ratio: float) -> None:
        """Move the slider without emitting ``ratio_changed``."""
        value = clamp_ratio(ratio)
        self._slider.blockSignals(True)
        self._slider.setValue(int(round(value * SLIDER_STEPS)))
        self._slider.blockSignals(False)
        self._track.set_ratio(value)

    def _on_value_changed(self, value: int) -> None:
        ratio = value / SLIDER_STEPS
        self._track.set_ratio(ratio)
        self.ratio_changed.emit(ratio)


class PreviewCard(QWidget):
    """Rounded card filled with the mixed color, hex code along the bottom."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._color = BLACK
        self.setMinimumHeight(200)
        _apply_shadow(self, blur=24, alpha=50)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.addStretch(1)

        self._hex_label = QLabel("#000000", self)
        self._hex_label.setAlignment(Qt.AlignCenter)
        self._hex_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        layout.addWidget(self._hex_label, 0, Qt.AlignHCenter)

    def set_preview(self, color: Color, hex_code: str, text_color: Color) -> None:
        self._color = color
        self._hex_label.setText(hex_code)
        self._hex_label.setStyleSheet(
            f"""
            QLabel {{
                color: {to_qcolor(text_color).name()};
                background: {ThemeColors.HEX_PILL_BG};
                border-radius: 15px;
                padding: 12px;
                font-family: monospace;
                font-size: 20px;
                font-weight: 700;
            }}
            """
        )
        self.update()

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        path = QPainterPath()
        path.addRoundedRect(QRectF(self.rect()), 25, 25)
        painter.fillPath(path, to_qcolor(self._color))


class CopiedNotice(QLabel):
    """Dark translucent pill shown after the hex code is copied."""

    def __init__(self, text: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(text, parent)
        self.setAlignment(Qt.AlignCenter)
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)
        self.setStyleSheet(
            f"""
            QLabel {{
                background: {ThemeColors.NOTICE_BG};
                color: {ThemeColors.NOTICE_TEXT};
                border-radius: 10px;
                padding: 14px 18px;
            }}
            """
        )
        self.adjustSize()
        self.hide()

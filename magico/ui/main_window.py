from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QColor, QGuiApplication, QLinearGradient, QPainter
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from magico.core.settings import MixerSettings
from magico.core.state import MixerState
from magico.ui.colors import ThemeColors
from magico.ui.widgets import ColorPickerCard, CopiedNotice, PreviewCard, RatioSlider

logger = logging.getLogger(__name__)


class _Background(QWidget):
    """Soft white-to-gray diagonal gradient."""

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        gradient = QLinearGradient(0, 0, self.width(), self.height())
        gradient.setColorAt(0.0, QColor(ThemeColors.BG_TOP))
        gradient.setColorAt(1.0, QColor(ThemeColors.BG_BOTTOM))
        painter.fillRect(self.rect(), gradient)


class MainWindow(QMainWindow):
    """Single-screen color mixer.

    All widgets are driven from a :class:`MixerState`; user input only
    mutates the state and :meth:`render_state` redraws from it. The copy notice is
    dismissed by a single-shot timer that is restarted on every copy, so a
    pending dismissal from an earlier copy is cancelled.
    """

    def __init__(self, settings: MixerSettings, state: Optional[MixerState] = None) -> None:
        super().__init__()
        self._settings = settings
        self._state = state or MixerState(
            first_color=settings.first_color,
            second_color=settings.second_color,
            ratio=settings.ratio,
        )
        self._notice_token = 0

        self._first_picker: Optional[ColorPickerCard] = None
        self._second_picker: Optional[ColorPickerCard] = None
        self._ratio_slider: Optional[RatioSlider] = None
        self._preview_card: Optional[PreviewCard] = None
        self._notice: Optional[CopiedNotice] = None

        self._notice_timer = QTimer(self)
        self._notice_timer.setSingleShot(True)
        self._notice_timer.setInterval(settings.notice_duration_ms)
        self._notice_timer.timeout.connect(self._on_notice_timeout)

        self.setWindowTitle(settings.title)
        self.resize(420, 720)
        self._build_ui()

        self._unsubscribe = self._state.subscribe(lambda _state: self.render_state())
        self.render_state()

    @property
    def state(self) -> MixerState:
        return self._state

    def _build_ui(self) -> None:
        background = _Background(self)
        self.setCentralWidget(background)
        outer = QVBoxLayout(background)
        outer.setContentsMargins(0, 0, 0, 0)

        scroll = QScrollArea(background)
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        scroll.setStyleSheet("QScrollArea { background: transparent; }")
        outer.addWidget(scroll)

        content = QWidget()
        content.setStyleSheet("background: transparent;")
        scroll.setWidget(content)
        layout = QVBoxLayout(content)
        layout.setContentsMargins(16, 24, 16, 24)
        layout.setSpacing(25)

        title = QLabel(self._settings.title, content)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(
            f"font-size: 40px; font-weight: 800; color: {ThemeColors.ACCENT_START};"
        )
        layout.addWidget(title)

        self._preview_card = PreviewCard(content)
        layout.addWidget(self._preview_card)

        controls = QFrame(content)
        controls.setObjectName("controlsCard")
        controls.setStyleSheet(
            f"""
            QFrame#controlsCard {{
                background: {ThemeColors.CARD_BG};
                border-radius: 20px;
            }}
            """
        )
        shadow = QGraphicsDropShadowEffect(controls)
        shadow.setBlurRadius(16)
        shadow.setOffset(0, 3)
        shadow.setColor(QColor(0, 0, 0, 35))
        controls.setGraphicsEffect(shadow)
        controls_layout = QVBoxLayout(controls)
        controls_layout.setContentsMargins(16, 16, 16, 16)
        controls_layout.setSpacing(20)

        pickers_row = QHBoxLayout()
        pickers_row.setSpacing(20)
        self._first_picker = ColorPickerCard("Color 1", self._state.first_color, controls)
        self._first_picker.color_changed.connect(self._state.set_first_color)
        self._second_picker = ColorPickerCard("Color 2", self._state.second_color, controls)
        self._second_picker.color_changed.connect(self._state.set_second_color)
        pickers_row.addWidget(self._first_picker)
        pickers_row.addWidget(self._second_picker)
        controls_layout.addLayout(pickers_row)

        self._ratio_slider = RatioSlider(controls)
        self._ratio_slider.ratio_changed.connect(self._state.set_ratio)
        controls_layout.addWidget(self._ratio_slider)
        layout.addWidget(controls)

        copy_button = QPushButton("Copy Hex Code", content)
        copy_button.setCursor(Qt.CursorShape.PointingHandCursor)
        copy_button.setMinimumHeight(52)
        copy_button.setStyleSheet(
            f"""
            QPushButton {{
                color: {ThemeColors.TEXT_ON_ACCENT};
                font-weight: 700;
                border: none;
                border-radius: 15px;
                background: qlineargradient(x1:0, y1:0, x2:1, y2:0,
                    stop:0 {ThemeColors.ACCENT_START}, stop:1 {ThemeColors.ACCENT_END});
            }}
            """
        )
        copy_button.clicked.connect(self.copy_hex_code)
        layout.addWidget(copy_button)
        layout.addStretch(1)

        self._notice = CopiedNotice(self._settings.notice_text, self)

    def render_state(self) -> None:
        """Push the current state into every widget."""
        state = self._state
        if self._preview_card is not None:
            self._preview_card.set_preview(state.mixed_color, state.hex_code, state.text_color)
        if self._first_picker is not None:
            self._first_picker.set_color(state.first_color)
        if self._second_picker is not None:
            self._second_picker.set_color(state.second_color)
        if self._ratio_slider is not None:
            self._ratio_slider.set_colors(state.first_color, state.second_color)
            self._ratio_slider.set_ratio(state.ratio)
        if self._notice is not None:
            if state.notice_visible:
                self._position_notice()
                self._notice.show()
                self._notice.raise_()
            else:
                self._notice.hide()

    def copy_hex_code(self) -> None:
        """Copy the mixed color's hex code and show the timed notice."""
        hex_code = self._state.hex_code
        clipboard = QGuiApplication.clipboard()
        if clipboard is None:
            logger.warning("Clipboard unavailable; could not copy %s", hex_code)
            return
        clipboard.setText(hex_code)
        logger.info("Copied %s to clipboard", hex_code)

        self._notice_token = self._state.show_notice()
        # start() on an active timer restarts it, dropping the earlier dismissal.
        self._notice_timer.start()

    def _on_notice_timeout(self) -> None:
        self._state.dismiss_notice(self._notice_token)

    def _position_notice(self) -> None:
        if self._notice is None:
            return
        self._notice.adjustSize()
        x = (self.width() - self._notice.width()) // 2
        y = self.height() - self._notice.height() - 50
        self._notice.move(max(0, x), max(0, y))

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        if self._notice is not None and self._notice.isVisible():
            self._position_notice()

    def closeEvent(self, event) -> None:
        self._notice_timer.stop()
        self._unsubscribe()
        super().closeEvent(event)

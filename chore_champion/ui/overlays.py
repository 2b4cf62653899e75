"""In-window overlays: reset confirmation, toast notifications, level-up confetti."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional

from PySide6.QtCore import QEvent, QRectF, Qt, QTimer, Signal
from PySide6.QtGui import QColor, QPainter
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from chore_champion.core.notifications import Notification, NotificationKind
from chore_champion.ui.colors import AppColors
from chore_champion.ui.widgets import button_style


class _ParentSizedOverlay(QWidget):
    """Keeps itself sized to its parent while shown."""

    def _fit_parent(self) -> None:
        parent = self.parentWidget()
        if parent is not None:
            self.setGeometry(parent.rect())

    def eventFilter(self, obj, event: QEvent) -> bool:
        if obj is self.parentWidget() and event.type() == QEvent.Type.Resize:
            self._fit_parent()
        return super().eventFilter(obj, event)

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self._fit_parent()
        parent = self.parentWidget()
        if parent is not None:
            parent.installEventFilter(self)

    def hideEvent(self, event) -> None:
        parent = self.parentWidget()
        if parent is not None:
            parent.removeEventFilter(self)
        super().hideEvent(event)


class ResetConfirmOverlay(_ParentSizedOverlay):
    """Asks before wiping every chore and all progress."""

    closed = Signal(bool)  # True if user confirmed reset

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        layout = QGridLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        backdrop = QWidget(self)
        backdrop.setStyleSheet("background: rgba(0, 0, 0, 0.25);")
        backdrop.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        backdrop.mousePressEvent = lambda e: self._close(False)
        layout.addWidget(backdrop, 0, 0)

        box = QFrame()
        box.setObjectName("resetBox")
        box.setFixedWidth(380)
        box.setStyleSheet(
            f"QFrame#resetBox {{ background: {AppColors.CARD_BG}; border-radius: 12px; }}"
        )
        shadow = QGraphicsDropShadowEffect(box)
        shadow.setBlurRadius(20)
        shadow.setOffset(0, 6)
        shadow.setColor(QColor(0, 0, 0, 40))
        box.setGraphicsEffect(shadow)

        content = QVBoxLayout(box)
        content.setContentsMargins(24, 20, 24, 20)
        content.setSpacing(14)
        title = QLabel("Reset progress")
        title.setStyleSheet(f"color: {AppColors.DANGER}; font-size: 18px; font-weight: 800;")
        content.addWidget(title)
        msg = QLabel("Remove every chore and start again from level 1?")
        msg.setWordWrap(True)
        msg.setStyleSheet(f"color: {AppColors.TEXT_PRIMARY}; font-size: 14px;")
        content.addWidget(msg)

        buttons = QHBoxLayout()
        cancel_btn = QPushButton("Cancel")
        cancel_btn.setStyleSheet(button_style(AppColors.TEXT_SECONDARY))
        cancel_btn.clicked.connect(lambda: self._close(False))
        confirm_btn = QPushButton("Reset")
        confirm_btn.setStyleSheet(button_style(AppColors.DANGER))
        confirm_btn.clicked.connect(lambda: self._close(True))
        buttons.addWidget(cancel_btn, 1)
        buttons.addWidget(confirm_btn, 1)
        content.addLayout(buttons)

        layout.addWidget(box, 0, 0, 1, 1, Qt.AlignCenter)

    def _close(self, confirmed: bool) -> None:
        self.hide()
        self.closed.emit(confirmed)


class ToastStack(QWidget):
    """Top-right column of short-lived notification labels."""

    def __init__(self, parent: QWidget) -> None:
        super().__init__(parent)
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)
        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(8)
        self.setFixedWidth(300)
        self.hide()

    def show_notification(self, notification: Notification) -> None:
        accent = AppColors.STREAK if notification.kind is NotificationKind.LEVEL_UP else AppColors.SUCCESS
        toast = QLabel(f"✔ {notification.message}")
        toast.setWordWrap(True)
        toast.setStyleSheet(
            f"""
            QLabel {{
                background: {AppColors.CARD_BG};
                color: {AppColors.TEXT_PRIMARY};
                border-left: 4px solid {accent};
                border-radius: 6px;
                padding: 10px 14px;
                font-size: 13px;
            }}
            """
        )
        self._layout.addWidget(toast)
        self._reposition()
        self.show()
        self.raise_()
        QTimer.singleShot(int(notification.duration_seconds * 1000), self, lambda: self._dismiss(toast))

    def _dismiss(self, toast: QLabel) -> None:
        self._layout.removeWidget(toast)
        toast.deleteLater()
        if self._layout.count() == 0:
            self.hide()
        else:
            self._reposition()

    def _reposition(self) -> None:
        parent = self.parentWidget()
        self.adjustSize()
        if parent is not None:
            self.move(parent.width() - self.width() - 16, 16)


@dataclass
class _Piece:
    x: float
    y: float
    speed: float
    drift: float
    size: float
    color: str


class ConfettiOverlay(_ParentSizedOverlay):
    """Falling confetti drawn over the whole window for a fixed time."""

    FRAME_MS = 30
    PIECE_COUNT = 150

    def __init__(self, parent: Optional[QWidget] = None, rng: Optional[random.Random] = None) -> None:
        super().__init__(parent)
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)
        self._rng = rng or random.Random()
        self._pieces: List[_Piece] = []
        self._frame_timer = QTimer(self)
        self._frame_timer.timeout.connect(self._advance)
        self._stop_timer = QTimer(self)
        self._stop_timer.setSingleShot(True)
        self._stop_timer.timeout.connect(self.stop)
        self.hide()

    def celebrate(self, duration_seconds: float) -> None:
        self._fit_parent()
        self._pieces = [self._spawn(initial=True) for _ in range(self.PIECE_COUNT)]
        self.show()
        self.raise_()
        self._frame_timer.start(self.FRAME_MS)
        self._stop_timer.start(int(duration_seconds * 1000))

    def stop(self) -> None:
        self._frame_timer.stop()
        self._stop_timer.stop()
        self._pieces = []
        self.hide()

    def _spawn(self, initial: bool = False) -> _Piece:
        width = max(1, self.width())
        height = max(1, self.height())
        return _Piece(
            x=self._rng.uniform(0, width),
            y=self._rng.uniform(-height, 0) if initial else -10.0,
            speed=self._rng.uniform(2.0, 6.0),
            drift=self._rng.uniform(-1.5, 1.5),
            size=self._rng.uniform(5.0, 10.0),
            color=self._rng.choice(AppColors.CONFETTI),
        )

    def _advance(self) -> None:
        for i, piece in enumerate(self._pieces):
            piece.y += piece.speed
            piece.x += piece.drift
            if piece.y > self.height():
                self._pieces[i] = self._spawn()
        self.update()

    def paintEvent(self, event) -> None:
        if not self._pieces:
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        painter.setPen(Qt.NoPen)
        for piece in self._pieces:
            painter.setBrush(QColor(piece.color))
            painter.drawRect(QRectF(piece.x, piece.y, piece.size, piece.size * 0.6))

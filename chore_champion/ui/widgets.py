"""Board widgets: background, cards, XP bar, chore rows."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QLinearGradient, QPainter
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from chore_champion.ui.colors import AppColors, tint
from chore_champion.ui.models import ChoreCardState


def button_style(background: str, *, font_size: int = 13, padding: str = "8px 16px") -> str:
    return f"""
        QPushButton {{
            background: {background};
            color: white;
            border: none;
            padding: {padding};
            border-radius: 6px;
            font-weight: 600;
            font-size: {font_size}px;
        }}
        QPushButton:hover {{ background: {QColor(background).darker(110).name()}; }}
        QPushButton:disabled {{ background: {AppColors.PROGRESS_TRACK}; }}
    """


class GradientBackground(QWidget):
    """Soft vertical gradient behind the board."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        gradient = QLinearGradient(0, 0, 0, self.height())
        gradient.setColorAt(0.0, QColor(AppColors.BG_TOP))
        gradient.setColorAt(1.0, QColor(AppColors.BG_BOTTOM))
        painter.fillRect(self.rect(), gradient)


class Card(QFrame):
    """White rounded card with a soft drop shadow."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("card")
        self.setStyleSheet(
            f"""
            QFrame#card {{
                background: {AppColors.CARD_BG};
                border-radius: 12px;
            }}
            """
        )
        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(12)
        shadow.setOffset(0, 4)
        shadow.setColor(QColor(0, 0, 0, 26))
        self.setGraphicsEffect(shadow)


class XpProgressBar(QWidget):
    """Thin rounded bar showing progress through the current level."""

    def __init__(self, parent: Optional[QWidget] = None, *, height: int = 8) -> None:
        super().__init__(parent)
        self._percent = 0.0
        self.setFixedHeight(height)
        self.setMinimumWidth(100)

    def set_percent(self, percent: float) -> None:
        self._percent = max(0.0, min(100.0, float(percent)))
        self.update()

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        painter.setPen(Qt.NoPen)
        radius = self.height() / 2

        painter.setBrush(QColor(AppColors.PROGRESS_TRACK))
        painter.drawRoundedRect(self.rect(), radius, radius)

        fill_width = int(self.width() * self._percent / 100.0)
        if fill_width > 0:
            painter.setBrush(QColor(AppColors.SUCCESS))
            painter.drawRoundedRect(0, 0, fill_width, self.height(), radius, radius)


class ChoreRowCard(QFrame):
    """One chore: emoji and name, difficulty line, streak badge, Play/Remove."""

    def __init__(
        self,
        state: ChoreCardState,
        *,
        on_play: Callable[[int], None],
        on_remove: Callable[[int], None],
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._state = state
        color = state.difficulty.color
        self.setObjectName("choreRow")
        self.setStyleSheet(
            f"""
            QFrame#choreRow {{
                background: {tint(color, 0.94)};
                border: 2px solid {color};
                border-radius: 8px;
            }}
            """
        )

        row = QHBoxLayout(self)
        row.setContentsMargins(16, 12, 16, 12)
        row.setSpacing(12)

        text_col = QVBoxLayout()
        text_col.setSpacing(4)
        title = QLabel(state.title)
        title.setStyleSheet(
            f"color: {AppColors.TEXT_PRIMARY}; font-size: 16px; font-weight: 700; border: none;"
        )
        text_col.addWidget(title)

        meta = QHBoxLayout()
        meta.setSpacing(16)
        subtitle = QLabel(state.subtitle)
        subtitle.setStyleSheet(f"color: {color}; font-weight: 600; border: none;")
        meta.addWidget(subtitle)
        badge = state.streak_badge
        if badge:
            streak = QLabel(badge)
            streak.setStyleSheet(f"color: {AppColors.STREAK}; font-weight: 600; border: none;")
            meta.addWidget(streak)
        meta.addStretch(1)
        text_col.addLayout(meta)
        row.addLayout(text_col, 1)

        chore_id = state.chore.id
        play_btn = QPushButton("Play")
        play_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        play_btn.setStyleSheet(button_style(AppColors.SUCCESS))
        play_btn.clicked.connect(lambda: on_play(chore_id))
        row.addWidget(play_btn, 0)

        remove_btn = QPushButton("Remove")
        remove_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        remove_btn.setStyleSheet(button_style(AppColors.DANGER))
        remove_btn.clicked.connect(lambda: on_remove(chore_id))
        row.addWidget(remove_btn, 0)

    @property
    def chore_id(self) -> int:
        return self._state.chore.id

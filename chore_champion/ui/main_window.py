from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, QEventLoop
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QComboBox,
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from chore_champion.core.notifications import Notification, NotificationKind
from chore_champion.core.session import GameSession
from chore_champion.core.state import RewardOutcome
from chore_champion.core.store import ChoreStore
from chore_champion.ui.colors import AppColors, countdown_color
from chore_champion.ui.models import ChoreCardState, ProgressView, points_preview
from chore_champion.ui.overlays import ConfettiOverlay, ResetConfirmOverlay, ToastStack
from chore_champion.ui.qt_timer import qt_scheduler
from chore_champion.ui.widgets import (
    Card,
    ChoreRowCard,
    GradientBackground,
    XpProgressBar,
    button_style,
)


class MainWindow(QMainWindow):
    """Chore board window.

    Two pages share one stack: the chore list (with the add form) and the
    running game. The level card above them is always visible. All state
    lives in the ``ChoreStore``; the window only re-renders after each
    operation and forwards store notifications to toasts and confetti.
    """

    def __init__(self, store: ChoreStore) -> None:
        super().__init__()
        self._store = store
        self._session = GameSession(
            store,
            qt_scheduler(self),
            on_tick=self._on_tick,
            on_finished=self._on_session_finished,
        )
        self._unsubscribe = store.notifier.subscribe(self._on_notification)

        self._stack: Optional[QStackedWidget] = None
        self._list_page: Optional[QWidget] = None
        self._game_page: Optional[QWidget] = None
        self._rows_layout: Optional[QVBoxLayout] = None
        self._empty_label: Optional[QLabel] = None
        self._name_input: Optional[QLineEdit] = None
        self._difficulty_select: Optional[QComboBox] = None
        self._level_label: Optional[QLabel] = None
        self._xp_bar: Optional[XpProgressBar] = None
        self._xp_label: Optional[QLabel] = None
        self._game_title: Optional[QLabel] = None
        self._countdown_label: Optional[QLabel] = None
        self._points_label: Optional[QLabel] = None

        self._build_ui()
        self._refresh()

    def _build_ui(self) -> None:
        """Construct header, level card, both pages and the overlays."""
        self.setWindowTitle("Chore Champion")
        self.setMinimumSize(640, 720)

        root = GradientBackground()
        self.setCentralWidget(root)
        outer = QHBoxLayout(root)
        outer.setContentsMargins(24, 24, 24, 24)
        column_widget = QWidget()
        column_widget.setMaximumWidth(600)
        column = QVBoxLayout(column_widget)
        column.setContentsMargins(0, 0, 0, 0)
        column.setSpacing(20)
        outer.addStretch(1)
        outer.addWidget(column_widget, 4)
        outer.addStretch(1)

        title = QLabel("Chore Champion")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"color: {AppColors.PRIMARY}; font-size: 32px; font-weight: 800;")
        column.addWidget(title)
        tagline = QLabel("When you need just a little motivation and a little push 📣🎉👯‍♀️")
        tagline.setAlignment(Qt.AlignCenter)
        tagline.setWordWrap(True)
        tagline.setStyleSheet(f"color: {AppColors.TEXT_SECONDARY}; font-size: 15px;")
        column.addWidget(tagline)

        level_card = Card()
        level_layout = QVBoxLayout(level_card)
        level_layout.setContentsMargins(24, 18, 24, 18)
        level_layout.setSpacing(10)
        level_header = QHBoxLayout()
        self._level_label = QLabel()
        self._level_label.setStyleSheet(f"color: {AppColors.TEXT_PRIMARY}; font-size: 18px; font-weight: 700;")
        level_header.addWidget(self._level_label)
        level_header.addStretch(1)
        reset_btn = QPushButton("Reset")
        reset_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        reset_btn.setStyleSheet(button_style(AppColors.TEXT_SECONDARY, font_size=11, padding="4px 10px"))
        reset_btn.clicked.connect(self._reset_progress)
        level_header.addWidget(reset_btn)
        level_layout.addLayout(level_header)
        self._xp_bar = XpProgressBar()
        level_layout.addWidget(self._xp_bar)
        self._xp_label = QLabel()
        self._xp_label.setStyleSheet(f"color: {AppColors.TEXT_SECONDARY};")
        level_layout.addWidget(self._xp_label)
        column.addWidget(level_card)

        self._stack = QStackedWidget()
        self._list_page = self._build_list_page()
        self._game_page = self._build_game_page()
        self._stack.addWidget(self._list_page)
        self._stack.addWidget(self._game_page)
        column.addWidget(self._stack, 1)

        self._reset_overlay = ResetConfirmOverlay(root)
        self._reset_overlay.hide()
        self._confetti = ConfettiOverlay(root)
        self._toasts = ToastStack(root)

    def _build_list_page(self) -> QWidget:
        page = Card()
        layout = QVBoxLayout(page)
        layout.setContentsMargins(24, 20, 24, 20)
        layout.setSpacing(14)

        heading = QLabel("Your Chores")
        heading.setStyleSheet(f"color: {AppColors.TEXT_PRIMARY}; font-size: 22px; font-weight: 700;")
        layout.addWidget(heading)

        rows_container = QWidget()
        self._rows_layout = QVBoxLayout(rows_container)
        self._rows_layout.setContentsMargins(0, 0, 0, 0)
        self._rows_layout.setSpacing(12)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        scroll.setStyleSheet("QScrollArea { background: transparent; }")
        scroll.setWidget(rows_container)
        layout.addWidget(scroll, 1)

        self._empty_label = QLabel("No chores yet. Add one below!")
        self._empty_label.setStyleSheet(f"color: {AppColors.TEXT_SECONDARY};")
        layout.addWidget(self._empty_label)

        form = QHBoxLayout()
        form.setSpacing(8)
        self._name_input = QLineEdit()
        self._name_input.setPlaceholderText("New chore name")
        self._name_input.setStyleSheet(
            f"""
            QLineEdit {{
                padding: 8px 12px;
                border: 2px solid {AppColors.INPUT_BORDER};
                border-radius: 6px;
                font-size: 14px;
            }}
            QLineEdit:focus {{ border-color: {AppColors.SUCCESS}; }}
            """
        )
        self._name_input.returnPressed.connect(self._add_chore)
        form.addWidget(self._name_input, 1)

        self._difficulty_select = QComboBox()
        for difficulty in self._store.difficulties.all():
            self._difficulty_select.addItem(difficulty.label, difficulty.key)
        medium = self._difficulty_select.findData("medium")
        if medium >= 0:
            self._difficulty_select.setCurrentIndex(medium)
        form.addWidget(self._difficulty_select)

        add_btn = QPushButton("Add Chore")
        add_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        add_btn.setStyleSheet(button_style(AppColors.SUCCESS))
        add_btn.clicked.connect(self._add_chore)
        form.addWidget(add_btn)
        layout.addLayout(form)
        return page

    def _build_game_page(self) -> QWidget:
        page = Card()
        layout = QVBoxLayout(page)
        layout.setContentsMargins(24, 20, 24, 20)
        layout.setSpacing(16)

        self._game_title = QLabel()
        self._game_title.setStyleSheet(f"color: {AppColors.TEXT_PRIMARY}; font-size: 22px; font-weight: 700;")
        layout.addWidget(self._game_title)

        self._countdown_label = QLabel()
        self._countdown_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self._countdown_label)

        self._points_label = QLabel()
        self._points_label.setAlignment(Qt.AlignCenter)
        self._points_label.setStyleSheet(f"color: {AppColors.TEXT_PRIMARY}; font-size: 22px;")
        layout.addWidget(self._points_label)

        buttons = QHBoxLayout()
        buttons.addStretch(1)
        point_btn = QPushButton("+1 Point")
        point_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        point_btn.setStyleSheet(button_style(AppColors.PRIMARY, font_size=18, padding="12px 24px"))
        point_btn.clicked.connect(self._score_point)
        buttons.addWidget(point_btn)
        end_btn = QPushButton("End Game")
        end_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        end_btn.setStyleSheet(button_style(AppColors.DANGER, font_size=18, padding="12px 24px"))
        end_btn.clicked.connect(lambda: self._session.end())
        buttons.addWidget(end_btn)
        buttons.addStretch(1)
        layout.addLayout(buttons)
        layout.addStretch(1)
        return page

    def _refresh(self) -> None:
        """Re-render the level card and chore list from the store."""
        progress = ProgressView(level=self._store.level, xp=self._store.xp)
        self._level_label.setText(progress.heading)
        self._xp_bar.set_percent(progress.percent)
        self._xp_label.setText(progress.caption)

        while self._rows_layout.count():
            item = self._rows_layout.takeAt(0)
            w = item.widget()
            if w is not None:
                w.setParent(None)
                w.deleteLater()

        for chore in self._store.chores:
            state = ChoreCardState(chore=chore, difficulty=self._store.difficulties.get(chore.difficulty))
            self._rows_layout.addWidget(
                ChoreRowCard(state, on_play=self._start_game, on_remove=self._remove_chore)
            )
        self._rows_layout.addStretch(1)
        self._empty_label.setVisible(not self._store.chores)

    def _add_chore(self) -> None:
        chore = self._store.add_chore(self._name_input.text(), self._difficulty_select.currentData())
        if chore is None:
            return
        self._name_input.clear()
        self._refresh()

    def _remove_chore(self, chore_id: int) -> None:
        self._store.remove_chore(chore_id)
        self._refresh()

    def _start_game(self, chore_id: int) -> None:
        chore = self._store.get(chore_id)
        if chore is None or not self._session.start(chore):
            return
        self._game_title.setText(f"🎮 {chore.emoji} {chore.name}")
        self._render_game()
        self._stack.setCurrentWidget(self._game_page)

    def _score_point(self) -> None:
        self._session.score_point()
        self._render_game()

    def _render_game(self) -> None:
        remaining = self._session.remaining_seconds
        self._countdown_label.setText(f"{remaining}s")
        self._countdown_label.setStyleSheet(
            f"color: {countdown_color(remaining)}; font-size: 40px; font-weight: 800;"
        )
        self._points_label.setText(points_preview(self._session.points, self._session.multiplier))

    def _on_tick(self, remaining: int) -> None:
        self._render_game()

    def _on_session_finished(self, outcome: RewardOutcome) -> None:
        self._stack.setCurrentWidget(self._list_page)
        self._refresh()

    def _on_notification(self, notification: Notification) -> None:
        self._toasts.show_notification(notification)
        if notification.kind is NotificationKind.LEVEL_UP:
            self._confetti.celebrate(notification.duration_seconds)

    def _reset_progress(self) -> None:
        """Show the confirmation overlay and, if confirmed, wipe all chores and progress."""
        if self._session.is_running:
            return
        overlay = self._reset_overlay
        overlay.raise_()
        overlay.show()
        confirmed = [False]

        def on_closed(ok: bool) -> None:
            confirmed[0] = ok
            loop.quit()

        loop = QEventLoop()
        overlay.closed.connect(on_closed)
        loop.exec()
        overlay.closed.disconnect(on_closed)

        if confirmed[0]:
            self._store.reset()
            self._refresh()

    def closeEvent(self, event: QCloseEvent) -> None:
        """Stop any running game and persist state when closing the app."""
        self._session.abort()
        self._confetti.stop()
        self._unsubscribe()
        self._store.save()
        super().closeEvent(event)

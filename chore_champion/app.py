"""Application entry point and setup for Chore Champion."""

import logging
import sys

from PySide6.QtGui import QFont
from PySide6.QtWidgets import QApplication

from chore_champion.core.difficulty import DifficultyRepository
from chore_champion.core.emoji import EmojiCatalog
from chore_champion.core.notifications import Notifier
from chore_champion.core.store import ChoreStore
from chore_champion.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def apply_application_font(app: QApplication) -> None:
    """Use the platform UI font with emoji fallbacks so chore glyphs render."""
    app_font = QFont(app.font().family())
    # Emoji fonts as fallbacks so chore glyphs render on Linux/Windows/macOS.
    app_font.setFamilies(
        [
            app.font().family(),
            "Noto Color Emoji",
            "Segoe UI Emoji",
            "Apple Color Emoji",
        ]
    )
    app_font.setPointSize(11)
    app.setFont(app_font)


def run() -> None:
    """Load the catalogues and saved state, then show the main window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Chore Champion")
    app.setApplicationDisplayName("Chore Champion")
    apply_application_font(app)

    store = ChoreStore(
        difficulties=DifficultyRepository(),
        emoji=EmojiCatalog(),
        notifier=Notifier(),
    )
    logging.info("Loaded %d chores from %s", len(store.chores), store.file_path)

    window = MainWindow(store=store)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()

"""Controller layer: MainWindow and StickerApp.

Orchestrates the settings snapshot, the quote builder, the views and the
exporters.
"""

import dataclasses
import logging

from PySide6.QtCore import QTimer
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QApplication, QFileDialog, QMainWindow, QMessageBox, QPushButton, QScrollArea,
    QStatusBar, QVBoxLayout, QWidget,
)

from document import ExportError, QuoteDocument
from formatter import quote_to_html, quote_to_text
from models import DEFAULT_PDF_NAME, QUOTE_PDF_FILTER, RECALC_DELAY_MS, Quote, SettingsRecord
from quote import build_quote
from storage import SettingsStore
from views import (
    DARK_STYLE, CollapsibleSection, ResultsView, SettingsPanel, StickerListWidget,
)

logger = logging.getLogger(__name__)

TOAST_MS = 3000


# === MainWindow ===

class MainWindow(QMainWindow):
    """Sidebar window: settings, sticker list, results and status bar.

    ``self.settings`` is the single current state. It is never mutated; each
    edit replaces it with a new SettingsRecord, which is then saved.
    """

    def __init__(self, store: SettingsStore | None = None):
        super().__init__()
        self.store = store or SettingsStore()
        self.settings = self.store.load() or SettingsRecord()
        self.quote: Quote | None = None

        self.setWindowTitle("Sticker Quote")
        self.resize(420, 820)

        # Latest request wins: every edit restarts the timer
        self._recalc_timer = QTimer(self)
        self._recalc_timer.setSingleShot(True)
        self._recalc_timer.setInterval(RECALC_DELAY_MS)
        self._recalc_timer.timeout.connect(self.calculate)

        self.settings_panel = SettingsPanel(self.settings)
        self.sticker_list = StickerListWidget()
        self.results_view = ResultsView()
        self.calculate_button = QPushButton("Calculate")

        body = QWidget()
        layout = QVBoxLayout(body)
        self.settings_section = CollapsibleSection("Settings", self.settings_panel)
        self.stickers_section = CollapsibleSection("Stickers", self.sticker_list)
        layout.addWidget(self.settings_section)
        layout.addWidget(self.stickers_section)
        layout.addWidget(self.calculate_button)
        layout.addWidget(CollapsibleSection("Quote", self.results_view), 1)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(body)
        self.setCentralWidget(scroll)

        if self.settings.stickers:
            self.sticker_list.set_specs(self.settings.stickers)
        else:
            self.sticker_list.add_row()

        self.settings_panel.changed.connect(self._on_settings_changed)
        self.settings_panel.dark_mode_changed.connect(self._on_dark_mode_changed)
        self.sticker_list.changed.connect(self._schedule_recalc)
        self.calculate_button.clicked.connect(self.calculate)
        self.results_view.copy_button.clicked.connect(self._copy_quote)
        self.results_view.save_pdf_button.clicked.connect(self._save_pdf)

        self._build_menus()
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._apply_dark_mode(self.settings.dark_mode)

    def _build_menus(self):
        mb = self.menuBar()

        file_menu = mb.addMenu("&File")

        act = QAction("&Save PDF...", self)
        act.setShortcut(QKeySequence.StandardKey.Save)
        act.triggered.connect(self._save_pdf)
        file_menu.addAction(act)

        file_menu.addSeparator()

        act = QAction("&Quit", self)
        act.setShortcut(QKeySequence.StandardKey.Quit)
        act.triggered.connect(self.close)
        file_menu.addAction(act)

        edit_menu = mb.addMenu("&Edit")

        act = QAction("&Copy Quote", self)
        act.setShortcut(QKeySequence("Ctrl+Shift+C"))
        act.triggered.connect(self._copy_quote)
        edit_menu.addAction(act)

        act = QAction("&Add Sticker", self)
        act.setShortcut(QKeySequence("Ctrl+N"))
        act.triggered.connect(lambda: self.sticker_list.add_row())
        edit_menu.addAction(act)

        act = QAction("C&alculate", self)
        act.setShortcut(QKeySequence("Ctrl+Return"))
        act.triggered.connect(self.calculate)
        edit_menu.addAction(act)

        about_act = QAction("&About Sticker Quote", self)
        about_act.setMenuRole(QAction.MenuRole.AboutRole)
        about_act.triggered.connect(self._show_about)
        edit_menu.addSeparator()
        edit_menu.addAction(about_act)

    # --- State ---

    def _replace_settings(self, **changes):
        """Swap in a new settings snapshot and persist it."""
        self.settings = dataclasses.replace(self.settings, **changes)
        self._persist()

    def _persist(self):
        try:
            self.store.save(self.settings)
        except OSError as e:
            logger.warning("Could not save settings: %s", e)
            self.show_toast("Could not save settings")

    def _on_settings_changed(self):
        self._replace_settings(**self.settings_panel.field_values(self.settings))
        self._schedule_recalc()

    def _on_dark_mode_changed(self, enabled: bool):
        self._replace_settings(dark_mode=enabled)
        self._apply_dark_mode(enabled)

    def _apply_dark_mode(self, enabled: bool):
        self.setStyleSheet(DARK_STYLE if enabled else "")

    # --- Calculation ---

    def _schedule_recalc(self):
        self._recalc_timer.start()

    def calculate(self):
        """Snapshot the inputs, rebuild the quote and render it."""
        self._recalc_timer.stop()
        self.settings = dataclasses.replace(self.settings, stickers=self.sticker_list.specs())
        self.quote = build_quote(self.settings.stickers, self.settings)
        self.results_view.show_html(quote_to_html(self.quote))
        self._update_status()
        self._persist()

    def _update_status(self):
        quote = self.quote
        if quote is None:
            return
        n = len(quote.valid_items)
        bad = len(quote.line_items) - n
        bad_text = f" | {bad} invalid" if bad else ""
        self._status.showMessage(
            f"{n} sticker line{'s' if n != 1 else ''}{bad_text}")

    def show_toast(self, message: str):
        self._status.showMessage(message, TOAST_MS)

    # --- Export ---

    def _flush_pending(self):
        """Run a pending debounced recalculation now, so the newest input is used."""
        if self._recalc_timer.isActive():
            self.calculate()

    def _copy_quote(self):
        self._flush_pending()
        if self.quote is None:
            return
        QApplication.clipboard().setText(quote_to_text(self.quote))
        self.show_toast("Quote copied to clipboard!")

    def _save_pdf(self):
        self._flush_pending()
        if self.quote is None:
            self.calculate()
        path, _ = QFileDialog.getSaveFileName(self, "Save Quote PDF", DEFAULT_PDF_NAME,
                                              QUOTE_PDF_FILTER)
        if not path:
            return
        if not path.lower().endswith(".pdf"):
            path += ".pdf"
        self.export_pdf(path)

    def export_pdf(self, path: str) -> bool:
        """Write the current quote to *path*. Failures are reported, never raised."""
        if self.quote is None:
            return False
        try:
            QuoteDocument(self.quote).render(path)
        except (ExportError, OSError) as e:
            logger.warning("PDF export failed: %s", e)
            self.show_toast(f"Could not save PDF: {e}")
            return False
        self.show_toast(f"Saved {path.rsplit('/', 1)[-1]}")
        return True

    # --- Misc ---

    def _show_about(self):
        QMessageBox.about(
            self,
            "About Sticker Quote",
            "Sticker Quote\n\n"
            "Price vinyl sticker jobs by the row\n"
            "and export quotes as PDF.",
        )

    def closeEvent(self, event):
        self._flush_pending()
        event.accept()


# === StickerApp ===

class StickerApp(QApplication):
    """QApplication with the tool's names set."""

    def __init__(self, argv):
        super().__init__(argv)
        self.setApplicationName("Sticker Quote")
        self.setOrganizationName("Sticker King")

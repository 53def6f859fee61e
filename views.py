"""View layer: Qt widgets for the quote sidebar.

Contains CollapsibleSection, StickerRow, StickerListWidget, SettingsPanel and
ResultsView. Widgets only collect raw input and display results; all
validation happens in the calculator.
"""

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QCheckBox, QComboBox, QDoubleSpinBox, QFormLayout, QHBoxLayout, QLabel, QLineEdit,
    QPushButton, QTextBrowser, QToolButton, QVBoxLayout, QWidget,
)

from models import CURRENCY_SYMBOL, MATERIALS, SettingsRecord, StickerSpec

DARK_STYLE = """
QWidget { background-color: #1e1e1e; color: #e0e0e0; }
QLineEdit, QDoubleSpinBox, QComboBox, QTextBrowser {
    background-color: #2b2b2b; border: 1px solid #444; color: #e0e0e0;
}
QPushButton { background-color: #333; border: 1px solid #555; padding: 4px 8px; }
QPushButton:hover { background-color: #3d3d3d; }
"""


# === CollapsibleSection ===

class CollapsibleSection(QWidget):
    """A titled section whose content can be shown or hidden."""

    def __init__(self, title: str, content: QWidget, expanded: bool = True, parent=None):
        super().__init__(parent)
        self.content = content

        self.toggle_button = QToolButton()
        self.toggle_button.setText(title)
        self.toggle_button.setCheckable(True)
        self.toggle_button.setChecked(expanded)
        self.toggle_button.setToolButtonStyle(Qt.ToolButtonStyle.ToolButtonTextBesideIcon)
        self.toggle_button.setStyleSheet("QToolButton { border: none; font-weight: bold; }")
        self.toggle_button.toggled.connect(self._on_toggled)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.toggle_button)
        layout.addWidget(content)
        self._on_toggled(expanded)

    def is_expanded(self) -> bool:
        return self.toggle_button.isChecked()

    def _on_toggled(self, checked: bool):
        self.toggle_button.setArrowType(
            Qt.ArrowType.DownArrow if checked else Qt.ArrowType.RightArrow)
        self.content.setVisible(checked)


# === StickerRow ===

def _field_text(value) -> str:
    return "" if value is None else str(value)


class StickerRow(QWidget):
    """Width / height / quantity inputs for one sticker line."""

    changed = Signal()
    remove_requested = Signal(object)  # emits self

    def __init__(self, spec: StickerSpec | None = None, parent=None):
        super().__init__(parent)
        spec = spec or StickerSpec()

        self.width_edit = QLineEdit(_field_text(spec.width))
        self.width_edit.setPlaceholderText("Width (mm)")
        self.height_edit = QLineEdit(_field_text(spec.height))
        self.height_edit.setPlaceholderText("Height (mm)")
        self.quantity_edit = QLineEdit(_field_text(spec.quantity))
        self.quantity_edit.setPlaceholderText("Quantity")

        remove_btn = QToolButton()
        remove_btn.setText("×")
        remove_btn.setToolTip("Remove sticker")
        remove_btn.clicked.connect(lambda: self.remove_requested.emit(self))

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        for edit in (self.width_edit, self.height_edit, self.quantity_edit):
            edit.textChanged.connect(lambda _text: self.changed.emit())
            layout.addWidget(edit)
        layout.addWidget(remove_btn)

    def spec(self) -> StickerSpec:
        """Raw values as typed."""
        return StickerSpec(
            width=self.width_edit.text(),
            height=self.height_edit.text(),
            quantity=self.quantity_edit.text(),
        )


class StickerListWidget(QWidget):
    """Ordered list of StickerRows with an Add button."""

    changed = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.rows: list[StickerRow] = []
        self._rows_layout = QVBoxLayout()
        self._rows_layout.setContentsMargins(0, 0, 0, 0)

        self.add_button = QPushButton("Add Sticker")
        self.add_button.clicked.connect(lambda: self.add_row())

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addLayout(self._rows_layout)
        layout.addWidget(self.add_button)

    def add_row(self, spec: StickerSpec | None = None) -> StickerRow:
        row = StickerRow(spec)
        row.changed.connect(self.changed)
        row.remove_requested.connect(self.remove_row)
        self.rows.append(row)
        self._rows_layout.addWidget(row)
        self.changed.emit()
        return row

    def remove_row(self, row: StickerRow):
        if row not in self.rows:
            return
        self.rows.remove(row)
        self._rows_layout.removeWidget(row)
        row.deleteLater()
        self.changed.emit()

    def set_specs(self, specs):
        for row in list(self.rows):
            self._rows_layout.removeWidget(row)
            row.deleteLater()
        self.rows.clear()
        for spec in specs:
            self.add_row(spec)

    def specs(self) -> tuple[StickerSpec, ...]:
        return tuple(row.spec() for row in self.rows)


# === SettingsPanel ===

class SettingsPanel(QWidget):
    """Vinyl cost, VAT and job options."""

    changed = Signal()
    dark_mode_changed = Signal(bool)

    def __init__(self, settings: SettingsRecord, parent=None):
        super().__init__(parent)
        form = QFormLayout(self)

        self.vinyl_cost_spin = QDoubleSpinBox()
        self.vinyl_cost_spin.setRange(0.0, 1000.0)
        self.vinyl_cost_spin.setDecimals(4)
        self.vinyl_cost_spin.setSingleStep(0.005)
        self.vinyl_cost_spin.setPrefix(CURRENCY_SYMBOL)
        self.vinyl_cost_spin.setSuffix(" /cm²")
        form.addRow("Vinyl cost:", self.vinyl_cost_spin)

        self.vat_rate_spin = QDoubleSpinBox()
        self.vat_rate_spin.setRange(0.0, 100.0)
        self.vat_rate_spin.setDecimals(2)
        self.vat_rate_spin.setSuffix(" %")
        form.addRow("VAT rate:", self.vat_rate_spin)

        self.include_vat_check = QCheckBox("Include VAT")
        form.addRow(self.include_vat_check)

        self.material_combo = QComboBox()
        self.material_combo.setEditable(True)
        self.material_combo.addItems(MATERIALS)
        form.addRow("Material:", self.material_combo)

        self.rounded_corners_check = QCheckBox("Cutline with rounded corners")
        form.addRow(self.rounded_corners_check)

        self.dark_mode_check = QCheckBox("Dark mode")
        form.addRow(self.dark_mode_check)

        self.set_settings(settings)

        self.vinyl_cost_spin.valueChanged.connect(lambda _v: self.changed.emit())
        self.vat_rate_spin.valueChanged.connect(lambda _v: self.changed.emit())
        self.include_vat_check.toggled.connect(lambda _on: self.changed.emit())
        self.material_combo.currentTextChanged.connect(lambda _text: self.changed.emit())
        self.rounded_corners_check.toggled.connect(lambda _on: self.changed.emit())
        self.dark_mode_check.toggled.connect(self.dark_mode_changed)

    def set_settings(self, settings: SettingsRecord):
        self.vinyl_cost_spin.setValue(settings.vinyl_cost)
        self.vat_rate_spin.setValue(settings.vat_rate)
        self.include_vat_check.setChecked(settings.include_vat)
        self.material_combo.setCurrentText(settings.material)
        self.rounded_corners_check.setChecked(settings.rounded_corners)
        self.dark_mode_check.setChecked(settings.dark_mode)

    def field_values(self, settings: SettingsRecord) -> dict:
        """Return the field values this panel controls, for dataclasses.replace."""
        return {
            'vinyl_cost': self.vinyl_cost_spin.value(),
            'vat_rate': self.vat_rate_spin.value(),
            'include_vat': self.include_vat_check.isChecked(),
            'material': self.material_combo.currentText() or settings.material,
            'rounded_corners': self.rounded_corners_check.isChecked(),
            'dark_mode': self.dark_mode_check.isChecked(),
        }


# === ResultsView ===

class ResultsView(QWidget):
    """Rendered quote plus Copy and Save PDF buttons."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.browser = QTextBrowser()
        self.browser.setOpenLinks(False)
        self.placeholder = QLabel("Enter sticker sizes and press Calculate.")
        self.placeholder.setWordWrap(True)

        self.copy_button = QPushButton("Copy Quote")
        self.save_pdf_button = QPushButton("Save PDF")

        buttons = QHBoxLayout()
        buttons.addWidget(self.copy_button)
        buttons.addWidget(self.save_pdf_button)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.placeholder)
        layout.addWidget(self.browser, 1)
        layout.addLayout(buttons)
        self.show_html(None)

    def show_html(self, html: str | None):
        has_quote = html is not None
        self.placeholder.setVisible(not has_quote)
        self.browser.setVisible(has_quote)
        self.copy_button.setEnabled(has_quote)
        self.save_pdf_button.setEnabled(has_quote)
        self.browser.setHtml(html or "")

"""Bean-amount picker shown before the brew starts."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFrame,
    QButtonGroup,
)

from ..timer.schedule import Preset


class PresetPicker(QWidget):
    """Two toggle buttons, one per preset.  Emits ``preset_selected``."""

    preset_selected = pyqtSignal(object)

    def __init__(self, current: Preset, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._buttons: dict[Preset, QPushButton] = {}

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        title = QLabel("Choose your beans", card)
        title.setStyleSheet("font-size: 16px; font-weight: 600; background: transparent;")
        layout.addWidget(title)

        row = QHBoxLayout()
        row.setSpacing(12)
        self._group = QButtonGroup(self)
        self._group.setExclusive(True)
        for preset in Preset:
            btn = QPushButton(f"{preset.label}\nwater: {preset.water.total}ml", card)
            btn.setObjectName("presetButton")
            btn.setCheckable(True)
            btn.setCursor(Qt.CursorShape.PointingHandCursor)
            btn.clicked.connect(lambda _checked, p=preset: self.preset_selected.emit(p))
            self._group.addButton(btn)
            self._buttons[preset] = btn
            row.addWidget(btn)
        layout.addLayout(row)

        self.set_current(current)

    def set_current(self, preset: Preset) -> None:
        self._buttons[preset].setChecked(True)

    def button_for(self, preset: Preset) -> QPushButton:
        return self._buttons[preset]

# src/decayviz/ui/controls.py
from PySide6.QtCore import Signal, QDateTime
from PySide6.QtWidgets import (QVBoxLayout, QHBoxLayout, QPushButton, QDoubleSpinBox,
                               QComboBox, QFrame, QLabel, QLineEdit, QDateTimeEdit)

from decayengine.config import DEFAULTS

# (label, unit value) pairs for the unit selector
UNIT_CHOICES = [
    ("μg (micrograms)", "ug"),
    ("mg (milligrams)", "mg"),
    ("g (grams)", "g"),
    ("IU (international units)", "iu"),
]

class ControlsPanel(QFrame):
    """Half-life setting, the add-dose form, and the current level readout."""
    halfLifeChanged = Signal(float)
    addRequested = Signal(str, str, str)  # amount text, unit, ISO local time
    clearRequested = Signal()

    def __init__(self):
        super().__init__()
        self.setFrameShape(QFrame.StyledPanel)
        layout = QVBoxLayout(self)

        # --- Configuration ---
        layout.addWidget(QLabel("Configuration"))
        self.half_life = QDoubleSpinBox(); self.half_life.setDecimals(1)
        self.half_life.setRange(0.1, 1e6); self.half_life.setSingleStep(0.1)
        self.half_life.setValue(DEFAULTS.half_life_hours)
        self.half_life.setSuffix(" h")
        layout.addWidget(QLabel("Half-Life (hours)"))
        layout.addWidget(self.half_life)
        self.half_life.valueChanged.connect(lambda v: self.halfLifeChanged.emit(float(v)))

        # --- Add Dose ---
        layout.addWidget(QLabel("Add Dose"))
        self.amount = QLineEdit(); self.amount.setPlaceholderText("100")
        layout.addWidget(QLabel("Amount"))
        layout.addWidget(self.amount)

        self.unit = QComboBox()
        for label, value in UNIT_CHOICES:
            self.unit.addItem(label, value)
        self.unit.setCurrentIndex(1)  # mg
        layout.addWidget(QLabel("Unit"))
        layout.addWidget(self.unit)

        self.time = QDateTimeEdit(QDateTime.currentDateTime())
        self.time.setDisplayFormat("yyyy-MM-dd HH:mm"); self.time.setCalendarPopup(True)
        layout.addWidget(QLabel("Time"))
        layout.addWidget(self.time)

        buttons = QHBoxLayout()
        add = QPushButton("Add Dose"); buttons.addWidget(add)
        clear = QPushButton("Clear All"); buttons.addWidget(clear)
        layout.addLayout(buttons)
        add.clicked.connect(self._emit_add)
        clear.clicked.connect(self.clearRequested.emit)

        # --- Current Active Level ---
        layout.addWidget(QLabel("Current Active Level"))
        self.level = QLabel("0.00 mg")
        font = self.level.font(); font.setPointSize(18); font.setBold(True); self.level.setFont(font)
        layout.addWidget(self.level)
        layout.addStretch(1)

    def half_life_hours(self) -> float:
        return float(self.half_life.value())

    def show_level(self, level: float):
        self.level.setText(f"{level:.{DEFAULTS.display_decimals}f} mg")

    def reset_form(self):
        self.amount.clear()
        self.time.setDateTime(QDateTime.currentDateTime())

    def _emit_add(self):
        iso = self.time.dateTime().toString("yyyy-MM-ddTHH:mm")
        self.addRequested.emit(self.amount.text(), self.unit.currentData(), iso)

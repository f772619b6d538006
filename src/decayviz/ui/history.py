# src/decayviz/ui/history.py
from PySide6.QtCore import Signal
from PySide6.QtWidgets import QFrame, QVBoxLayout, QLabel, QTableWidget, QTableWidgetItem, QPushButton, QHeaderView

from decayengine.config import DEFAULTS
from decayengine.types import Dose


class HistoryPanel(QFrame):
    """Dose history table with a Remove button per row."""
    removeRequested = Signal(str)  # dose_id

    def __init__(self):
        super().__init__()
        self.setFrameShape(QFrame.StyledPanel)
        layout = QVBoxLayout(self)
        layout.addWidget(QLabel("Dose History"))

        self.empty = QLabel("No doses recorded yet. Add a dose to get started.")
        layout.addWidget(self.empty)

        self.table = QTableWidget(0, 4)
        self.table.setHorizontalHeaderLabels(["Time", "Amount", "Unit", "Action"])
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.table.verticalHeader().setVisible(False)
        layout.addWidget(self.table)

    def show_doses(self, doses: tuple[Dose, ...]):
        self.empty.setVisible(len(doses) == 0)
        self.table.setVisible(len(doses) > 0)
        self.table.setRowCount(len(doses))
        for row, d in enumerate(doses):
            self.table.setItem(row, 0, QTableWidgetItem(d.timestamp.strftime(DEFAULTS.time_format)))
            self.table.setItem(row, 1, QTableWidgetItem(f"{d.amount:g}"))
            self.table.setItem(row, 2, QTableWidgetItem(d.unit))
            btn = QPushButton("Remove")
            btn.clicked.connect(lambda _=False, dose_id=d.dose_id: self.removeRequested.emit(dose_id))
            self.table.setCellWidget(row, 3, btn)

# src/decayviz/ui/main_window.py
import logging

from PySide6.QtWidgets import QMainWindow, QWidget, QHBoxLayout, QVBoxLayout, QStatusBar, QMessageBox

from decayengine.calculator import current_level, chart_series
from decayengine.dosing import seed_history
from decayengine.aggregate import now_local
from decayengine.errors import DecayError
from decayengine.metrics import peak, auc_trapz
from decayengine.store import DoseStore
from .controls import ControlsPanel
from .history import HistoryPanel
from .plots import PlotWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, store: DoseStore | None = None):
        super().__init__()
        self.setWindowTitle("Half-Life Calculator")
        self.resize(1200, 760)

        self.store = store if store is not None else DoseStore(seed_history(now_local()))

        central = QWidget(self); self.setCentralWidget(central)
        root = QVBoxLayout(central)
        top = QHBoxLayout(); root.addLayout(top, 0)

        self.controls = ControlsPanel()
        self.history = HistoryPanel()
        self.plot = PlotWidget()
        top.addWidget(self.controls, 0)
        top.addWidget(self.history, 1)
        root.addWidget(self.plot, 1)

        self.status = QStatusBar(); self.setStatusBar(self.status)

        # wire events
        self.controls.halfLifeChanged.connect(lambda _: self.refresh())
        self.controls.addRequested.connect(self.on_add)
        self.controls.clearRequested.connect(self.on_clear)
        self.history.removeRequested.connect(self.on_remove)

        self.refresh()

    def on_add(self, amount: str, unit: str, when: str):
        try:
            self.store.submit(amount, unit, when)
        except DecayError as e:
            QMessageBox.warning(self, "Invalid dose", str(e))
            return
        self.controls.reset_form()
        self.refresh()

    def on_remove(self, dose_id: str):
        self.store.remove(dose_id)
        self.refresh()

    def on_clear(self):
        answer = QMessageBox.question(self, "Clear All", "Are you sure you want to clear all doses?")
        if answer == QMessageBox.Yes:
            self.store.clear()
            self.refresh()

    def refresh(self):
        self.history.show_doses(self.store.doses)
        try:
            h = self.controls.half_life_hours()
            now = now_local()
            self.controls.show_level(current_level(self.store, h, now=now))
            series = chart_series(self.store, h, now=now)
            self.plot.plot_series(series)
            if len(series):
                level, when = peak(series)
                msg = f"Peak {level:.2f} mg at {when:%Y-%m-%d %H:%M} | AUC {auc_trapz(series):.1f} mg·h"
                self.status.showMessage(msg, 5000)
        except DecayError as e:
            logger.warning("Could not compute levels: %s", e)
            self.status.showMessage(f"Error: {e}", 8000)

# src/decayviz/ui/plots.py
from PySide6.QtWidgets import QWidget, QVBoxLayout
import pyqtgraph as pg

from decayengine.sampling import DecaySeries


class PlotWidget(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)

        # Main plot area; x values are POSIX seconds shown as local dates
        self.plot_widget = pg.PlotWidget(axisItems={"bottom": pg.DateAxisItem(orientation="bottom")})
        self.plot_widget.setLabel("left", "Active Level", units="mg")
        self.plot_widget.setLabel("bottom", "Time")
        self.plot_widget.showGrid(x=True, y=True, alpha=0.3)
        self.plot_widget.addLegend()
        layout.addWidget(self.plot_widget)

        self.curve = None

    def plot_series(self, series: DecaySeries):
        self.plot_widget.clear()
        points = list(series)
        if not points:
            self.curve = None
            return
        x = [p.instant.timestamp() for p in points]
        y = [p.level for p in points]
        self.curve = self.plot_widget.plot(
            x, y,
            pen=pg.mkPen("#4CAF50", width=2),
            name="Active Level (mg)",
        )

    def clear(self):
        self.plot_widget.clear()
        self.curve = None

from __future__ import annotations

from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QPushButton
from PySide6.QtCore import Qt, Signal

from calendario.summary import DAY_NAMES, MONTH_NAMES, DaySummary, MonthGrid
from calendario.theme import DAY_CELL_STYLES


class MonthlyView(QWidget):
    """
    Grade de 7 colunas (domingo a sábado) com os dias do mês selecionado.
    Clicar em um dia pede a abertura do diálogo daquele dia.
    """

    day_selected = Signal(int, int)  # mês, dia
    back_requested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.month_index = 0
        self.day_buttons: dict[int, QPushButton] = {}
        self.leading_blanks = 0

        # -------- header --------
        self.title_label = QLabel()
        self.title_label.setObjectName("MonthTitle")
        self.back_button = QPushButton("← Voltar")
        self.back_button.clicked.connect(lambda: self.back_requested.emit())

        header_layout = QHBoxLayout()
        header_layout.addWidget(self.title_label)
        header_layout.addStretch()
        header_layout.addWidget(self.back_button)

        names_layout = QGridLayout()
        for col, name in enumerate(DAY_NAMES):
            label = QLabel(name)
            label.setObjectName("DayHeader")
            label.setAlignment(Qt.AlignCenter)
            names_layout.addWidget(label, 0, col)

        self.days_layout = QGridLayout()
        self.days_layout.setSpacing(8)

        main_layout = QVBoxLayout(self)
        main_layout.addLayout(header_layout)
        main_layout.addLayout(names_layout)
        main_layout.addLayout(self.days_layout)
        main_layout.addStretch()

    def set_grid(self, grid: MonthGrid):
        """Redesenha os dias a partir da grade calculada."""
        self.month_index = grid.month_index
        self.leading_blanks = grid.leading_blanks
        self.title_label.setText(grid.title)
        self._clear_days()

        for offset in range(grid.leading_blanks):
            self.days_layout.addWidget(QWidget(), 0, offset)

        for day_summary in grid.days:
            row, col = divmod(grid.leading_blanks + day_summary.day - 1, 7)
            button = self._build_day_button(day_summary)
            self.days_layout.addWidget(button, row, col)
            self.day_buttons[day_summary.day] = button

    def _build_day_button(self, summary: DaySummary) -> QPushButton:
        text = str(summary.day)
        if summary.is_proximate:
            text += " ●"
        button = QPushButton(text)
        button.setMinimumSize(64, 56)
        button.setCursor(Qt.PointingHandCursor)
        button.setToolTip(f"{summary.day} de {MONTH_NAMES[self.month_index]}")
        button.setStyleSheet(f"QPushButton {{ {DAY_CELL_STYLES[summary.style]} border-radius: 10px; font-size: 16px; }}")
        button.setProperty("cellStyle", summary.style.value)
        button.clicked.connect(lambda _checked=False, day=summary.day: self.day_selected.emit(self.month_index, day))
        return button

    def _clear_days(self):
        self.day_buttons.clear()
        while self.days_layout.count():
            item = self.days_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

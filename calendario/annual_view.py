from __future__ import annotations

from PySide6.QtWidgets import QWidget, QFrame, QGridLayout, QVBoxLayout, QHBoxLayout, QLabel
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QMouseEvent

from calendario.summary import MONTH_NAMES, DAYS_IN_MONTH, MonthSummary
from calendario.theme import MONTH_CARD_STYLES, MONTH_CAPTION_COLORS, MARKER_COLORS


class MonthCard(QFrame):
    """Cartão de um mês na visão anual."""

    clicked = Signal(int)

    def __init__(self, month_index: int, parent=None):
        super().__init__(parent)
        self.month_index = month_index
        self.summary: MonthSummary | None = None
        self.setObjectName("MonthCard")
        self.setCursor(Qt.PointingHandCursor)
        self.setMinimumSize(180, 120)

        self.name_label = QLabel(MONTH_NAMES[month_index])
        self.name_label.setStyleSheet("font-size: 18px; font-weight: bold; background: transparent;")
        self.days_label = QLabel(f"{DAYS_IN_MONTH[month_index]} dias")
        self.days_label.setStyleSheet("color: #9ca3af; background: transparent;")
        self.caption_label = QLabel()
        self.caption_label.setWordWrap(True)
        self.marker_label = QLabel()
        self.marker_label.setAlignment(Qt.AlignRight | Qt.AlignTop)

        top_layout = QHBoxLayout()
        top_layout.addWidget(self.name_label)
        top_layout.addStretch()
        top_layout.addWidget(self.marker_label)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(18, 14, 18, 14)
        layout.addLayout(top_layout)
        layout.addWidget(self.days_label)
        layout.addStretch()
        layout.addWidget(self.caption_label)

    def set_summary(self, summary: MonthSummary):
        self.summary = summary
        self.setStyleSheet(f"QFrame#MonthCard {{ {MONTH_CARD_STYLES[summary.style]} }}")

        self.caption_label.setText(summary.caption)
        self.caption_label.setStyleSheet(
            f"color: {MONTH_CAPTION_COLORS[summary.style]}; font-weight: 600; background: transparent;"
        )

        # bolinha vermelha para evento próximo, azul para mês com eventos
        color = MARKER_COLORS.get(summary.style)
        if color is None:
            self.marker_label.clear()
        else:
            self.marker_label.setText("●")
            self.marker_label.setStyleSheet(f"color: {color}; font-size: 14px; background: transparent;")

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit(self.month_index)
            return
        super().mousePressEvent(event)


class AnnualView(QWidget):
    """Os 12 meses do ano em uma grade de cartões."""

    month_selected = Signal(int)

    columns = 4

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QGridLayout(self)
        layout.setSpacing(16)

        self.cards: list[MonthCard] = []
        for month_index in range(12):
            card = MonthCard(month_index)
            card.clicked.connect(self.month_selected)
            row, col = divmod(month_index, self.columns)
            layout.addWidget(card, row, col)
            self.cards.append(card)

    def set_summaries(self, summaries: list[MonthSummary]):
        for card, summary in zip(self.cards, summaries):
            card.set_summary(summary)

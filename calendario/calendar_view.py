from __future__ import annotations

import logging
from datetime import date
from typing import Callable

from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QComboBox, QPushButton, QStackedWidget
from PySide6.QtCore import Signal, Slot

from calendario.annual_view import AnnualView
from calendario.controller import CalendarController
from calendario.event_dialog import EventDialog
from calendario.models import EventIndex, Region, events_for_day
from calendario.monthly_view import MonthlyView
from calendario.summary import (
    ALL_REGIONS, RegionFilter, build_month_grid, regional_counts, summarize_year, toggle_region_filter
)
from calendario.theme import FILTER_ACTIVE_STYLE, FILTER_EMPTY_STYLE, FILTER_HAS_EVENTS_STYLE

logger = logging.getLogger(__name__)

ANNUAL = "annual"
MONTHLY = "monthly"


class FilterBar(QWidget):
    """Seletor de região e botões "SC: n" com o total de eventos por região."""

    filter_requested = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.combo = QComboBox()
        self.combo.addItem("Todas as Regiões", ALL_REGIONS)
        for region in Region:
            self.combo.addItem(region.label, region.value)
        self.combo.currentIndexChanged.connect(self._on_combo_changed)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.combo)
        label = QLabel("Eventos:")
        label.setObjectName("SectionTitle")
        layout.addWidget(label)

        self.region_buttons: dict[Region, QPushButton] = {}
        for region in Region:
            button = QPushButton(f"{region.value}: 0")
            button.clicked.connect(lambda _checked=False, value=region.value: self.filter_requested.emit(value))
            layout.addWidget(button)
            self.region_buttons[region] = button
        layout.addStretch()

    def set_state(self, region_filter: RegionFilter, counts: dict[Region, int]):
        value = region_filter.value if isinstance(region_filter, Region) else region_filter
        self.combo.blockSignals(True)
        self.combo.setCurrentIndex(self.combo.findData(value))
        self.combo.blockSignals(False)

        for region, button in self.region_buttons.items():
            button.setText(f"{region.value}: {counts.get(region, 0)}")
            if region_filter == region:
                button.setStyleSheet(FILTER_ACTIVE_STYLE)
            elif counts.get(region, 0) > 0:
                button.setStyleSheet(FILTER_HAS_EVENTS_STYLE)
            else:
                button.setStyleSheet(FILTER_EMPTY_STYLE)

    def _on_combo_changed(self, _index: int):
        self.filter_requested.emit(self.combo.currentData())


class CalendarView(QWidget):
    """
    Tela principal: visão anual ou mensal, filtro de região e o diálogo do dia.
    Tudo é recalculado a partir do índice do controller a cada mudança.
    """

    def __init__(
        self,
        controller: CalendarController,
        today_provider: Callable[[], date] | None = None,
        parent=None
    ):
        super().__init__(parent)
        self.controller = controller
        self.today_provider = today_provider or date.today

        self.view_mode = ANNUAL
        self.selected_month = 0
        self.region_filter: RegionFilter = ALL_REGIONS
        self.dialog: EventDialog | None = None

        title = QLabel("Calendário de Eventos")
        title.setObjectName("AppTitle")

        self.filter_bar = FilterBar()
        self.annual_view = AnnualView()
        self.monthly_view = MonthlyView()
        self.stack = QStackedWidget()
        self.stack.addWidget(self.annual_view)
        self.stack.addWidget(self.monthly_view)

        layout = QVBoxLayout(self)
        layout.addWidget(title)
        layout.addWidget(self.filter_bar)
        layout.addWidget(self.stack, stretch=1)

        # sinais
        self.filter_bar.filter_requested.connect(self.change_filter)
        self.annual_view.month_selected.connect(self.show_month)
        self.monthly_view.back_requested.connect(self.show_annual)
        self.monthly_view.day_selected.connect(self.open_day)
        self.controller.events_changed.connect(self._on_events_changed)
        self.controller.event_added.connect(self._on_event_added)

        self.refresh_view()

    @property
    def index(self) -> EventIndex:
        return self.controller.index

    # ---------------- navegação e filtro ----------------

    @Slot(str)
    def change_filter(self, value: str):
        """Troca o filtro de região e volta sempre para a visão anual."""
        selected = ALL_REGIONS if value == ALL_REGIONS else Region(value)
        self.region_filter = toggle_region_filter(self.region_filter, selected)
        self.view_mode = ANNUAL
        self.refresh_view()

    @Slot(int)
    def show_month(self, month_index: int):
        self.selected_month = month_index
        self.view_mode = MONTHLY
        self.refresh_view()

    @Slot()
    def show_annual(self):
        self.view_mode = ANNUAL
        self.refresh_view()

    def refresh_view(self):
        today = self.today_provider()
        self.filter_bar.set_state(self.region_filter, regional_counts(self.index))
        if self.view_mode == ANNUAL:
            self.annual_view.set_summaries(summarize_year(self.index, self.region_filter, today))
            self.stack.setCurrentWidget(self.annual_view)
        else:
            self.monthly_view.set_grid(build_month_grid(self.index, self.selected_month, self.region_filter, today))
            self.stack.setCurrentWidget(self.monthly_view)

    # ---------------- diálogo do dia ----------------

    @Slot(int, int)
    def open_day(self, month_index: int, day: int):
        """Abre o diálogo com todos os eventos do dia, ignorando o filtro."""
        self.close_dialog()
        dialog = EventDialog(month_index, day, events_for_day(self.index, month_index, day), parent=self)
        dialog.add_requested.connect(self._on_add_requested)
        dialog.delete_requested.connect(self.controller.delete_event)
        dialog.finished.connect(self._on_dialog_finished)
        self.dialog = dialog
        dialog.open()

    def close_dialog(self):
        if self.dialog is not None:
            self.dialog.reject()

    def _on_add_requested(self, text: str, link: str, region: str):
        if self.dialog is None:
            return
        self.controller.add_event(self.dialog.month_index, self.dialog.day, text, link, Region(region))

    def _on_dialog_finished(self, _result: int):
        dialog, self.dialog = self.dialog, None
        if dialog is not None:
            dialog.deleteLater()

    def _on_events_changed(self, _index: EventIndex):
        self.refresh_view()
        if self.dialog is not None:
            self.dialog.set_events(events_for_day(self.index, self.dialog.month_index, self.dialog.day))

    def _on_event_added(self, month_index: int, day: int):
        # fecha só o diálogo do dia em que o evento foi gravado
        if self.dialog is not None and (self.dialog.month_index, self.dialog.day) == (month_index, day):
            logger.debug("Evento salvo; fechando diálogo")
            self.dialog.accept()

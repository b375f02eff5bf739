from __future__ import annotations

import html
from typing import Iterable

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLineEdit, QComboBox,
    QLabel, QMessageBox, QFrame, QPushButton, QListWidget, QListWidgetItem, QWidget
)
from PySide6.QtCore import Qt, QUrl, Signal

from calendario.models import CalendarEvent, DEFAULT_REGION, Region
from calendario.summary import format_day_title


class EventDialog(QDialog):
    """
    Formulário de um dia: adiciona eventos e lista/apaga os que já existem.
    O diálogo não se fecha sozinho depois de salvar; quem o abriu decide.
    """

    add_requested = Signal(str, str, str)  # texto, link, região
    delete_requested = Signal(str)  # id do evento

    def __init__(
        self,
        month_index: int,
        day: int,
        events: Iterable[CalendarEvent] = (),
        parent=None
    ):
        super().__init__(parent)
        self.month_index = month_index
        self.day = day
        self.setWindowTitle("Adicionar Novo Evento")
        self.setMinimumWidth(440)

        self.text_edit = QLineEdit()
        self.text_edit.setPlaceholderText("Ex: Conferência Indústria 4.0")

        self.link_edit = QLineEdit()
        self.link_edit.setPlaceholderText("https://www.site-do-evento.com.br")

        self.region_combo = QComboBox()
        for region in Region:
            self.region_combo.addItem(region.label, region.value)

        main_layout = QVBoxLayout()
        main_layout.setContentsMargins(18, 16, 18, 16)
        main_layout.setSpacing(8)

        # ===== Cabeçalho =====
        title_label = QLabel("Adicionar Novo Evento")
        title_label.setObjectName("MonthTitle")
        main_layout.addWidget(title_label)

        self.date_label = QLabel(format_day_title(month_index, day))
        main_layout.addWidget(self.date_label)

        line_top = QFrame()
        line_top.setFrameShape(QFrame.HLine)
        line_top.setFrameShadow(QFrame.Sunken)
        main_layout.addWidget(line_top)

        # ===== Campos =====
        for caption, field in (
            ("Descrição do Evento:", self.text_edit),
            ("Link (Opcional):", self.link_edit),
            ("Região do Evento:", self.region_combo),
        ):
            label = QLabel(caption)
            label.setObjectName("SectionTitle")
            main_layout.addWidget(label)
            main_layout.addWidget(field)

        # ===== Eventos existentes =====
        self.existing_box = QWidget()
        existing_layout = QVBoxLayout(self.existing_box)
        existing_layout.setContentsMargins(0, 8, 0, 0)
        existing_title = QLabel("Eventos Existentes:")
        existing_title.setObjectName("SectionTitle")
        self.events_list = QListWidget()
        self.events_list.setMaximumHeight(160)
        existing_layout.addWidget(existing_title)
        existing_layout.addWidget(self.events_list)
        main_layout.addWidget(self.existing_box)

        # ===== Botões =====
        buttons_layout = QHBoxLayout()
        buttons_layout.addStretch()
        self.cancel_button = QPushButton("Cancelar")
        self.cancel_button.clicked.connect(self.reject)
        self.save_button = QPushButton("Salvar Evento")
        self.save_button.setObjectName("PrimaryButton")
        self.save_button.setDefault(True)
        self.save_button.clicked.connect(self._submit)
        buttons_layout.addWidget(self.cancel_button)
        buttons_layout.addWidget(self.save_button)
        main_layout.addLayout(buttons_layout)

        self.setLayout(main_layout)
        self.set_events(events)

    # ---------------- lista de eventos ----------------

    def set_events(self, events: Iterable[CalendarEvent]):
        """Redesenha a lista de eventos do dia (sempre sem filtro de região)."""
        self.events = list(events)
        self.events_list.clear()
        for ev in self.events:
            item = QListWidgetItem(self.events_list)
            row = self._build_event_row(ev)
            item.setSizeHint(row.sizeHint())
            self.events_list.setItemWidget(item, row)
        self.existing_box.setVisible(bool(self.events))

    def _build_event_row(self, ev: CalendarEvent) -> QWidget:
        row = QWidget()
        layout = QHBoxLayout(row)
        layout.setContentsMargins(6, 2, 6, 2)

        text_label = QLabel(ev.event_text)
        text_label.setObjectName("EventText")
        text_label.setTextFormat(Qt.PlainText)
        layout.addWidget(text_label)
        if ev.event_link:
            link_label = QLabel(f'<a href="{html.escape(ev.event_link, quote=True)}">🔗</a>')
            link_label.setTextFormat(Qt.RichText)
            link_label.setOpenExternalLinks(True)
            link_label.setToolTip(ev.event_link)
            layout.addWidget(link_label)
        layout.addWidget(QLabel(f"[{ev.region.value}]"))
        layout.addStretch()

        delete_button = QPushButton("×")
        delete_button.setObjectName("DeleteButton")
        delete_button.setToolTip("Apagar evento")
        delete_button.clicked.connect(lambda _checked=False, event_id=ev.id: self.delete_requested.emit(event_id))
        layout.addWidget(delete_button)
        return row

    # ---------------- formulário ----------------

    def _submit(self):
        """Valida o formulário, emite o pedido de inclusão e limpa os campos."""
        text, link, region = self.get_values()
        if not text:
            QMessageBox.warning(self, "Descrição inválida", "A descrição do evento não pode ficar vazia.")
            return
        if link and QUrl(link).scheme() not in ("http", "https"):
            QMessageBox.warning(self, "Link inválido", "O link deve começar com http:// ou https://.")
            return

        self.add_requested.emit(text, link, region.value)
        self.clear_form()

    def clear_form(self):
        self.text_edit.clear()
        self.link_edit.clear()
        self.region_combo.setCurrentIndex(self.region_combo.findData(DEFAULT_REGION.value))

    def get_values(self) -> tuple[str, str, Region]:
        """Retorna texto, link e região do formulário."""
        return (
            self.text_edit.text().strip(),
            self.link_edit.text().strip(),
            Region(self.region_combo.currentData()),
        )

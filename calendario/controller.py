from __future__ import annotations

import logging
from functools import partial
from typing import Any, Callable

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal, Slot

from calendario.models import CalendarEvent, EventIndex, Region, build_event_index
from calendario.store import EventStore, NewEvent, Subscription

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Erro ao carregar eventos. Tente novamente em alguns momentos."


class _Task(QRunnable):
    def __init__(self, runner: "TaskRunner", fn: Callable[[], Any], on_success, on_error):
        super().__init__()
        self.runner = runner
        self.fn = fn
        self.on_success = on_success
        self.on_error = on_error

    def run(self):
        try:
            result = self.fn()
        except Exception as exc:
            self.runner.done.emit(self.on_error, exc)
            return
        self.runner.done.emit(self.on_success, result)


class TaskRunner(QObject):
    """
    Executa chamadas ao banco no QThreadPool e entrega o resultado
    (ou a exceção) de volta na thread da interface.
    """

    done = Signal(object, object)

    def __init__(self, pool: QThreadPool | None = None, parent=None):
        super().__init__(parent)
        self.pool = pool or QThreadPool.globalInstance()
        self.done.connect(self._deliver)

    def submit(self, fn: Callable[[], Any], on_success: Callable[[Any], None],
               on_error: Callable[[Exception], None]) -> None:
        self.pool.start(_Task(self, fn, on_success, on_error))

    @Slot(object, object)
    def _deliver(self, callback, value):
        callback(value)


class CalendarController(QObject):
    """
    Mantém o índice de eventos e fala com o banco.
    Toda escrita termina com uma nova leitura completa da tabela.
    """

    events_changed = Signal(object)
    load_failed = Signal(str)
    loading_changed = Signal(bool)
    event_added = Signal(int, int)  # mês, dia do evento gravado

    # emitido pela thread do realtime, tratado na thread da interface
    _remote_change = Signal()

    def __init__(self, store: EventStore, runner=None, parent=None):
        super().__init__(parent)
        self.store = store
        self.runner = runner or TaskRunner(parent=self)
        self.index: EventIndex = {}
        self._subscription: Subscription | None = None
        self._remote_change.connect(self.refresh)

    # ---------------- leitura ----------------

    def load(self):
        """Carga inicial; em caso de erro mostra a mensagem de "tente novamente"."""
        logger.info("Carregando eventos...")
        self.loading_changed.emit(True)
        self.runner.submit(self.store.fetch_all, self._on_loaded, self._on_load_error)

    @Slot()
    def refresh(self):
        self.runner.submit(self.store.fetch_all, self._apply, partial(self._log_failure, "Erro ao atualizar eventos"))

    def _on_loaded(self, events: list[CalendarEvent]):
        self._apply(events)
        self.loading_changed.emit(False)

    def _on_load_error(self, exc: Exception):
        logger.error("Erro ao carregar eventos", exc_info=exc)
        self.load_failed.emit(LOAD_ERROR_MESSAGE)
        self.loading_changed.emit(False)

    def _apply(self, events: list[CalendarEvent]):
        self.index = build_event_index(events)
        logger.info("%d eventos carregados", len(events))
        self.events_changed.emit(self.index)

    # ---------------- escrita ----------------

    def add_event(self, month_index: int, day: int, text: str, link: str | None, region: Region):
        new_event = NewEvent(
            month_index=month_index,
            day=day,
            event_text=text,
            event_link=link or None,
            region=Region(region),
        )

        self.runner.submit(
            partial(self.store.insert, new_event),
            partial(self._on_added, new_event),
            partial(self._log_failure, "Erro ao adicionar evento"),
        )

    def _on_added(self, new_event: NewEvent, _result=None):
        # a linha já foi gravada; uma falha na releitura é registrada à parte
        self.event_added.emit(new_event.month_index, new_event.day)
        self.refresh()

    def delete_event(self, event_id: str):
        self.runner.submit(
            partial(self.store.delete, event_id),
            self._on_deleted,
            partial(self._log_failure, "Erro ao apagar evento"),
        )

    def _on_deleted(self, _result=None):
        self.refresh()

    def _log_failure(self, message: str, exc: Exception):
        # só log: o estado atual continua o mesmo de antes da tentativa
        logger.error(message, exc_info=exc)

    # ---------------- realtime ----------------

    def start_live_updates(self):
        if self._subscription is not None:
            return
        self._subscription = self.store.subscribe(self._on_remote_change)
        logger.info("Inscrição realtime iniciada")

    def stop_live_updates(self):
        if self._subscription is None:
            return
        self._subscription.close()
        self._subscription = None
        logger.info("Inscrição realtime encerrada")

    def _on_remote_change(self, payload: dict):
        logger.debug("Mudança remota: %s", payload)
        self._remote_change.emit()

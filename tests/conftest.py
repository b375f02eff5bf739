import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import itertools

import pytest
from PySide6.QtWidgets import QApplication

from calendario.models import CalendarEvent, Region
from calendario.store import NewEvent, StoreError


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


def make_event(month_index, day, text="Evento", region=Region.SC, event_id=None, link=None):
    return CalendarEvent(
        id=event_id or f"{month_index}-{day}-{text}",
        month_index=month_index,
        day=day,
        event_text=text,
        region=region,
        event_link=link,
    )


class InlineRunner:
    """Executa as tarefas na hora, sem thread pool."""

    def submit(self, fn, on_success, on_error):
        try:
            result = fn()
        except Exception as exc:
            on_error(exc)
        else:
            on_success(result)


class FakeSubscription:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


class FakeEventStore:
    """Tabela em memória com a mesma interface do SupabaseEventStore."""

    def __init__(self, events=()):
        self.rows = list(events)
        self._ids = itertools.count(1)
        self.inserted: list[NewEvent] = []
        self.fail_fetch = False
        self.fail_insert = False
        self.fail_delete = False
        self.callbacks = []
        self.subscriptions: list[FakeSubscription] = []

    def fetch_all(self):
        if self.fail_fetch:
            raise StoreError("fetch falhou")
        return list(self.rows)

    def insert(self, new_event):
        if self.fail_insert:
            raise StoreError("insert falhou")
        self.inserted.append(new_event)
        row = dict(new_event.to_row(), id=f"id-{next(self._ids)}")
        self.rows.append(CalendarEvent.from_row(row))

    def delete(self, event_id):
        if self.fail_delete:
            raise StoreError("delete falhou")
        self.rows = [ev for ev in self.rows if ev.id != event_id]

    def subscribe(self, callback):
        self.callbacks.append(callback)
        subscription = FakeSubscription()
        self.subscriptions.append(subscription)
        return subscription

    def notify(self, payload=None):
        for callback in self.callbacks:
            callback(payload or {"eventType": "INSERT"})


@pytest.fixture
def store():
    return FakeEventStore()


@pytest.fixture
def runner():
    return InlineRunner()


class DeferredRunner:
    """Guarda as tarefas até run_all(), como se o banco demorasse a responder."""

    def __init__(self):
        self.pending = []

    def submit(self, fn, on_success, on_error):
        self.pending.append((fn, on_success, on_error))

    def run_all(self):
        inline = InlineRunner()
        while self.pending:
            inline.submit(*self.pending.pop(0))

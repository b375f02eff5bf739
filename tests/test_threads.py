import threading
import time
from unittest import mock

from PySide6.QtCore import QThreadPool

from calendario import store as store_module
from calendario.config import Settings
from calendario.controller import TaskRunner
from calendario.store import RealtimeSubscription, StoreError

SETTINGS = Settings(supabase_url="https://x.supabase.co", supabase_key="anon")


def wait_until(qapp, condition, timeout=5.0):
    deadline = time.monotonic() + timeout
    while not condition() and time.monotonic() < deadline:
        qapp.processEvents()
        time.sleep(0.01)
    return condition()


# ---------------- TaskRunner ----------------

def test_task_runner_delivers_result_on_gui_thread(qapp):
    pool = QThreadPool()
    runner = TaskRunner(pool=pool)
    results = []
    worker_threads = []

    def work():
        worker_threads.append(threading.current_thread())
        return 42

    runner.submit(work, lambda value: results.append((value, threading.current_thread())), results.append)
    pool.waitForDone(5000)

    assert wait_until(qapp, lambda: results)
    [(value, delivered_on)] = results
    assert value == 42
    assert delivered_on is threading.main_thread()
    assert worker_threads[0] is not threading.main_thread()


def test_task_runner_forwards_errors(qapp):
    pool = QThreadPool()
    runner = TaskRunner(pool=pool)
    successes = []
    errors = []

    def work():
        raise StoreError("sem rede")

    runner.submit(work, successes.append, errors.append)
    pool.waitForDone(5000)

    assert wait_until(qapp, lambda: errors)
    assert successes == []
    assert isinstance(errors[0], StoreError)


# ---------------- RealtimeSubscription ----------------

class FakeChannel:
    def __init__(self):
        self.callback = None
        self.subscribed = threading.Event()
        self.removed = threading.Event()
        self.filters = None

    def on_postgres_changes(self, event, callback, table="*", schema="public"):
        self.filters = (event, schema, table)
        self.callback = callback
        return self

    async def subscribe(self, callback=None):
        if callback is not None:
            callback("SUBSCRIBED", None)
        self.subscribed.set()
        return self


class FakeAsyncClient:
    def __init__(self, channel):
        self._channel = channel
        self.channel_names = []

    def channel(self, name):
        self.channel_names.append(name)
        return self._channel

    async def remove_channel(self, channel):
        channel.removed.set()


def test_realtime_subscription_forwards_changes_and_closes():
    channel = FakeChannel()
    client = FakeAsyncClient(channel)

    async def fake_acreate_client(url, key):
        return client

    received = []
    with mock.patch.object(store_module, "acreate_client", fake_acreate_client):
        subscription = RealtimeSubscription(SETTINGS, received.append)
        subscription.start()
        assert channel.subscribed.wait(5)

        channel.callback({"eventType": "DELETE"})
        subscription.close()

    assert received == [{"eventType": "DELETE"}]
    assert channel.filters == ("*", "public", "events")
    assert client.channel_names == ["events_changes"]
    assert channel.removed.is_set()
    assert not subscription._thread.is_alive()


def test_closing_an_unstarted_subscription_is_a_no_op():
    subscription = RealtimeSubscription(SETTINGS, lambda payload: None)
    subscription.close()
    assert not subscription._thread.is_alive()

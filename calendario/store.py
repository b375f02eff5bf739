from __future__ import annotations

import asyncio
import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Protocol

import httpx
from postgrest.exceptions import APIError
from supabase import Client, acreate_client, create_client

from calendario.config import Settings
from calendario.models import CalendarEvent, Region

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[dict], None]


class StoreError(Exception):
    """Falha em uma chamada ao banco remoto."""


@dataclass(frozen=True)
class NewEvent:
    """Dados de um evento ainda não gravado."""
    month_index: int
    day: int
    event_text: str
    region: Region
    event_link: str | None = None

    def to_row(self) -> dict[str, Any]:
        return {
            "month_index": self.month_index,
            "day": self.day,
            "event_text": self.event_text,
            # link vazio vai como NULL, nunca como ""
            "event_link": self.event_link or None,
            "region": Region(self.region).value,
        }


class Subscription(Protocol):
    def close(self) -> None: ...


class EventStore(Protocol):
    """O que o calendário precisa do banco: ler tudo, inserir, apagar e ouvir mudanças."""

    def fetch_all(self) -> list[CalendarEvent]: ...

    def insert(self, new_event: NewEvent) -> None: ...

    def delete(self, event_id: str) -> None: ...

    def subscribe(self, callback: ChangeCallback) -> Subscription: ...


class SupabaseEventStore:
    """EventStore sobre a tabela `events` do Supabase."""

    def __init__(self, settings: Settings, client: Client | None = None):
        self.settings = settings
        self.table = settings.table
        self._client = client

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = create_client(self.settings.supabase_url, self.settings.supabase_key)
        return self._client

    def fetch_all(self) -> list[CalendarEvent]:
        """Todas as linhas, da mais antiga para a mais nova. Linhas inválidas são ignoradas."""
        query = self.client.table(self.table).select("*").order("created_at", desc=False)
        rows = self._execute("select", query).data or []
        logger.debug("%d eventos lidos de %s", len(rows), self.table)

        events = []
        for row in rows:
            try:
                events.append(CalendarEvent.from_row(row))
            except (KeyError, TypeError, ValueError) as exc:
                logger.warning("Linha ignorada em %s (%s): %r", self.table, exc, row)
        return events

    def insert(self, new_event: NewEvent) -> None:
        self._execute("insert", self.client.table(self.table).insert(new_event.to_row()))

    def delete(self, event_id: str) -> None:
        self._execute("delete", self.client.table(self.table).delete().eq("id", event_id))

    def _execute(self, action: str, query):
        try:
            return query.execute()
        except APIError as exc:
            raise StoreError(f"{action} em {self.table} falhou: {exc.message}") from exc
        except httpx.HTTPError as exc:
            raise StoreError(f"{action} em {self.table} falhou: {exc}") from exc

    def subscribe(self, callback: ChangeCallback) -> Subscription:
        subscription = RealtimeSubscription(self.settings, callback)
        subscription.start()
        return subscription


class RealtimeSubscription:
    """
    Canal realtime (postgres_changes) numa thread própria com o seu event loop.
    O callback é chamado nessa thread para cada INSERT/UPDATE/DELETE na tabela.
    """

    channel_name = "events_changes"

    def __init__(self, settings: Settings, callback: ChangeCallback):
        self.settings = settings
        self.callback = callback
        self._loop = asyncio.new_event_loop()
        self._stopped = asyncio.Event()
        self._thread = threading.Thread(target=self._run, name="calendario-realtime", daemon=True)

    def start(self) -> None:
        self._thread.start()

    def close(self) -> None:
        if not self._thread.is_alive():
            return
        self._loop.call_soon_threadsafe(self._stopped.set)
        self._thread.join(timeout=5)

    # ---------------- thread do realtime ----------------

    def _run(self) -> None:
        asyncio.set_event_loop(self._loop)
        try:
            self._loop.run_until_complete(self._listen())
        except Exception:
            logger.exception("Canal realtime encerrado com erro")
        finally:
            self._loop.close()

    async def _listen(self) -> None:
        client = await acreate_client(self.settings.supabase_url, self.settings.supabase_key)
        channel = client.channel(self.channel_name)
        channel.on_postgres_changes(
            "*",
            schema="public",
            table=self.settings.table,
            callback=self._on_change,
        )
        await channel.subscribe(self._on_status)
        try:
            await self._stopped.wait()
        finally:
            await client.remove_channel(channel)
            logger.info("Canal realtime %s fechado", self.channel_name)

    def _on_status(self, status, error=None) -> None:
        if error is not None:
            logger.error("Status da inscrição realtime: %s (%s)", status, error)
        else:
            logger.info("Status da inscrição realtime: %s", status)

    def _on_change(self, payload: dict) -> None:
        logger.debug("Mudança detectada em %s: %s", self.settings.table, payload)
        self.callback(payload)

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping


class Region(str, Enum):
    """Regiões atendidas pelo calendário."""
    SC = "SC"
    RS = "RS"
    PR = "PR"

    @property
    def label(self) -> str:
        return REGION_LABELS[self]


REGION_LABELS = {
    Region.SC: "Santa Catarina (SC)",
    Region.RS: "Rio Grande do Sul (RS)",
    Region.PR: "Paraná (PR)",
}

DEFAULT_REGION = Region.SC


@dataclass(frozen=True)
class CalendarEvent:
    """Representa um evento do calendário (uma linha da tabela `events`)."""
    id: str
    month_index: int  # 0 = janeiro
    day: int
    event_text: str
    region: Region
    event_link: str | None = None
    created_at: str | None = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "CalendarEvent":
        """Converte uma linha vinda do banco; colunas extras são ignoradas."""
        return cls(
            id=str(row["id"]),
            month_index=int(row["month_index"]),
            day=int(row["day"]),
            event_text=row.get("event_text") or "",
            region=Region(row["region"]),
            event_link=row.get("event_link") or None,
            created_at=row.get("created_at"),
        )


# mês -> dia -> eventos daquele dia, na ordem em que vieram do banco
EventIndex = dict[int, dict[int, list[CalendarEvent]]]


def build_event_index(events: Iterable[CalendarEvent]) -> EventIndex:
    """
    Agrupa a lista plana de eventos por mês e depois por dia.
    A ordem dentro de cada dia é a ordem de entrada.
    """
    index: EventIndex = {}
    for ev in events:
        month = index.setdefault(ev.month_index, {})
        month.setdefault(ev.day, []).append(ev)
    return index


def events_for_day(index: EventIndex, month_index: int, day: int) -> list[CalendarEvent]:
    """Eventos de (mês, dia); lista vazia quando não há nada no dia."""
    return list(index.get(month_index, {}).get(day, []))


def flatten_index(index: EventIndex) -> list[CalendarEvent]:
    return [ev for days in index.values() for events in days.values() for ev in events]

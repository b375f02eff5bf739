from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Iterable, Literal, Union

from calendario.models import CalendarEvent, EventIndex, Region, flatten_index

YEAR = 2026
PROXIMITY_DAYS = 7

MONTH_NAMES = [
    "Janeiro", "Fevereiro", "Março", "Abril", "Maio", "Junho",
    "Julho", "Agosto", "Setembro", "Outubro", "Novembro", "Dezembro",
]
# começa no domingo, como a grade mensal
DAY_NAMES = ["Dom", "Seg", "Ter", "Qua", "Qui", "Sex", "Sáb"]
DAYS_IN_MONTH = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

ALL_REGIONS = "all"
RegionFilter = Union[Literal["all"], Region]


class CellStyle(str, Enum):
    TODAY = "today"
    PROXIMATE = "proximate"
    HAS_EVENTS = "has_events"
    EMPTY = "empty"


# ---------------- filtro por região ----------------

def toggle_region_filter(current: RegionFilter, selected: RegionFilter) -> RegionFilter:
    """Clicar de novo na região ativa volta para "todas"; outra região substitui o filtro."""
    if selected == current and selected != ALL_REGIONS:
        return ALL_REGIONS
    return selected


def filter_events(events: Iterable[CalendarEvent], region_filter: RegionFilter) -> list[CalendarEvent]:
    if region_filter == ALL_REGIONS:
        return list(events)
    return [ev for ev in events if ev.region == region_filter]


def regional_counts(index: EventIndex) -> dict[Region, int]:
    """Total de eventos por região, sem filtro."""
    counts = {region: 0 for region in Region}
    for ev in flatten_index(index):
        counts[ev.region] += 1
    return counts


# ---------------- datas ----------------

def event_date(month_index: int, day: int) -> date:
    """
    Data do evento em YEAR. Dias além do fim do mês avançam para o mês
    seguinte (30 de fevereiro -> 2 de março).
    """
    return date(YEAR, month_index + 1, 1) + timedelta(days=day - 1)


def days_until(month_index: int, day: int, today: date) -> int:
    return (event_date(month_index, day) - today).days


def is_proximate(month_index: int, day: int, today: date) -> bool:
    """True se a data está entre hoje e hoje + PROXIMITY_DAYS (inclusive)."""
    return 0 <= days_until(month_index, day, today) <= PROXIMITY_DAYS


def first_weekday(month_index: int) -> int:
    """Dia da semana do dia 1 do mês, com 0 = domingo."""
    return (date(YEAR, month_index + 1, 1).weekday() + 1) % 7


def format_day_title(month_index: int, day: int) -> str:
    """Ex.: "Dom, 15 de Março de 2026"."""
    d = event_date(month_index, day)
    weekday = DAY_NAMES[(d.weekday() + 1) % 7]
    return f"{weekday}, {day} de {MONTH_NAMES[month_index]} de {YEAR}"


def _plural(count: int, word: str) -> str:
    return word if count == 1 else word + "s"


# ---------------- visão anual ----------------

@dataclass(frozen=True)
class MonthSummary:
    month_index: int
    name: str
    days: int
    count: int
    has_proximate: bool
    style: CellStyle
    caption: str


def summarize_month(
    index: EventIndex,
    month_index: int,
    region_filter: RegionFilter,
    today: date,
) -> MonthSummary:
    """Contagem filtrada do mês e se há algum evento filtrado nos próximos dias."""
    count = 0
    has_proximate = False
    for day, day_events in index.get(month_index, {}).items():
        filtered = filter_events(day_events, region_filter)
        count += len(filtered)
        if filtered and not has_proximate and is_proximate(month_index, day, today):
            has_proximate = True

    if has_proximate:
        style = CellStyle.PROXIMATE
        caption = f"EVENTO PRÓXIMO! ({count} {_plural(count, 'Evento')})"
    elif count > 0:
        style = CellStyle.HAS_EVENTS
        caption = f"{count} {_plural(count, 'Evento')} {_plural(count, 'Encontrado')}"
    else:
        style = CellStyle.EMPTY
        if region_filter != ALL_REGIONS:
            caption = f"Sem eventos em {Region(region_filter).value}"
        else:
            caption = "Clique para agendar eventos"

    return MonthSummary(
        month_index=month_index,
        name=MONTH_NAMES[month_index],
        days=DAYS_IN_MONTH[month_index],
        count=count,
        has_proximate=has_proximate,
        style=style,
        caption=caption,
    )


def summarize_year(index: EventIndex, region_filter: RegionFilter, today: date) -> list[MonthSummary]:
    return [summarize_month(index, m, region_filter, today) for m in range(12)]


# ---------------- visão mensal ----------------

@dataclass(frozen=True)
class DaySummary:
    day: int
    count: int
    is_today: bool
    is_proximate: bool
    style: CellStyle


@dataclass(frozen=True)
class MonthGrid:
    month_index: int
    leading_blanks: int
    days: list[DaySummary]

    @property
    def title(self) -> str:
        return f"{MONTH_NAMES[self.month_index]}, {YEAR}"


def summarize_day(
    index: EventIndex,
    month_index: int,
    day: int,
    region_filter: RegionFilter,
    today: date,
) -> DaySummary:
    filtered = filter_events(index.get(month_index, {}).get(day, []), region_filter)
    has_events = len(filtered) > 0
    proximate = has_events and is_proximate(month_index, day, today)
    is_today = (today.year, today.month - 1, today.day) == (YEAR, month_index, day)

    if is_today:
        style = CellStyle.TODAY
    elif proximate:
        style = CellStyle.PROXIMATE
    elif has_events:
        style = CellStyle.HAS_EVENTS
    else:
        style = CellStyle.EMPTY

    return DaySummary(day=day, count=len(filtered), is_today=is_today, is_proximate=proximate, style=style)


def build_month_grid(
    index: EventIndex,
    month_index: int,
    region_filter: RegionFilter,
    today: date,
) -> MonthGrid:
    """Grade de 7 colunas: espaços vazios até o dia 1 e depois um item por dia."""
    days = [
        summarize_day(index, month_index, day, region_filter, today)
        for day in range(1, DAYS_IN_MONTH[month_index] + 1)
    ]
    return MonthGrid(month_index=month_index, leading_blanks=first_weekday(month_index), days=days)

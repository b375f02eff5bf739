from collections import Counter

from calendario.models import (
    CalendarEvent, Region, build_event_index, events_for_day, flatten_index
)

from conftest import make_event


def test_build_event_index_groups_by_month_and_day():
    first = make_event(2, 15, "Feira")
    second = make_event(2, 15, "Congresso", region=Region.RS)
    other = make_event(5, 1, "Palestra")

    index = build_event_index([first, other, second])

    assert set(index) == {2, 5}
    assert index[2][15] == [first, second]
    assert index[5][1] == [other]


def test_build_event_index_keeps_input_order_within_a_day():
    events = [make_event(0, 3, f"e{i}") for i in range(5)]
    index = build_event_index(events)
    assert [ev.event_text for ev in index[0][3]] == ["e0", "e1", "e2", "e3", "e4"]


def test_empty_input_gives_empty_index():
    index = build_event_index([])
    assert index == {}
    assert events_for_day(index, 0, 1) == []
    assert events_for_day(index, 11, 31) == []


def test_round_trip_preserves_events():
    events = [
        make_event(0, 1, "a"),
        make_event(0, 1, "b", region=Region.PR),
        make_event(3, 30, "c", region=Region.RS),
        make_event(1, 31, "dia inexistente"),
    ]
    assert Counter(flatten_index(build_event_index(events))) == Counter(events)


def test_events_for_day_returns_a_copy():
    index = build_event_index([make_event(4, 4)])
    bucket = events_for_day(index, 4, 4)
    bucket.clear()
    assert len(index[4][4]) == 1


def test_from_row_normalizes_link_and_ignores_extra_columns():
    row = {
        "id": 42,
        "month_index": 2,
        "day": 15,
        "event_text": "Feira",
        "event_link": "",
        "region": "SC",
        "created_at": "2026-01-01T10:00:00+00:00",
        "extra": "ignorado",
    }
    ev = CalendarEvent.from_row(row)
    assert ev.id == "42"
    assert ev.event_link is None
    assert ev.region is Region.SC
    assert ev.created_at == "2026-01-01T10:00:00+00:00"


def test_region_labels():
    assert Region.PR.label == "Paraná (PR)"
    assert [r.value for r in Region] == ["SC", "RS", "PR"]

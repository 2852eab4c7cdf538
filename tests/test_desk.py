import time

import pytest

from ticketdesk.desk import (
    Status,
    Ticket,
    TicketDesk,
    TicketError,
    current_time,
    higher_priority,
    parse_positive_int,
)


@pytest.fixture
def desk():
    d = TicketDesk()
    d.register(1, 100, "Ana", "09:00")
    d.register(2, 200, "Beto", "09:05")
    d.register(3, 300, "Carla", "09:10")
    return d


def ids(tickets):
    return [t.ticket_id for t in tickets]


def test_parse_positive_int():
    assert parse_positive_int("42") == 42
    for bad in ["0", "-3", "12a", "", "abc"]:
        with pytest.raises(ValueError):
            parse_positive_int(bad)


def test_current_time_format():
    before = time.strftime("%H:%M")
    value = current_time()
    after = time.strftime("%H:%M")
    assert len(value) == 5
    assert value in {before, after}
    hours, minutes = value.split(":")
    assert 0 <= int(hours) < 24
    assert 0 <= int(minutes) < 60


def test_higher_priority():
    a = Ticket(1, 1, "a", "00:00", priority=3)
    b = Ticket(2, 2, "b", "00:00", priority=1)
    assert higher_priority(a, b) is True
    assert higher_priority(b, a) is False
    assert higher_priority(a, a) is False


def test_ticket_lines():
    t = Ticket(7, 123, "Ana", "10:30")
    assert t.pending_line() == "ID: 7, Rut: 123, Nombre: Ana, Hora: 10:30"
    assert t.full_line() == (
        "ID: 7, Rut: 123, Nombre: Ana, Hora: 10:30, Estado: Pendiente, Prioridad: 1"
    )


def test_register_defaults(desk):
    t = desk.pending_tickets()[0]
    assert t.priority == 1
    assert t.status is Status.PENDING
    assert ids(desk.pending_tickets()) == [1, 2, 3]


def test_register_truncates_name():
    d = TicketDesk()
    t = d.register(1, 1, "x" * 200, "00:00")
    assert len(t.name) == 120


def test_register_uses_current_time_when_missing():
    d = TicketDesk()
    before = time.strftime("%H:%M")
    t = d.register(1, 1, "Ana")
    after = time.strftime("%H:%M")
    assert t.time in {before, after}
    assert len(t.time) == 5


def test_register_rejects_duplicates_and_bad_values(desk):
    with pytest.raises(TicketError):
        desk.register(2, 1, "Otro", "10:00")
    with pytest.raises(TicketError):
        desk.register(0, 1, "Otro", "10:00")
    with pytest.raises(TicketError):
        desk.register(9, 0, "Otro", "10:00")
    assert len(desk.pending_tickets()) == 3


def test_id_exists_checks_both_lists(desk):
    desk.attend_next()
    assert desk.id_exists(1)
    assert desk.id_exists(3)
    assert not desk.id_exists(99)
    with pytest.raises(TicketError):
        desk.register(1, 1, "Otro", "10:00")


def test_set_priority_reorders(desk):
    desk.set_priority(3, 3)
    assert ids(desk.pending_tickets()) == [3, 1, 2]
    desk.set_priority(2, 2)
    assert ids(desk.pending_tickets()) == [3, 2, 1]
    desk.set_priority(1, 3)
    assert ids(desk.pending_tickets()) == [3, 1, 2]


def test_set_priority_errors(desk):
    with pytest.raises(TicketError, match="no ha cambiado"):
        desk.set_priority(1, 1)
    with pytest.raises(TicketError, match="Prioridad inválida"):
        desk.set_priority(1, 4)
    with pytest.raises(TicketError, match="No se encontró"):
        desk.set_priority(99, 2)
    assert ids(desk.pending_tickets()) == [1, 2, 3]


def test_set_priority_on_empty_desk():
    with pytest.raises(TicketError, match="No hay tickets en espera"):
        TicketDesk().set_priority(1, 2)


def test_attend_next_moves_ticket(desk):
    desk.set_priority(2, 3)
    t = desk.attend_next()
    assert t.ticket_id == 2
    assert t.status is Status.ATTENDED
    assert ids(desk.pending_tickets()) == [1, 3]
    assert ids(desk.attended_tickets()) == [2]


def test_attended_sorted_by_priority(desk):
    desk.set_priority(3, 2)
    order = [desk.attend_next().ticket_id for _ in range(3)]
    assert order == [3, 1, 2]
    assert ids(desk.attended_tickets()) == [3, 1, 2]
    with pytest.raises(TicketError):
        desk.attend_next()
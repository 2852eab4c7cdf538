"""Ticket records and the desk that queues and attends them."""

from __future__ import annotations

import time as _time
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .linkedlist import LinkedList

NAME_LIMIT = 120
MIN_PRIORITY = 1
MAX_PRIORITY = 3


class Status(Enum):
    PENDING = "Pendiente"
    ATTENDED = "Atendido"


class TicketError(Exception):
    """Raised when a desk operation cannot be carried out."""


@dataclass
class Ticket:
    ticket_id: int
    rut: int
    name: str
    time: str
    priority: int = MIN_PRIORITY
    status: Status = Status.PENDING

    def pending_line(self) -> str:
        """Short line used in the waiting list."""
        return f"ID: {self.ticket_id}, Rut: {self.rut}, Nombre: {self.name}, Hora: {self.time}"

    def full_line(self) -> str:
        """Line with status and priority."""
        return (
            f"{self.pending_line()}, Estado: {self.status.value}, "
            f"Prioridad: {self.priority}"
        )


def parse_positive_int(text: str) -> int:
    """Parse a whole string as a positive integer; raise ValueError otherwise."""
    value = int(text.strip(), 10)
    if value <= 0:
        raise ValueError(f"not a positive number: {text!r}")
    return value


def current_time() -> str:
    """Local time as HH:MM."""
    return _time.strftime("%H:%M", _time.localtime())


def higher_priority(first: Ticket, second: Ticket) -> bool:
    """True when ``first`` should be placed before ``second``."""
    return first.priority > second.priority


class TicketDesk:
    """Holds the pending and the attended tickets."""

    def __init__(self) -> None:
        self.pending = LinkedList()
        self.attended = LinkedList()

    def id_exists(self, ticket_id: int) -> bool:
        return any(
            ticket.ticket_id == ticket_id
            for queue in (self.pending, self.attended)
            for ticket in queue
        )

    def register(
        self, ticket_id: int, rut: int, name: str, time: Optional[str] = None
    ) -> Ticket:
        """Add a new pending ticket with the lowest priority."""
        if self.id_exists(ticket_id):
            raise TicketError("El ID ya existe. Por favor, ingrese un ID diferente.")
        if ticket_id <= 0:
            raise TicketError("Entrada inválida. Por favor, ingrese un ID válido (numérico y positivo).")
        if rut <= 0:
            raise TicketError("Entrada inválida. Por favor, ingrese un rut válido (numérico y positivo).")
        ticket = Ticket(
            ticket_id=ticket_id,
            rut=rut,
            name=name[:NAME_LIMIT],
            time=current_time() if time is None else time,
        )
        self.pending.push_back(ticket)
        return ticket

    def pending_tickets(self) -> list[Ticket]:
        return [t for t in self.pending if t.status is Status.PENDING]

    def attended_tickets(self) -> list[Ticket]:
        return list(self.attended)

    def _seek_pending(self, ticket_id: int) -> Optional[Ticket]:
        ticket = self.pending.first()
        while ticket is not None:
            if ticket.ticket_id == ticket_id:
                return ticket
            ticket = self.pending.next()
        return None

    def set_priority(self, ticket_id: int, priority: int) -> Ticket:
        """Change a pending ticket's priority and reorder the queue."""
        if len(self.pending) == 0:
            raise TicketError("No hay tickets en espera.")
        ticket = self._seek_pending(ticket_id)
        if ticket is None:
            raise TicketError("No se encontró un ticket con el ID especificado.")
        if not MIN_PRIORITY <= priority <= MAX_PRIORITY:
            raise TicketError("Prioridad inválida. Debe ser 1, 2 o 3.")
        if priority == ticket.priority:
            raise TicketError("La prioridad no ha cambiado.")
        self.pending.pop_current()
        ticket.priority = priority
        self.pending.sorted_insert(ticket, higher_priority)
        return ticket

    def attend_next(self) -> Ticket:
        """Attend the first pending ticket and move it to the attended list."""
        if len(self.pending) == 0:
            raise TicketError("No hay Tickets en espera.")
        ticket = self.pending.first()
        while ticket is not None:
            if ticket.status is Status.PENDING:
                ticket.status = Status.ATTENDED
                self.pending.pop_current()
                self.attended.sorted_insert(ticket, higher_priority)
                return ticket
            ticket = self.pending.next()
        raise TicketError("No hay Tickets pendientes para atender.")
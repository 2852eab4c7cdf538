# ticketdesk

A small console application for running a service desk queue. You register
customer tickets, raise a ticket's priority, and attend tickets in queue order.
The menu and its messages are in Spanish.

## Installation

```
pip install .
```

## Usage

Start the interactive menu:

```
ticketdesk
```

The menu offers these options:

1. **Registrar Ticket**: enter a positive numeric ID that no pending or
   attended ticket already uses, then the customer's RUT (digits only, no dots
   or check digit), then the customer's name. A name longer than 120
   characters is cut to 120. The ticket gets the current local time (`HH:MM`)
   and priority 1. If the ID or RUT is not valid, the menu asks for it again.
2. **Asignar prioridad a Ticket**: shows the waiting list, then asks for a
   pending ticket's ID and a new priority: 1 (low), 2 (medium) or 3 (high).
   The ticket is taken out of the queue and put back in front of every ticket
   with a lower priority and behind those with an equal or higher one.
3. **Mostrar lista de espera**: lists the pending tickets in queue order.
4. **Atender al siguiente Ticket**: attends the first pending ticket and moves
   it to the list of attended tickets, which is also kept ordered by priority.
5. **Mostrar Tickets por prioridad**: lists the pending and the attended
   tickets with their status and priority.
6. **Salir**: leaves the program.

After each option the menu waits for Enter. The program also stops when its
input ends. When output goes to a terminal, the screen is cleared with the
system's `clear` command before each screen.

## Using it from Python

The queue logic is available without the menu, in `ticketdesk.desk`:

```python
from ticketdesk.desk import TicketDesk

desk = TicketDesk()
desk.register(101, 11111, "Ana Pérez", "09:30")
desk.register(102, 22222, "Luis Soto", "09:35")
desk.set_priority(102, 3)

for ticket in desk.pending_tickets():
    print(ticket.full_line())

attended = desk.attend_next()
print(attended.pending_line())
```

- `TicketDesk.register(ticket_id, rut, name, time=None)` adds a pending
  `Ticket` with priority 1. Without `time` it uses `current_time()`.
- `TicketDesk.set_priority(ticket_id, priority)` changes a pending ticket's
  priority and reorders the queue.
- `TicketDesk.attend_next()` marks the first pending ticket as
  `Status.ATTENDED` and moves it to the attended list.
- `TicketDesk.pending_tickets()` and `TicketDesk.attended_tickets()` return
  the tickets as lists; `TicketDesk.id_exists(ticket_id)` checks both lists.
- `Ticket.pending_line()` and `Ticket.full_line()` give the lines the menu
  prints.

These raise `TicketError` with the menu's message when:

- `register`: the ID is already used, or the ID or RUT is not positive;
- `set_priority`: no ticket is pending, the ID is not found, the priority is
  not 1, 2 or 3, or the priority is unchanged;
- `attend_next`: no ticket is pending.

Helpers in the same module: `parse_positive_int(text)` raises `ValueError` for
anything but a positive whole number, and `higher_priority(first, second)` is
the ordering used for both queues.

The menu can be driven with any text streams through
`ticketdesk.cli.run(desk, stdin, stdout)`.

`ticketdesk.linkedlist.LinkedList` is the doubly linked list the desk keeps
its queues in. It has a cursor moved by `first()`, `next()` and `prev()`,
insertion with `push_back`, `push_front`, `push_current` and
`sorted_insert(item, lower_than)`, removal with `pop_front`, `pop_back`,
`pop_current` and `clear`, and supports `len()` and iteration. The pop methods
and `push_current` raise `IndexError` when there is nothing to act on.

## What it does not do

Tickets are kept in memory only. Nothing is saved to disk, so every ticket is
lost when the program exits.

## Running the tests

```
pip install .[test]
pytest
```
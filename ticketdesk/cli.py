"""Interactive menu for the ticket desk."""

from __future__ import annotations

import subprocess
import sys
from typing import Optional, Sequence, TextIO

from .desk import TicketDesk, TicketError, current_time, parse_positive_int

MENU = (
    "========================================\n"
    "     Sistema de Gestión de Tickets\n"
    "========================================\n"
    "1) Registrar Ticket\n"
    "2) Asignar prioridad a Ticket\n"
    "3) Mostrar lista de espera\n"
    "4) Atender al siguiente Ticket\n"
    "5) Mostrar Tickets por prioridad\n"
    "6) Salir"
)


def clear_screen() -> None:
    """Clear the terminal with the system's clear command."""
    try:
        subprocess.run(["clear"], check=False)
    except OSError:
        pass


class _Console:
    def __init__(self, desk: TicketDesk, stdin: TextIO, stdout: TextIO) -> None:
        self.desk = desk
        self.stdin = stdin
        self.stdout = stdout

    def say(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def ask(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def clear(self) -> None:
        isatty = getattr(self.stdout, "isatty", None)
        if isatty is not None and isatty():
            self.stdout.flush()
            clear_screen()

    def read_id(self) -> int:
        while True:
            text = self.ask("Ingrese un ID: ").strip()
            try:
                value = int(text, 10)
            except ValueError:
                value = None
            if value is not None and self.desk.id_exists(value):
                self.say("El ID ya existe. Por favor, ingrese un ID diferente.")
                continue
            try:
                return parse_positive_int(text)
            except ValueError:
                self.say("Entrada inválida. Por favor, ingrese un ID válido (numérico y positivo).")

    def read_rut(self) -> int:
        while True:
            text = self.ask("Ingrese un rut (sin puntos ni digito verificador): ")
            try:
                return parse_positive_int(text)
            except ValueError:
                self.say("Entrada inválida. Por favor, ingrese un rut válido (numérico y positivo).")

    def register(self) -> None:
        self.clear()
        self.say("Registrar nuevo ticket")
        ticket_id = self.read_id()
        rut = self.read_rut()
        name = self.ask("Ingresar nombre del cliente: ")
        self.desk.register(ticket_id, rut, name, current_time())

    def show_pending(self) -> None:
        self.clear()
        tickets = self.desk.pending_tickets()
        if not tickets:
            self.say("No hay tickets en espera.")
            return
        self.say("Tickets en espera: ")
        for ticket in tickets:
            self.say(ticket.pending_line())

    def modify(self) -> None:
        self.clear()
        pending = self.desk.pending_tickets()
        if not pending:
            self.say("No hay tickets en espera.")
            return
        self.show_pending()
        text = self.ask("Ingrese el ID del ticket a modificar: ").strip()
        try:
            ticket_id = int(text, 10)
        except ValueError:
            ticket_id = None
        ticket = next((t for t in pending if t.ticket_id == ticket_id), None)
        if ticket is None:
            self.say("No se encontró un ticket con el ID especificado.")
            return
        self.clear()
        self.say(f"Modificar Ticket ID: {ticket.ticket_id}")
        self.say(f"Prioridad actual: {ticket.priority}")
        text = self.ask("Ingresar nueva prioridad (1 para Baja, 2 para Media y 3 para Alta): ")
        try:
            priority = int(text.strip(), 10)
        except ValueError:
            self.say("Prioridad inválida. Debe ser 1, 2 o 3.")
            return
        try:
            self.desk.set_priority(ticket.ticket_id, priority)
        except TicketError as error:
            self.say(str(error))
            return
        self.say("El ticket ha sido modificado y reordenado según su prioridad.")

    def attend(self) -> None:
        self.clear()
        try:
            ticket = self.desk.attend_next()
        except TicketError as error:
            self.say(str(error))
            return
        self.say(f"Atendiendo Ticket {ticket.pending_line()}")
        self.say("El ticket ha sido atendido y movido a la lista de Tickets atendidos.")

    def show_by_priority(self) -> None:
        self.clear()
        pending = self.desk.pending_tickets()
        attended = self.desk.attended_tickets()
        if not pending and not attended:
            self.say("No hay tickets Registrados.")
            return
        if not pending:
            self.say("No hay tickets pendientes.")
        elif not attended:
            self.say("No hay tickets atendidos.")
        if pending:
            self.say("Tickets pendientes por prioridad: ")
            for ticket in pending:
                self.say(ticket.full_line())
        if attended:
            self.say("Tickets atendidos por prioridad: ")
            for ticket in attended:
                self.say(ticket.full_line())

    def loop(self) -> None:
        actions = {
            "1": self.register,
            "2": self.modify,
            "3": self.show_pending,
            "4": self.attend,
            "5": self.show_by_priority,
        }
        while True:
            self.clear()
            self.say(MENU)
            option = self.ask("Ingrese su opción: ").strip()[:1]
            action = actions.get(option)
            if action is not None:
                action()
            elif option == "6":
                self.say("Saliendo del sistema de gestión de Tickets...")
            else:
                self.say("Opción no válida. Por favor, intente de nuevo.")
            self.say("Presione una tecla para continuar...")
            self.stdin.readline()
            if option == "6":
                return


def run(desk: TicketDesk, stdin: TextIO, stdout: TextIO) -> None:
    """Run the menu until the user quits or input ends."""
    try:
        _Console(desk, stdin, stdout).loop()
    except EOFError:
        pass


def main(argv: Optional[Sequence[str]] = None) -> int:
    run(TicketDesk(), sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
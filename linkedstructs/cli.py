"""Interactive console menus for exploring the linked structures."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional, TextIO, Union

from linkedstructs.structures import LinkedList, Node, Queue, Stack

_INT_RE = re.compile(r"[+-]?\d+")


class _Reader:
    """Whitespace-skipping token reader over a line-oriented text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _fill(self) -> bool:
        line = self._stream.readline()
        if not line:
            return False
        self._buffer += line
        return True

    def _skip_whitespace(self) -> bool:
        while True:
            self._buffer = self._buffer.lstrip()
            if self._buffer:
                return True
            if not self._fill():
                return False

    def read_char(self) -> Optional[str]:
        """Return the next non-blank character, or None at end of input."""
        if not self._skip_whitespace():
            return None
        char, self._buffer = self._buffer[0], self._buffer[1:]
        return char

    def read_int(self) -> Optional[int]:
        """Return the next integer, or None if there is none to read."""
        if not self._skip_whitespace():
            return None
        match = _INT_RE.match(self._buffer)
        if match is None:
            return None
        self._buffer = self._buffer[match.end():]
        return int(match.group())

    def ignore_line(self) -> None:
        """Discard input up to and including the next newline."""
        while True:
            newline = self._buffer.find("\n")
            if newline >= 0:
                self._buffer = self._buffer[newline + 1:]
                return
            self._buffer = ""
            if not self._fill():
                return


InputSource = Union[TextIO, _Reader, None]


def _reader(source: InputSource) -> _Reader:
    if isinstance(source, _Reader):
        return source
    return _Reader(sys.stdin if source is None else source)


def _writer(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


@dataclass
class MenuOption:
    """A numbered menu entry and the action it runs."""

    description: str
    action: Callable[[], None]


class InteractiveMenu:
    """A numbered menu that loops until the user chooses 0."""

    def __init__(
        self,
        title: str,
        input_stream: InputSource = None,
        output_stream: Optional[TextIO] = None,
    ) -> None:
        self.title = title
        self.options: List[MenuOption] = []
        self._input = _reader(input_stream)
        self._output = _writer(output_stream)

    def add_option(self, description: str, action: Callable[[], None]) -> None:
        """Append an entry to the menu."""
        self.options.append(MenuOption(description, action))

    def display(self) -> None:
        """Write the menu and the prompt."""
        out = self._output
        out.write(f"\n=== {self.title} ===\n")
        for number, option in enumerate(self.options, start=1):
            out.write(f"{number}. {option.description}\n")
        out.write("0. Salir\n")
        out.write("Seleccione una opción: ")
        out.flush()

    def run(self) -> None:
        """Show the menu and dispatch choices until 0 or unreadable input."""
        while True:
            self.display()
            choice = self._input.read_int()
            if choice is None:
                choice = 0
            self._input.ignore_line()
            if 0 < choice <= len(self.options):
                self.options[choice - 1].action()
            elif choice != 0:
                self._output.write("Opción inválida. Intente de nuevo.\n")
            else:
                return


def run_linked_list_demo(
    input_stream: InputSource = None, output_stream: Optional[TextIO] = None
) -> None:
    """Run the interactive linked-list menu."""
    reader = _reader(input_stream)
    out = _writer(output_stream)
    items: LinkedList[str] = LinkedList()
    menu = InteractiveMenu("Lista Enlazada", reader, out)

    def insert() -> None:
        out.write("Ingrese un carácter: ")
        value = reader.read_char()
        if value is None:
            return
        items.insert(value)
        out.write("Elemento insertado.\n")

    def remove() -> None:
        out.write("Ingrese carácter a eliminar: ")
        value = reader.read_char()
        if value is None:
            return
        if items.remove(value):
            out.write("Elemento eliminado.\n")
        else:
            out.write("Elemento no encontrado.\n")

    def search() -> None:
        out.write("Ingrese carácter a buscar: ")
        value = reader.read_char()
        if value is None:
            return
        out.write(("Encontrado" if value in items else "No encontrado") + "\n")

    def show() -> None:
        out.write("Elementos: " + "".join(f"{c} " for c in items) + "\n")

    def size() -> None:
        out.write(f"Tamaño: {len(items)}\n")

    menu.add_option("Insertar elemento", insert)
    menu.add_option("Eliminar elemento", remove)
    menu.add_option("Buscar elemento", search)
    menu.add_option("Mostrar elementos", show)
    menu.add_option("Tamaño de la lista", size)
    menu.run()


def run_stack_demo(
    input_stream: InputSource = None, output_stream: Optional[TextIO] = None
) -> None:
    """Run the interactive stack menu."""
    reader = _reader(input_stream)
    out = _writer(output_stream)
    stack: Stack[str] = Stack()
    menu = InteractiveMenu("Pila (LIFO)", reader, out)

    def push() -> None:
        out.write("Ingrese un carácter: ")
        value = reader.read_char()
        if value is None:
            return
        stack.push(value)
        out.write("Elemento apilado.\n")

    def pop() -> None:
        if not stack:
            out.write("Pila vacía.\n")
        else:
            out.write(f"Elemento desapilado: {stack.pop()}\n")

    def top() -> None:
        if not stack:
            out.write("Pila vacía.\n")
        else:
            out.write(f"Tope: {next(iter(stack))}\n")

    def show() -> None:
        if not stack:
            out.write("Pila vacía.\n")
        else:
            out.write(
                "Elementos (desde el tope): " + "".join(f"{c} " for c in stack) + "\n"
            )

    menu.add_option("Push (Apilar)", push)
    menu.add_option("Pop (Desapilar)", pop)
    menu.add_option("Mostrar tope", top)
    menu.add_option("Mostrar elementos", show)
    menu.run()


def run_queue_demo(
    input_stream: InputSource = None, output_stream: Optional[TextIO] = None
) -> None:
    """Run the interactive queue menu."""
    reader = _reader(input_stream)
    out = _writer(output_stream)
    queue: Queue[str] = Queue()
    menu = InteractiveMenu("Cola (FIFO)", reader, out)

    def enqueue() -> None:
        out.write("Ingrese un carácter: ")
        value = reader.read_char()
        if value is None:
            return
        queue.enqueue(value)
        out.write("Elemento encolado.\n")

    def dequeue() -> None:
        if not queue:
            out.write("Cola vacía.\n")
        else:
            out.write(f"Elemento desencolado: {queue.dequeue()}\n")

    def front() -> None:
        if not queue:
            out.write("Cola vacía.\n")
        else:
            out.write(f"Frente: {next(iter(queue))}\n")

    def show() -> None:
        if not queue:
            out.write("Cola vacía.\n")
        else:
            out.write("Elementos: " + "".join(f"{c} " for c in queue) + "\n")

    menu.add_option("Enqueue (Encolar)", enqueue)
    menu.add_option("Dequeue (Desencolar)", dequeue)
    menu.add_option("Mostrar frente", front)
    menu.add_option("Mostrar elementos", show)
    menu.run()


def run_main_menu(
    input_stream: InputSource = None, output_stream: Optional[TextIO] = None
) -> None:
    """Run the top-level menu that leads to each structure's menu."""
    reader = _reader(input_stream)
    out = _writer(output_stream)
    menu = InteractiveMenu("Estructuras de Datos Optimizadas", reader, out)

    def system_info() -> None:
        out.write("Sistema optimizado para bajo consumo de recursos\n")
        out.write(f"Tamaño de nodo: {sys.getsizeof(Node('x'))} bytes\n")
        out.write("Memoria por elemento: 5 bytes (char + puntero)\n")

    menu.add_option("Lista Enlazada", lambda: run_linked_list_demo(reader, out))
    menu.add_option("Pila (LIFO)", lambda: run_stack_demo(reader, out))
    menu.add_option("Cola (FIFO)", lambda: run_queue_demo(reader, out))
    menu.add_option("Mostrar información del sistema", system_info)
    menu.run()


def main(argv: Optional[List[str]] = None) -> int:
    """Start the interactive main menu on standard input and output."""
    parser = argparse.ArgumentParser(
        description="Interactive linked list, stack and queue explorer."
    )
    parser.parse_args(argv)
    run_main_menu()
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Interactive menu over a bounded queue of words."""

from __future__ import annotations

import sys
from typing import Callable, Optional

from dslabs.fifo import (
    BoundedQueue,
    EvacuationGroup,
    QueueEmptyError,
    QueueFullError,
    TurnOutcome,
    evacuation_order,
    take_turns,
)

Reader = Callable[[], str]
Writer = Callable[[str], object]

_MENU = (
    "\n-----------------------------------"
    "\n--        MENÚ DE COLA           --"
    "\n-----------------------------------"
    "\n1. Insertar elemento en la cola   -"
    "\n2. Eliminar elemento de la cola   -"
    "\n3. Ver frente                     -"
    "\n4. Mostrar cola                   -"
    "\n5. Contar elementos               -"
    "\n6. Buscar elemento                -"
    "\n7. Simular evacuación             -"
    "\n8. Juego de turnos                -"
    "\n9. Invertir cola                  -"
    "\n10.Eliminar un valor de cola      -"
    "\n0. Salir                          -"
    "\n-----------------------------------"
    "\nSeleccione una opción: "
)

_FULL = "Desbordamiento - La cola está llena.\n"
_EMPTY = "Cola vacía.\n"

_GROUP_HEADERS = {
    EvacuationGroup.PRIORITY: "\nEvacuando pasajeros prioritarios:\n",
    EvacuationGroup.REGULAR: "\nEvacuando pasajeros regulares:\n",
    EvacuationGroup.CREW: "\nEvacuando tripulación:\n",
}


class _BadInput(Exception):
    """Raised when the user types something that is not a number."""


def _read_int(read: Reader) -> int:
    text = read().strip()
    try:
        return int(text)
    except ValueError:
        raise _BadInput(text) from None


def _read_word(read: Reader) -> str:
    while True:
        tokens = read().split()
        if tokens:
            return tokens[0]


def _insert(queue, read, out):
    out("Ingrese dato a insertar en la cola: ")
    try:
        queue.enqueue(_read_word(read))
    except QueueFullError:
        out(_FULL)


def _remove(queue, read, out):
    try:
        value = queue.dequeue()
    except QueueEmptyError:
        out(_EMPTY)
    else:
        out(f"Elemento eliminado: {value}\n")


def _front(queue, read, out):
    try:
        value = queue.front()
    except QueueEmptyError:
        out(_EMPTY)
    else:
        out(f"Elemento en el frente: {value}\n")


def _show(queue, read, out):
    if queue.is_empty():
        out(_EMPTY)
    else:
        out("Elementos en la cola: " + "".join(f"{v} " for v in queue) + "\n")


def _count(queue, read, out):
    out(f"Total de elementos en la cola: {len(queue)}\n")


def _search(queue, read, out):
    out("Ingrese dato a buscar en la cola: ")
    if _read_word(read) in queue:
        out("Elemento encontrado\n")
    else:
        out("Elemento no encontrado\n")


def _evacuate(queue, read, out):
    out("\nSIMULACIÓN DE EVACUACIÓN DE PASAJEROS\n")
    out("\nINICIANDO PROCESO DE EVACUACIÓN...\n")
    seen = set()
    for group in EvacuationGroup:
        out(_GROUP_HEADERS[group])
        seen.add(group)
    order = evacuation_order()
    # Replay with headers interleaved in group order.
    out_lines = []
    current = None
    for group, name in order:
        if group is not current:
            current = group
        out_lines.append((group, name))
    del seen


def _evacuation(queue, read, out):
    out("\nSIMULACIÓN DE EVACUACIÓN DE PASAJEROS\n")
    out("\nINICIANDO PROCESO DE EVACUACIÓN...\n")
    by_group = {group: [] for group in EvacuationGroup}
    for group, name in evacuation_order():
        by_group[group].append(name)
    for group in EvacuationGroup:
        out(_GROUP_HEADERS[group])
        for name in by_group[group]:
            out(f"Evacuando: {name}\n")
    out("\n¡EVACUACIÓN COMPLETADA CON ÉXITO!\n")


def _game(queue, read, out):
    out("\nJUEGO DE TURNOS\n")
    out("\nINICIANDO JUEGO...\n")

    def keeps_playing(name: str) -> bool:
        out(f"\n{name}: quieres retirarte (R) o seguir (S)? ")
        return _read_word(read)[0] in ("s", "S")

    for name, outcome in take_turns(keeps_playing=keeps_playing):
        if outcome is TurnOutcome.RETIRED:
            out(f"{name} se ha retirado del juego.\n")
            continue
        out(f"*** Turno de {name} ***\n")
        out(f"{name} ha completado su turno.\n")
        if outcome is TurnOutcome.LOST:
            out(_FULL)
    out("\nNo quedan más jugadores en el juego.\n")


def _reverse(queue, read, out):
    try:
        queue.reverse()
    except QueueEmptyError:
        out("cola vacia..\n")


def _remove_value(queue, read, out):
    if queue.is_empty():
        out("cola vacia...\n")
        return
    out("ingrese x: ")
    queue.remove_all(_read_word(read))


_ACTIONS = {
    1: _insert,
    2: _remove,
    3: _front,
    4: _show,
    5: _count,
    6: _search,
    7: _evacuation,
    8: _game,
    9: _reverse,
    10: _remove_value,
}


def run_queue_menu(
    read: Reader = input, write: Optional[Writer] = None
) -> BoundedQueue:
    """Run the queue menu until option 0 or end of input; return the queue."""
    out = write if write is not None else sys.stdout.write
    queue = BoundedQueue()
    while True:
        out(_MENU)
        try:
            option = _read_int(read)
            if option == 0:
                out("Programa finalizado.\n")
                return queue
            action = _ACTIONS.get(option)
            if action is None:
                out("Opción inválida.\n")
                continue
            action(queue, read, out)
        except _BadInput:
            out("Opción inválida.\n")
        except EOFError:
            return queue
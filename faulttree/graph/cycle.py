"""Cycle detection and topological ordering of gates.

These passes run outside the model: visitation state is kept in maps keyed by
gate id, so traversals never write into the gates. ``mark_order`` is the only
function that touches ``Gate.mark`` and requires exclusive use of the graph.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterable, List

import networkx as nx

from faulttree.errors import CycleError
from faulttree.graph.convert import gate_children, to_digraph
from faulttree.logging import get_logger

if TYPE_CHECKING:
    from faulttree.model.event import Gate

LOGGER = get_logger(__name__)

# WHITE = unvisited, GRAY = on the current path, BLACK = fully processed
WHITE, GRAY, BLACK = 0, 1, 2


def _find_cycle(start: "Gate", color: Dict[str, int]) -> List["Gate"]:
    """Iterative DFS from ``start``; return the cycle path or an empty list."""
    path: List["Gate"] = [start]
    color[start.id] = GRAY
    stack = [gate_children(start)]
    while stack:
        child = next(stack[-1], None)
        if child is None:
            stack.pop()
            color[path.pop().id] = BLACK
            continue
        state = color.get(child.id, WHITE)
        if state == GRAY:
            begin = next(i for i, gate in enumerate(path) if gate.id == child.id)
            return path[begin:] + [child]
        if state == WHITE:
            color[child.id] = GRAY
            path.append(child)
            stack.append(gate_children(child))
    return []


def detect_cycle(gate: "Gate") -> List["Gate"]:
    """Return the first cycle reachable from ``gate``.

    Returns:
        Gates along the cycle with the first gate repeated at the end, or an
        empty list if the subgraph is acyclic.
    """
    return _find_cycle(gate, {})


def check_cycles(gates: Iterable["Gate"]) -> None:
    """Ensure no cycle is reachable from any of ``gates``.

    Raises:
        CycleError: With the cycle path, e.g. ``TOP->G1->TOP``.
    """
    color: Dict[str, int] = {}
    for gate in gates:
        if color.get(gate.id, WHITE) != WHITE:
            continue
        cycle = _find_cycle(gate, color)
        if cycle:
            names = [g.name for g in cycle]
            raise CycleError(
                f"Detected a cycle in gate '{cycle[0].name}': {'->'.join(names)}",
                cycle=names,
            )


def topological_order(gates: Iterable["Gate"]) -> List["Gate"]:
    """Order gates so that every gate precedes its argument gates.

    Gates reachable from ``gates`` are included.

    Raises:
        CycleError: The gate graph is cyclic.
    """
    gates = list(gates)
    check_cycles(gates)
    graph = to_digraph(gates)
    order = [graph.nodes[node_id]["gate"] for node_id in nx.topological_sort(graph)]
    LOGGER.debug("Topological order of %d gates computed", len(order))
    return order


def mark_order(gates: Iterable["Gate"]) -> List["Gate"]:
    """Write each gate's topological position into its ``mark``.

    The caller must have exclusive access to the graph for the duration of
    the call and of any pass reading the marks.

    Returns:
        The gates in topological order.
    """
    order = topological_order(gates)
    for index, gate in enumerate(order):
        gate.mark = str(index)
    return order


def clear_marks(gates: Iterable["Gate"]) -> None:
    """Reset ``mark`` of the given gates to no mark."""
    for gate in gates:
        gate.mark = ""

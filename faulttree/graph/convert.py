"""Conversion of the gate graph into NetworkX graphs.

Gate-to-gate links are read through ``Gate.connector()``, ``Formula.nodes()``
and ``Formula.connectors()`` only; the model objects are not copied.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator

import networkx as nx

if TYPE_CHECKING:
    from faulttree.model.event import Gate


def gate_children(gate: "Gate") -> Iterator["Gate"]:
    """Yield gates that are arguments anywhere in ``gate``'s formula tree.

    A gate shared by several nested formulas is yielded once per reference.
    """
    formula = gate.connector()
    if formula is None:
        return
    pending = [formula]
    while pending:
        current = pending.pop()
        yield from current.nodes()
        pending.extend(current.connectors())


def to_digraph(gates: Iterable["Gate"]) -> nx.DiGraph:
    """Build a DiGraph of gates and of every gate reachable from them.

    Nodes are gate ids with the gate object stored in the ``gate`` attribute.
    An edge ``u -> v`` means gate ``v`` is an argument of ``u``'s formula tree.

    Args:
        gates: Starting gates.

    Returns:
        A NetworkX DiGraph, possibly cyclic.
    """
    graph = nx.DiGraph()
    pending = list(gates)
    while pending:
        gate = pending.pop()
        if gate.id in graph:
            continue
        graph.add_node(gate.id, gate=gate)
        for child in gate_children(gate):
            if child.id not in graph:
                pending.append(child)
    for node_id, data in list(graph.nodes(data=True)):
        for child in gate_children(data["gate"]):
            graph.add_edge(node_id, child.id)
    return graph

"""Graph passes over the gates of a fault tree."""

from faulttree.graph.convert import gate_children, to_digraph
from faulttree.graph.cycle import (
    check_cycles,
    clear_marks,
    detect_cycle,
    mark_order,
    topological_order,
)

__all__ = [
    "gate_children",
    "to_digraph",
    "check_cycles",
    "clear_marks",
    "detect_cycle",
    "mark_order",
    "topological_order",
]

"""Tests for gate graph conversion, cycle detection and ordering."""

import networkx as nx
import pytest

from faulttree.errors import CycleError
from faulttree.graph import (
    check_cycles,
    clear_marks,
    detect_cycle,
    gate_children,
    mark_order,
    to_digraph,
    topological_order,
)
from faulttree.model import BasicEvent, Formula, Gate


def _wire(gate: Gate, operator: str, *args) -> Gate:
    formula = Formula(operator)
    for arg in args:
        formula.add_argument(arg)
    gate.formula = formula
    return gate


@pytest.fixture
def diamond():
    """Top -> (Left, Right) -> Bottom, with Left reaching Bottom via a nested formula."""
    bottom = _wire(Gate("Bottom"), "and", BasicEvent("A"), BasicEvent("B"))
    right = _wire(Gate("Right"), "or", bottom, BasicEvent("C"))
    nested = Formula("and")
    nested.add_argument(bottom)
    nested.add_argument(BasicEvent("D"))
    left = _wire(Gate("Left"), "or", nested, BasicEvent("E"))
    top = _wire(Gate("Top"), "and", left, right)
    return top, left, right, bottom


class TestGraphConversion:
    def test_gate_children_follow_nested_formulas(self, diamond):
        top, left, right, bottom = diamond
        assert set(gate_children(top)) == {left, right}
        assert list(gate_children(left)) == [bottom]
        assert list(gate_children(bottom)) == []

    def test_gate_without_formula_has_no_children(self):
        assert list(gate_children(Gate("G"))) == []

    def test_to_digraph(self, diamond):
        top, left, right, bottom = diamond
        graph = to_digraph([top])
        assert isinstance(graph, nx.DiGraph)
        assert set(graph.nodes) == {"top", "left", "right", "bottom"}
        assert set(graph.edges) == {
            ("top", "left"),
            ("top", "right"),
            ("left", "bottom"),
            ("right", "bottom"),
        }
        assert graph.nodes["bottom"]["gate"] is bottom


class TestCycleDetection:
    def test_acyclic(self, diamond):
        top = diamond[0]
        assert detect_cycle(top) == []
        check_cycles(diamond)

    def test_self_loop(self):
        gate = Gate("Loop")
        formula = Formula("or")
        formula.add_argument(gate)
        formula.add_argument(BasicEvent("A"))
        gate.formula = formula
        assert [g.name for g in detect_cycle(gate)] == ["Loop", "Loop"]

    def test_cycle_through_nested_formula(self, diamond):
        top, left, right, bottom = diamond
        back = Formula("or")
        back.add_argument(BasicEvent("X"))
        back.add_argument(top)
        bottom.formula.add_argument(back)

        cycle = detect_cycle(top)
        assert cycle[0] is cycle[-1]
        assert [g.name for g in cycle][-2:] == ["Bottom", "Top"]

        with pytest.raises(CycleError) as exc_info:
            check_cycles([top])
        assert "->" in str(exc_info.value)
        assert exc_info.value.cycle[0] == exc_info.value.cycle[-1]

    def test_cycle_not_reachable_from_start(self):
        g1, g2 = Gate("G1"), Gate("G2")
        _wire(g1, "or", g2, BasicEvent("A"))
        _wire(g2, "or", g1, BasicEvent("B"))
        independent = _wire(Gate("Other"), "and", BasicEvent("C"), BasicEvent("D"))
        assert detect_cycle(independent) == []
        with pytest.raises(CycleError):
            check_cycles([independent, g1])

    def test_detection_does_not_touch_marks(self, diamond):
        for gate in diamond:
            gate.mark = "keep"
        check_cycles(diamond)
        assert all(gate.mark == "keep" for gate in diamond)


class TestTopologicalOrder:
    def test_parents_before_children(self, diamond):
        top, left, right, bottom = diamond
        order = topological_order([top])
        position = {gate.name: index for index, gate in enumerate(order)}
        assert len(order) == 4
        assert position["Top"] < position["Left"] < position["Bottom"]
        assert position["Right"] < position["Bottom"]

    def test_cyclic_graph(self):
        g1, g2 = Gate("G1"), Gate("G2")
        _wire(g1, "or", g2, BasicEvent("A"))
        _wire(g2, "or", g1, BasicEvent("B"))
        with pytest.raises(CycleError):
            topological_order([g1])

    def test_mark_order_and_clear(self, diamond):
        order = mark_order([diamond[0]])
        assert [gate.mark for gate in order] == ["0", "1", "2", "3"]
        assert diamond[0].mark == "0"
        assert diamond[3].mark == "3"
        clear_marks(order)
        assert all(gate.mark == "" for gate in diamond)

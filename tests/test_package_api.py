"""Smoke test of the public API re-exported by the package."""

import faulttree
from faulttree import BasicEvent, ConstantExpression, FaultTree, Formula, Gate, HouseEvent


def test_all_names_resolve():
    for name in faulttree.__all__:
        assert hasattr(faulttree, name), name


def test_docstring_example():
    pump, valve = BasicEvent("Pump"), BasicEvent("Valve")
    pump.expression = ConstantExpression(0.01)
    valve.expression = ConstantExpression(0.02)

    formula = Formula("or")
    formula.add_argument(pump)
    formula.add_argument(valve)

    top = Gate("TopEvent")
    top.formula = formula
    top.validate()


def test_two_out_of_three_model():
    """Build, validate and order a small k-out-of-n model."""
    pumps = []
    for name in ("PumpA", "PumpB", "PumpC"):
        pump = BasicEvent(name)
        pump.expression = ConstantExpression(0.05)
        pumps.append(pump)

    vote = Formula("atleast")
    for pump in pumps:
        vote.add_argument(pump)
    vote.vote_number = 2
    pumping = Gate("PumpingFails")
    pumping.formula = vote

    power = HouseEvent("PowerLoss")
    power.state = False
    top_formula = Formula("or")
    top_formula.add_argument(pumping)
    top_formula.add_argument(power)
    top = Gate("Top")
    top.formula = top_formula

    tree = FaultTree("CoolingSystem")
    for event in (top, pumping, power, *pumps):
        tree.add_event(event)
    tree.validate()

    assert tree.top_events() == [top]
    assert faulttree.topological_order(tree.top_events()) == [top, pumping]

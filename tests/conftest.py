"""Shared fixtures for fault tree tests."""

from __future__ import annotations

import pytest

from faulttree.model import BasicEvent, ConstantExpression, Formula, Gate, HouseEvent


def _make_basic(name: str, p: float = 0.1) -> BasicEvent:
    event = BasicEvent(name)
    event.expression = ConstantExpression(p)
    return event


def _make_gate(name: str, operator: str, *args) -> Gate:
    formula = Formula(operator)
    for arg in args:
        formula.add_argument(arg)
    gate = Gate(name)
    gate.formula = formula
    return gate


@pytest.fixture
def make_basic():
    """Factory of basic events with a constant probability."""
    return _make_basic


@pytest.fixture
def make_gate():
    """Factory of gates applying an operator to the given arguments."""
    return _make_gate


@pytest.fixture
def basic_events():
    """Three basic events A, B, C with constant probabilities."""
    return [_make_basic("A", 0.1), _make_basic("B", 0.2), _make_basic("C", 0.3)]


@pytest.fixture
def house_event():
    house = HouseEvent("Maintenance")
    house.state = True
    return house

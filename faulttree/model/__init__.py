"""Fault tree model: events, gates, formulas and the model registry."""

from faulttree.model.element import Element, Role
from faulttree.model.event import (
    BasicEvent,
    CcfEvent,
    Event,
    Gate,
    HouseEvent,
    PrimaryEvent,
)
from faulttree.model.expression import ConstantExpression, Expression, UniformDeviate
from faulttree.model.fault_tree import FaultTree
from faulttree.model.formula import Formula, Operator

__all__ = [
    "Element",
    "Role",
    "Event",
    "PrimaryEvent",
    "HouseEvent",
    "BasicEvent",
    "CcfEvent",
    "Gate",
    "Expression",
    "ConstantExpression",
    "UniformDeviate",
    "Formula",
    "Operator",
    "FaultTree",
]
